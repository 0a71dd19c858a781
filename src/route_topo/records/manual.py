"""Manual record construction, bypassing RecordParser.

Records typed in by hand must carry the same normalized identifier values as
parsed ones so that TreeBuilder links them identically.
"""

from __future__ import annotations

from collections.abc import Sequence

from route_topo.records.models import NodeRecord
from route_topo.tree.normalizer import HexKeyNormalizer

__all__ = ["MANUAL_RAW_LINE", "make_manual_record", "next_sequence_index"]

_normalizer = HexKeyNormalizer()

MANUAL_RAW_LINE = "Manually Added"
_DEFAULT_MAC = "000000000000"


def next_sequence_index(records: Sequence[NodeRecord]) -> int:
    """Return the sequence index to give the next manually added record."""
    return len(records) + 1


def make_manual_record(
    tei: str,
    pco: str,
    *,
    sequence_index: int,
    mac: str = "",
    level: int = 1,
    role: str = "(O)",
) -> NodeRecord:
    """Build a NodeRecord from hand-entered form values.

    The TEI is shown prefixed (``"02C"`` becomes ``"0x02C"``); the PCO is kept
    exactly as typed, the way it appears in capture files.  A TEI that does not
    normalize gets the value 0; a PCO that does not normalize gets no parent
    value.

    Args:
        tei:   Node identifier, hex with or without "0x".
        pco:   Parent identifier, hex with or without "0x".
        sequence_index: Position to assign; see ``next_sequence_index``.
        mac:   Hardware address.  Blank means all zeros.
        level: Hierarchy level hint.
        role:  Role tag, e.g. "(STA)".

    Returns:
        A NodeRecord whose raw_line is ``MANUAL_RAW_LINE``.

    Raises:
        ValueError: If ``tei`` is blank.
    """
    tei = tei.strip()
    if not tei:
        msg = "tei must be a non-empty hex identifier"
        raise ValueError(msg)

    tei_text = tei if tei.lower().startswith("0x") else f"0x{tei}"
    pco_text = pco.strip()
    tei_value = _normalizer.normalize(tei_text)
    pco_value = _normalizer.normalize(pco_text)

    return NodeRecord(
        sequence_index=sequence_index,
        mac_address=mac.strip() or _DEFAULT_MAC,
        identifier_text=tei_text,
        identifier_value=tei_value if tei_value is not None else 0,
        role_tag=role,
        ro_flag=1,
        parent_reference_text=pco_text,
        parent_reference_value=pco_value,
        hierarchy_level=level,
        next_hop="000",
        received_signal_strength=0,
        signal_to_noise_ratio=0.0,
        raw_line=MANUAL_RAW_LINE,
    )
