"""NodeRecord frozen dataclass: one parsed line of a topology capture."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["NodeRecord"]


@dataclass(frozen=True, slots=True)
class NodeRecord:
    """One node of the captured network, as read from a single input line.

    Identifier fields are kept twice: the text exactly as written, and the
    canonical base-16 value produced by ``HexKeyNormalizer``.  Only the values
    take part in parent/child linkage.

    Attributes:
        sequence_index:  Position column of the capture.  0 marks the root.
        mac_address:     Hardware address, opaque (12 hex chars, no separators).
        identifier_text: TEI as written (e.g. "0x02C").
        identifier_value: Canonical value of the TEI; the node's primary key.
        role_tag:        Role annotation such as "(CCO)" or "(STA)".  Descriptive only.
        ro_flag:         RO column.
        parent_reference_text: PCO as written (e.g. "001").
        parent_reference_value: Canonical value of the PCO, or None when the PCO
            text has no hex digits (the node then has no resolvable parent).
        hierarchy_level: LV column.  Advisory; the tree is rebuilt structurally.
        next_hop:        NXH column, passed through unparsed.
        received_signal_strength: RSSI in dBm.
        signal_to_noise_ratio: SNR.
        raw_line:        The untouched source line.
    """

    sequence_index: int
    mac_address: str
    identifier_text: str
    identifier_value: int
    role_tag: str
    ro_flag: int
    parent_reference_text: str
    parent_reference_value: int | None
    hierarchy_level: int
    next_hop: str
    received_signal_strength: int
    signal_to_noise_ratio: float
    raw_line: str

    @property
    def is_self_referencing(self) -> bool:
        """True when the record names itself as its own parent."""
        return self.parent_reference_value == self.identifier_value

    @property
    def is_root_candidate(self) -> bool:
        """True for the conventional top-of-network record (index 0 or TEI 1)."""
        return self.sequence_index == 0 or self.identifier_value == 1
