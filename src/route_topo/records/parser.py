"""RecordParser: converts raw capture text into an ordered tuple of NodeRecords.

Expected column layout (whitespace separated)::

    IDX  ROLE    MAC           TEI    RO  PCO  LV  NXH  RSSI  SNR
    0    (CCO)   7cc294ff2501  0x001  1   001  0   000  0     0
    1    (PCO)   7cc294ff2572  0x02C  1   001  1   02C  -48   31.5

Parsing is tolerant:
- Blank lines and comment lines are skipped.
- The ROLE column is optional; it is recognised by its parenthesised form.
- A line without a usable TEI token is skipped (header rows included).  A
  PCO token that does not normalize is kept with no parent value, so the
  node is placed under the root instead of disappearing.
- LV, NXH, RSSI and SNR may be missing; numeric fields that fail to parse
  default to zero instead of dropping the line.

Output order is input order.  It is the tie-break every later stage relies on.
"""

from __future__ import annotations

import logging
import re

from route_topo.config import TopologyConfig
from route_topo.records.models import NodeRecord
from route_topo.tree.normalizer import HexKeyNormalizer

logger = logging.getLogger(__name__)

# Module-level normalizer (stateless, safe to share)
_normalizer = HexKeyNormalizer()

# Role tags are always wrapped in parentheses: "(O)", "(CCO)", "(PCO)", "(STA)"
_ROLE = re.compile(r"^\(.*\)$")

# IDX, MAC, TEI, RO, PCO
_MIN_COLUMNS = 5


def _to_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        return 0


def _to_float(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        return 0.0


class RecordParser:
    """Parses topology capture text into NodeRecords.

    Stateless apart from its configuration; ``parse`` may be called any number
    of times and never raises for malformed lines.

    Example::
        parser = RecordParser()
        records = parser.parse("0 (CCO) 7cc294ff2501 0x001 1 001 0 000 0 0")
        records[0].identifier_value   # 1
    """

    def __init__(self, config: TopologyConfig | None = None) -> None:
        self._config: TopologyConfig = (
            config if config is not None else TopologyConfig()
        )

    def parse(self, raw_text: str) -> tuple[NodeRecord, ...]:
        """Parse every line of ``raw_text``, skipping lines that cannot be used.

        Args:
            raw_text: Full capture text, any line endings.

        Returns:
            Tuple of NodeRecords in input order.  Empty when no line is usable;
            callers surface that as "no valid data".
        """
        records: list[NodeRecord] = []
        skipped = 0
        for line_number, line in enumerate(raw_text.splitlines(), start=1):
            record = self.parse_line(line)
            if record is None:
                if line.strip():
                    skipped += 1
                    logger.debug("Skipping line %d: %r", line_number, line)
                continue
            records.append(record)

        logger.info("Parsed %d records (%d lines skipped)", len(records), skipped)
        return tuple(records)

    def parse_line(self, line: str) -> NodeRecord | None:
        """Parse a single capture line.

        Args:
            line: One line of capture text, without its line terminator.

        Returns:
            A NodeRecord, or None for blank, comment, header or truncated lines.
        """
        stripped = line.strip()
        if not stripped or stripped.startswith(self._config.comment_prefix):
            return None

        tokens = stripped.split()
        index_token = tokens[0]
        role = ""
        rest = tokens[1:]
        if rest and _ROLE.match(rest[0]):
            role = rest[0]
            rest = rest[1:]

        # rest: MAC TEI RO PCO [LV [NXH [RSSI [SNR]]]]
        if len(rest) < _MIN_COLUMNS - 1:
            return None

        mac, tei, ro, pco, *optional = rest
        tei_value = _normalizer.normalize(tei)
        if tei_value is None:
            return None
        # An unparseable PCO leaves the node without a resolvable parent
        pco_value = _normalizer.normalize(pco)

        # Pad the optional trailing columns: LV, NXH, RSSI, SNR
        level, nxh, rssi, snr = (optional + ["", "", "", ""])[:4]

        return NodeRecord(
            sequence_index=_to_int(index_token),
            mac_address=mac,
            identifier_text=tei,
            identifier_value=tei_value,
            role_tag=role,
            ro_flag=_to_int(ro),
            parent_reference_text=pco,
            parent_reference_value=pco_value,
            hierarchy_level=_to_int(level),
            next_hop=nxh,
            received_signal_strength=_to_int(rssi),
            signal_to_noise_ratio=_to_float(snr),
            raw_line=line,
        )
