"""ParseResult and TopologyStats frozen dataclasses.

This module provides the result types returned by ``load_topology`` and
``compute_stats``.
"""

from __future__ import annotations

from dataclasses import dataclass

from route_topo.records.models import NodeRecord
from route_topo.tree.nodes import TreeNode

__all__ = ["NO_VALID_DATA", "ParseResult", "TopologyStats"]

NO_VALID_DATA = "No valid data found in file."


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of parsing capture text and rebuilding its tree.

    Attributes:
        records: Parsed NodeRecords in input order.  Empty on failure.
        root:    Root of the rebuilt tree, or None when there are no records.
        error:   ``NO_VALID_DATA`` when no line yielded a usable record,
                 otherwise None.
    """

    records: tuple[NodeRecord, ...]
    root: TreeNode | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True when at least one record was parsed."""
        return self.error is None


@dataclass(frozen=True, slots=True)
class TopologyStats:
    """Summary figures for a record set.

    Attributes:
        total_nodes:  Number of records.
        max_level:    Highest hierarchy level hint in the capture.
        parent_count: Records whose identifier is referenced as a parent by
            at least one record.
        tree_depth:   Number of levels in the rebuilt tree.
        mean_rssi:    Mean received signal strength (dBm).
        min_rssi:     Weakest received signal strength (dBm).
        max_rssi:     Strongest received signal strength (dBm).
        mean_snr:     Mean signal-to-noise ratio.
    """

    total_nodes: int
    max_level: int
    parent_count: int
    tree_depth: int
    mean_rssi: float
    min_rssi: float
    max_rssi: float
    mean_snr: float
