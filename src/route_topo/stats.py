"""Summary statistics over a parsed record set.

Signal figures are aggregated with numpy.  ``parent_count`` is computed from
the raw parent references rather than the rebuilt tree, so a self-referencing
root still counts as a parent, matching what the capture itself claims.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from route_topo.records.models import NodeRecord
from route_topo.result import TopologyStats
from route_topo.tree.nodes import TreeNode

__all__ = ["compute_stats"]


def compute_stats(
    records: Sequence[NodeRecord],
    root: TreeNode | None = None,
) -> TopologyStats | None:
    """Compute summary figures for ``records``.

    Args:
        records: Parsed records, any order.
        root:    The tree rebuilt from ``records``.  When None, ``tree_depth``
                 is reported as 0.

    Returns:
        A TopologyStats, or None for an empty record set.
    """
    if not records:
        return None

    rssi = np.array([r.received_signal_strength for r in records], dtype=float)
    snr = np.array([r.signal_to_noise_ratio for r in records], dtype=float)
    levels = np.array([r.hierarchy_level for r in records], dtype=int)

    referenced = {r.parent_reference_value for r in records}
    parent_count = sum(1 for r in records if r.identifier_value in referenced)

    return TopologyStats(
        total_nodes=len(records),
        max_level=max(int(levels.max()), 0),
        parent_count=parent_count,
        tree_depth=root.depth() if root is not None else 0,
        mean_rssi=float(np.mean(rssi)),
        min_rssi=float(np.min(rssi)),
        max_rssi=float(np.max(rssi)),
        mean_snr=float(np.mean(snr)),
    )
