"""Route topo - spanning-tree reconstruction for powerline mesh captures."""

from __future__ import annotations

from route_topo.api import (
    add_record,
    build_tree,
    find_group,
    load_topology,
    matches_any,
    parse_lines,
)
from route_topo.config import TopologyConfig
from route_topo.groups import GroupDefinition, KeyMatcher
from route_topo.records import NodeRecord, RecordParser, make_manual_record
from route_topo.result import NO_VALID_DATA, ParseResult, TopologyStats
from route_topo.session import TopologySession
from route_topo.stats import compute_stats
from route_topo.tree import HexKeyNormalizer, NodeRole, TreeBuilder, TreeNode

__version__: str = "0.1.0"
__all__: list[str] = [
    "NO_VALID_DATA",
    "GroupDefinition",
    "HexKeyNormalizer",
    "KeyMatcher",
    "NodeRecord",
    "NodeRole",
    "ParseResult",
    "RecordParser",
    "TopologyConfig",
    "TopologySession",
    "TopologyStats",
    "TreeBuilder",
    "TreeNode",
    "add_record",
    "build_tree",
    "compute_stats",
    "find_group",
    "load_topology",
    "make_manual_record",
    "matches_any",
    "parse_lines",
]
