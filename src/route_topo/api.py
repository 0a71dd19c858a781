"""Public API functions for route-topo.

This module provides the user-facing functions: parse_lines, build_tree,
matches_any, load_topology, add_record and find_group.  Parsing and tree
reconstruction and group matching create fresh worker objects per call, so
there is no global state mutation between calls.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from route_topo.config import TopologyConfig
from route_topo.groups.matcher import KeyMatcher, find_group
from route_topo.records.models import NodeRecord
from route_topo.records.parser import RecordParser
from route_topo.result import NO_VALID_DATA, ParseResult
from route_topo.tree.builder import TreeBuilder
from route_topo.tree.nodes import TreeNode

__all__ = [
    "add_record",
    "build_tree",
    "find_group",
    "load_topology",
    "matches_any",
    "parse_lines",
]

def parse_lines(
    text: str,
    config: TopologyConfig | None = None,
) -> tuple[NodeRecord, ...]:
    """Parse capture text into NodeRecords, skipping unusable lines.

    Args:
        text:   Full capture text.
        config: Parsing parameters.  Defaults to ``TopologyConfig()`` when None.

    Returns:
        NodeRecords in input order.  An empty tuple means no valid data.
    """
    return RecordParser(config=config).parse(text)


def build_tree(
    records: Sequence[NodeRecord],
    config: TopologyConfig | None = None,
) -> TreeNode | None:
    """Rebuild the rooted topology tree from ``records``.

    Args:
        records: NodeRecords in input order, parsed or manually created.
        config:  Root-selection parameters.  Defaults to ``TopologyConfig()``.

    Returns:
        The root TreeNode, or None for an empty record sequence.
    """
    return TreeBuilder(config=config).build(records)


def matches_any(tokens: Iterable[str], canonical_value: int) -> bool:
    """Return True if any token's base-16 value equals ``canonical_value``.

    Blank and unparseable tokens are ignored.

    Args:
        tokens:          Identifier tokens in any hex spelling.
        canonical_value: The node's canonical identifier value.
    """
    return KeyMatcher().matches(tokens, canonical_value)


def load_topology(text: str, config: TopologyConfig | None = None) -> ParseResult:
    """Parse capture text and rebuild its tree in one call.

    Args:
        text:   Full capture text.
        config: Parsing and root-selection parameters.

    Returns:
        A ``ParseResult``.  When no line is usable, ``error`` is
        ``NO_VALID_DATA``, ``records`` is empty and ``root`` is None.
    """
    records = parse_lines(text, config=config)
    if not records:
        return ParseResult(records=(), root=None, error=NO_VALID_DATA)
    return ParseResult(records=records, root=build_tree(records, config=config))


def add_record(
    records: Sequence[NodeRecord],
    record: NodeRecord,
) -> tuple[NodeRecord, ...]:
    """Return a new record tuple with ``record`` appended.

    The input sequence is not modified; rebuild the tree from the result.
    """
    return (*records, record)

