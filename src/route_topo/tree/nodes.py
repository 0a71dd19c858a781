"""TreeNode dataclass and NodeRole StrEnum for the reconstructed topology.

TreeBuilder produces a fresh TreeNode hierarchy on every call.  Each TreeNode
owns exactly one NodeRecord; a record never appears at two tree positions.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from route_topo.records.models import NodeRecord


class NodeRole(StrEnum):
    """Display role of a node within the reconstructed tree.

    - CCO -> "CCO" : the coordinator at the top of the network
    - PCO -> "PCO" : a proxy coordinator relaying for at least one child
    - STA -> "STA" : a leaf station
    """

    CCO = "CCO"
    PCO = "PCO"
    STA = "STA"


@dataclass(slots=True)
class TreeNode:
    """A node in the reconstructed topology tree.

    Attributes:
        label:    Display identifier, the record's TEI text (e.g. "0x02C").
        record:   The NodeRecord this position was built from.
        children: Child nodes in input order.  Must use
                  field(default_factory=list) so each instance owns its list.
    """

    label: str
    record: NodeRecord
    children: list[TreeNode] = field(default_factory=list)

    @property
    def role(self) -> NodeRole:
        """CCO for a root candidate, PCO when relaying for children, else STA."""
        if self.record.is_root_candidate:
            return NodeRole.CCO
        if self.children:
            return NodeRole.PCO
        return NodeRole.STA

    def iter_nodes(self) -> Iterator[TreeNode]:
        """Yield this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            # Reversed so the first child is visited first
            stack.extend(reversed(node.children))

    def size(self) -> int:
        """Total number of nodes in this subtree, including this one."""
        return sum(1 for _ in self.iter_nodes())

    def depth(self) -> int:
        """Number of levels in this subtree.  A lone node has depth 1."""
        deepest = 0
        stack = [(self, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.children)
        return deepest

    def find(self, identifier_value: int) -> TreeNode | None:
        """Return the first node (pre-order) with the given identifier value."""
        for node in self.iter_nodes():
            if node.record.identifier_value == identifier_value:
                return node
        return None
