"""TreeBuilder: reconstructs one rooted TreeNode hierarchy from NodeRecords.

Records reference their parent only by identifier value.  Reconstruction runs
in three linear steps:

1. Pick the root: the record with sequence index 0, else the record with
   identifier value 1, else the first record.
2. Index identifier values to record positions.  The first record carrying a
   value owns it; later duplicates are still placed, but never receive
   children.
3. Resolve every record's parent by walking its chain of parent references
   with an explicit per-record state (unvisited / resolving / done).  No
   recursion is used, so deep chains cannot exhaust the stack.

Malformed links never raise.  They are re-parented under the root, where
they stay visible:
- self-reference (parent value == own value)
- unresolvable parent value
- a parent reference that closes a cycle on the chain being resolved

Children of every node keep input order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from route_topo.config import TopologyConfig
from route_topo.records.models import NodeRecord
from route_topo.tree.nodes import TreeNode

logger = logging.getLogger(__name__)


class _State(IntEnum):
    UNVISITED = 0
    RESOLVING = 1
    DONE = 2


@dataclass
class TreeBuilder:
    """Builds a single rooted tree from an ordered sequence of NodeRecords.

    The builder is stateless: every ``build`` call returns a brand-new tree and
    two calls on the same records produce structurally identical trees.

    Orphan policy:
        A record whose parent cannot be used (self-reference, unknown parent
        value, or cycle) becomes a direct child of the root.  Its own
        descendants still resolve against it normally, so re-parenting never
        cascades beyond the orphan itself.

    Example::
        builder = TreeBuilder()
        root = builder.build(RecordParser().parse(text))
        # root.label == "0x001"; root.children in input order
    """

    config: TopologyConfig | None = None

    def build(self, records: Sequence[NodeRecord]) -> TreeNode | None:
        """Reconstruct the topology tree.

        Args:
            records: NodeRecords in input order.

        Returns:
            The root TreeNode, or None when ``records`` is empty.

        Raises:
            TypeError: If any element is not a NodeRecord.
        """
        for record in records:
            if not isinstance(record, NodeRecord):
                raise TypeError(f"Expected NodeRecord, got {type(record)!r}")

        if not records:
            return None

        config = self.config if self.config is not None else TopologyConfig()
        root_pos = select_root(records, config)

        # First occurrence wins on duplicate identifier values
        owner: dict[int, int] = {}
        for pos, record in enumerate(records):
            owner.setdefault(record.identifier_value, pos)

        parents = self._resolve_parents(records, owner, root_pos)

        nodes = [TreeNode(label=r.identifier_text, record=r) for r in records]
        for pos, parent_pos in enumerate(parents):
            if parent_pos is not None:
                nodes[parent_pos].children.append(nodes[pos])

        return nodes[root_pos]

    def _resolve_parents(
        self,
        records: Sequence[NodeRecord],
        owner: dict[int, int],
        root_pos: int,
    ) -> list[int | None]:
        """Return the parent position of every record (None for the root only)."""
        count = len(records)
        parents: list[int | None] = [None] * count
        state = [_State.UNVISITED] * count
        state[root_pos] = _State.DONE
        orphans = self_refs = cycles = 0

        for start in range(count):
            chain: list[int] = []
            pos = start
            while state[pos] is _State.UNVISITED:
                state[pos] = _State.RESOLVING
                chain.append(pos)
                record = records[pos]
                parent_value = record.parent_reference_value
                target = owner.get(parent_value) if parent_value is not None else None

                if record.is_self_referencing:
                    self_refs += 1
                    logger.debug(
                        "Node %s references itself; attaching under root",
                        record.identifier_text,
                    )
                    parents[pos] = root_pos
                    break
                if target is None:
                    orphans += 1
                    logger.debug(
                        "Node %s has unknown parent %s; attaching under root",
                        record.identifier_text,
                        record.parent_reference_text,
                    )
                    parents[pos] = root_pos
                    break
                if state[target] is _State.RESOLVING:
                    cycles += 1
                    logger.debug(
                        "Node %s closes a cycle via parent %s; attaching under root",
                        record.identifier_text,
                        record.parent_reference_text,
                    )
                    parents[pos] = root_pos
                    break

                parents[pos] = target
                # An unvisited parent is resolved next on the same chain
                pos = target

            for visited in chain:
                state[visited] = _State.DONE

        if orphans or self_refs or cycles:
            logger.info(
                "Re-parented under root: %d orphaned, %d self-referencing, "
                "%d cycle breaks",
                orphans,
                self_refs,
                cycles,
            )
        return parents


def select_root(records: Sequence[NodeRecord], config: TopologyConfig) -> int:
    """Return the position of the root record.

    Preference order: first record with ``config.root_sequence_index``, then
    first record with ``config.root_identifier_value``, then the first record.
    """
    for pos, record in enumerate(records):
        if record.sequence_index == config.root_sequence_index:
            return pos
    for pos, record in enumerate(records):
        if record.identifier_value == config.root_identifier_value:
            return pos
    return 0
