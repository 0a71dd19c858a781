"""TopologySession: the current record set and groups, with a derived tree.

The session is the single place holding mutable state.  The tree and the
statistics are never patched: every change to the record set bumps a version
counter, and the next read recomputes both in full from the current records
through the pure ``build_tree`` / ``compute_stats`` functions.

Architecture:
- ``load_text`` parses capture text.  When it yields no record the record set
  is cleared and the ``NO_VALID_DATA`` message is returned.
- ``add_record`` appends a (typically manually created) record.
- ``set_groups`` replaces the group list; groups do not affect the tree.
- A single lock serializes mutation and recomputation; concurrent writers
  simply supersede each other (last write wins).
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence

from route_topo.api import add_record, build_tree, parse_lines
from route_topo.config import TopologyConfig
from route_topo.groups.matcher import KeyMatcher
from route_topo.protocols import GroupLike
from route_topo.records.manual import next_sequence_index
from route_topo.records.models import NodeRecord
from route_topo.result import NO_VALID_DATA, TopologyStats
from route_topo.stats import compute_stats
from route_topo.tree.nodes import NodeRole, TreeNode

__all__ = ["ROLE_COLORS", "TopologySession"]

logger = logging.getLogger(__name__)

ROLE_COLORS: dict[NodeRole, str] = {
    NodeRole.CCO: "#ef4444",
    NodeRole.PCO: "#3b82f6",
    NodeRole.STA: "#10b981",
}


class TopologySession:
    """Holds the current record set and groups for an interactive front end.

    Example::

        session = TopologySession()
        error = session.load_text(capture_text)
        if error is None:
            root = session.tree
            print(session.stats.total_nodes)
    """

    def __init__(self, config: TopologyConfig | None = None) -> None:
        """Initialise an empty session.

        Args:
            config: Parsing, root-selection and token-cache parameters.
                Defaults to ``TopologyConfig()`` when None.
        """
        self._config: TopologyConfig = (
            config if config is not None else TopologyConfig()
        )
        self._lock = threading.Lock()
        self._records: tuple[NodeRecord, ...] = ()
        self._groups: tuple[GroupLike, ...] = ()
        self._version = 0
        self._built_version = -1
        self._tree: TreeNode | None = None
        self._stats: TopologyStats | None = None
        self._matcher = KeyMatcher(max_cache_size=self._config.token_cache_size)
        self.source_name: str | None = None

    # ------------------------------------------------------------------
    # Record set
    # ------------------------------------------------------------------

    @property
    def records(self) -> tuple[NodeRecord, ...]:
        """The current record set, in input order."""
        return self._records

    @property
    def version(self) -> int:
        """Counter bumped on every change to the record set."""
        return self._version

    def load_text(self, text: str, source_name: str | None = None) -> str | None:
        """Replace the record set with the records parsed from ``text``.

        Args:
            text:        Full capture text.
            source_name: Optional label for where the text came from.

        Returns:
            None on success, or ``NO_VALID_DATA`` when no line was usable (the
            record set is left empty in that case).
        """
        records = parse_lines(text, config=self._config)
        if not records:
            logger.info("No usable records in %s", source_name or "input")
        with self._lock:
            self._records = records
            self.source_name = source_name
            self._version += 1
        return None if records else NO_VALID_DATA

    def add_record(self, record: NodeRecord) -> None:
        """Append ``record`` to the current record set."""
        with self._lock:
            self._records = add_record(self._records, record)
            self._version += 1

    def next_sequence_index(self) -> int:
        """Sequence index to give the next manually added record."""
        return next_sequence_index(self._records)

    def clear(self) -> None:
        """Drop every record; the tree becomes None."""
        with self._lock:
            self._records = ()
            self.source_name = None
            self._version += 1

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def tree(self) -> TreeNode | None:
        """Root of the tree rebuilt from the current record set."""
        self._refresh()
        return self._tree

    @property
    def stats(self) -> TopologyStats | None:
        """Summary figures for the current record set."""
        self._refresh()
        return self._stats

    def _refresh(self) -> None:
        with self._lock:
            if self._built_version == self._version:
                return
            self._tree = build_tree(self._records, config=self._config)
            self._stats = compute_stats(self._records, self._tree)
            self._built_version = self._version
            logger.debug(
                "Rebuilt tree for version %d (%d records)",
                self._version,
                len(self._records),
            )

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    @property
    def groups(self) -> tuple[GroupLike, ...]:
        """The current groups, in definition order."""
        return self._groups

    def set_groups(self, groups: Sequence[GroupLike]) -> None:
        """Replace the group list."""
        with self._lock:
            self._groups = tuple(groups)

    def group_for(self, node: TreeNode) -> GroupLike | None:
        """Return the first group containing ``node``, or None."""
        with self._lock:
            return self._matcher.find_group(
                self._groups, node.record.identifier_value
            )

    def color_for(self, node: TreeNode) -> str:
        """Return the display colour for ``node``.

        The first matching group's colour wins; otherwise the colour of the
        node's role (CCO, PCO or STA).
        """
        group = self.group_for(node)
        if group is not None:
            return group.color
        return ROLE_COLORS[node.role]
