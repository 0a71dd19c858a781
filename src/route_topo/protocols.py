"""GroupLike Protocol for group-membership lookups.

Defines the structural interface group objects must satisfy to be used with
``find_group`` and ``TopologySession.color_for``.  Callers can pass their own
group objects without inheriting from any base class.

Example::

    from route_topo.protocols import GroupLike

    class SavedGroup:
        def __init__(self) -> None:
            self.name = "Layer 2"
            self.color = "#8b5cf6"
            self.members = ["0x02C", "033"]

    assert isinstance(SavedGroup(), GroupLike)  # True: structural conformance
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class GroupLike(Protocol):
    """Structural protocol for a named, coloured set of member identifiers.

    ``members`` holds identifier tokens in any hex spelling ("0x02C", "02c",
    "2C").  Blank or unparseable tokens are ignored during matching.
    """

    name: str
    color: str
    members: Sequence[str]
