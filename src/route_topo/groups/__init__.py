"""Groups subpackage: user-defined node groups and membership matching.

Re-exports the public API for the groups module:
- GroupDefinition: frozen dataclass for a named, coloured member list
- KeyMatcher: matches hex tokens in any spelling against a canonical value
- find_group: first group containing a given identifier value
"""

from route_topo.groups.matcher import KeyMatcher, find_group
from route_topo.groups.models import (
    DEFAULT_GROUP_COLOR,
    GroupDefinition,
    split_member_tokens,
)

__all__ = [
    "DEFAULT_GROUP_COLOR",
    "GroupDefinition",
    "KeyMatcher",
    "find_group",
    "split_member_tokens",
]
