"""GroupDefinition frozen dataclass for user-defined node groups."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["DEFAULT_GROUP_COLOR", "GroupDefinition", "split_member_tokens"]

DEFAULT_GROUP_COLOR = "#8b5cf6"

# Member lists are typed as free text: newlines, commas and spaces all separate
_MEMBER_SEP = re.compile(r"[\n,\s]+")


def split_member_tokens(text: str) -> tuple[str, ...]:
    """Split free-form member text into non-empty identifier tokens.

    >>> split_member_tokens("0x02C, 0x033\\n008")
    ('0x02C', '0x033', '008')
    """
    return tuple(token for token in _MEMBER_SEP.split(text) if token)


@dataclass(frozen=True, slots=True)
class GroupDefinition:
    """A named, coloured set of member identifiers.

    Members are stored exactly as typed; matching normalizes them lazily
    through KeyMatcher, so "0x02C", "02c" and "2C" all select the same node.

    Attributes:
        name:    Display name.  Must be non-empty.
        color:   Display colour, e.g. "#8b5cf6".
        members: Identifier tokens in any hex spelling.
    """

    name: str
    color: str = DEFAULT_GROUP_COLOR
    members: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.name.strip():
            msg = "group name must be a non-empty string"
            raise ValueError(msg)

    @classmethod
    def from_text(
        cls,
        name: str,
        members_text: str,
        color: str = DEFAULT_GROUP_COLOR,
    ) -> GroupDefinition:
        """Create a group from a free-form member list such as "0x02C, 0x033"."""
        return cls(name=name, color=color, members=split_member_tokens(members_text))
