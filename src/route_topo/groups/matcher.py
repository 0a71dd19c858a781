"""KeyMatcher: decides group membership by canonical identifier value.

A token matches a node when its base-16 value equals the node's canonical
identifier value.  This is the same rule RecordParser applies to TEI and PCO
columns, so group membership and tree linkage can never disagree about which
node a token names.

Token handling:
- surrounding whitespace is stripped
- blank tokens never match
- unparseable tokens never match and never raise
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

from route_topo.cache import HexTokenCache
from route_topo.protocols import GroupLike

__all__ = ["KeyMatcher", "find_group"]

G = TypeVar("G", bound=GroupLike)


class KeyMatcher:
    """Matches identifier tokens against a canonical identifier value.

    Each instance owns a ``HexTokenCache`` so repeated lookups with the same
    member lists do not re-parse their tokens.  The cache is not thread-safe, so
    an instance must not be shared between threads without a lock.

    Example::

        matcher = KeyMatcher()
        matcher.matches(["0x02C", "033"], 0x2C)   # True
        matcher.matches([" ", "zz"], 0x2C)        # False
    """

    def __init__(self, max_cache_size: int = 1024) -> None:
        self._cache = HexTokenCache(max_size=max_cache_size)

    def matches(self, candidate_tokens: Iterable[str], canonical_value: int) -> bool:
        """Return True if any token normalizes to exactly ``canonical_value``.

        Args:
            candidate_tokens: Identifier tokens in any hex spelling.
            canonical_value:  The node's canonical identifier value.

        Returns:
            True on the first matching token; False when none match.
        """
        for token in candidate_tokens:
            stripped = token.strip()
            if not stripped:
                continue
            if self._cache.normalize(stripped) == canonical_value:
                return True
        return False

    def find_group(self, groups: Sequence[G], canonical_value: int) -> G | None:
        """Return the first group (definition order) containing the value."""
        for group in groups:
            if self.matches(group.members, canonical_value):
                return group
        return None


def find_group(groups: Sequence[G], canonical_value: int) -> G | None:
    """Return the first group whose members include ``canonical_value``.

    Uses a fresh ``KeyMatcher`` per call; hold a ``KeyMatcher`` to reuse its
    token cache across lookups.
    """
    return KeyMatcher().find_group(groups, canonical_value)
