"""HexTokenCache: LRU-backed caching proxy around HexKeyNormalizer.

Group member lists are matched against every node of every rebuilt tree, so
the same handful of tokens is normalized over and over.  HexTokenCache keeps
the normalized value of each raw token in memory; LRU eviction occurs
silently when ``max_size`` is exceeded.

Unparseable tokens are cached too (as None) so they are rejected without
re-running the regex.

Each ``HexTokenCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state.

Example::

    from route_topo.cache import HexTokenCache

    cache = HexTokenCache(max_size=256)
    cache.normalize("0x02C")   # 44, computed
    cache.normalize("0x02C")   # 44, served from memory
"""

from __future__ import annotations

from cachetools import LRUCache

from route_topo.tree.normalizer import HexKeyNormalizer

__all__ = ["HexTokenCache"]


class HexTokenCache:
    """LRU-backed proxy around a HexKeyNormalizer.

    Offers the same ``normalize`` surface as the normalizer it wraps.

    Args:
        normalizer: The normalizer to delegate cache misses to.  Defaults to a
            fresh ``HexKeyNormalizer``.
        max_size: Maximum number of raw tokens to hold.  Defaults to 1024.
    """

    def __init__(
        self,
        normalizer: HexKeyNormalizer | None = None,
        max_size: int = 1024,
    ) -> None:
        self._normalizer = normalizer if normalizer is not None else HexKeyNormalizer()
        self._cache: LRUCache[str, int | None] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Normalizer surface
    # ------------------------------------------------------------------

    def normalize(self, token: str) -> int | None:
        """Return the canonical value of ``token``; only misses hit the normalizer."""
        try:
            return self._cache[token]
        except KeyError:
            value = self._normalizer.normalize(token)
            self._cache[token] = value
            return value

    def clear(self) -> None:
        """Drop every cached entry."""
        self._cache.clear()
