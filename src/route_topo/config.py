"""TopologyConfig: parsing and reconstruction parameters.

TopologyConfig is a frozen (immutable) dataclass. Every public entry point
accepts an optional config; ``None`` means ``TopologyConfig()``.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["TopologyConfig"]


@dataclass(frozen=True, slots=True)
class TopologyConfig:
    """Immutable configuration for record parsing and tree reconstruction.

    Attributes:
        root_sequence_index: Sequence index that marks the root record.
            The first record carrying it becomes the root.  Default 0.
        root_identifier_value: Identifier value used to pick the root when no
            record carries ``root_sequence_index``.  Default 1 (the CCO).
        comment_prefix: Lines starting with this text (after leading
            whitespace) are ignored by the parser.  Default "#".
        token_cache_size: Maximum number of normalized group-member tokens
            held by each KeyMatcher.  Default 1024.
    """

    root_sequence_index: int = 0
    root_identifier_value: int = 1
    comment_prefix: str = "#"
    token_cache_size: int = 1024

    def __post_init__(self) -> None:
        if self.root_sequence_index < 0:
            msg = f"root_sequence_index must be >= 0, got {self.root_sequence_index}"
            raise ValueError(msg)
        if self.root_identifier_value < 0:
            msg = (
                "root_identifier_value must be >= 0, "
                f"got {self.root_identifier_value}"
            )
            raise ValueError(msg)
        if not self.comment_prefix:
            msg = "comment_prefix must be a non-empty string"
            raise ValueError(msg)
        if self.token_cache_size < 1:
            msg = f"token_cache_size must be >= 1, got {self.token_cache_size}"
            raise ValueError(msg)
