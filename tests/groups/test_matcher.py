"""Tests for KeyMatcher and find_group.

Covers:
- Equivalent spellings match the same canonical value
- Blank and unparseable tokens are ignored, never raised
- First-match group lookup in definition order
- Structural GroupLike objects are accepted
- Per-instance token cache
"""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from route_topo.groups.matcher import KeyMatcher, find_group
from route_topo.groups.models import GroupDefinition


@pytest.fixture
def matcher() -> KeyMatcher:
    """A fresh KeyMatcher with its own token cache."""
    return KeyMatcher()


class TestMatches:
    def test_prefixed_and_bare_spellings(self, matcher: KeyMatcher) -> None:
        assert matcher.matches(["0x02C", "02c"], 0x2C) is True

    def test_unpadded_spelling(self, matcher: KeyMatcher) -> None:
        assert matcher.matches(["2C"], 0x2C) is True

    def test_no_match(self, matcher: KeyMatcher) -> None:
        assert matcher.matches(["0x033", "008"], 0x2C) is False

    def test_blank_token_never_matches(self, matcher: KeyMatcher) -> None:
        assert matcher.matches([" "], 0) is False
        assert matcher.matches([""], 0) is False

    def test_unparseable_token_ignored(self, matcher: KeyMatcher) -> None:
        assert matcher.matches(["zz"], 0) is False
        assert matcher.matches(["zz", "0x2C"], 0x2C) is True

    def test_whitespace_trimmed(self, matcher: KeyMatcher) -> None:
        assert matcher.matches(["  0x02C\n"], 0x2C) is True

    def test_empty_token_list(self, matcher: KeyMatcher) -> None:
        assert matcher.matches([], 1) is False

    def test_accepts_any_iterable(self, matcher: KeyMatcher) -> None:
        assert matcher.matches((t for t in ["008", "02C"]), 0x2C) is True

    def test_tokens_cached(self, matcher: KeyMatcher) -> None:
        matcher.matches(["0x02C", "033"], 0x99)
        matcher.matches(["0x02C", "033"], 0x99)
        assert matcher._cache.curr_size == 2


class TestFindGroup:
    @pytest.fixture
    def groups(self) -> list[GroupDefinition]:
        return [
            GroupDefinition(name="Layer 1", color="#ff0000", members=("0x02C", "008")),
            GroupDefinition(name="Layer 2", color="#00ff00", members=("033", "2c")),
        ]

    def test_first_group_wins(
        self, matcher: KeyMatcher, groups: list[GroupDefinition]
    ) -> None:
        group = matcher.find_group(groups, 0x2C)
        assert group is not None
        assert group.name == "Layer 1"

    def test_second_group(
        self, matcher: KeyMatcher, groups: list[GroupDefinition]
    ) -> None:
        group = matcher.find_group(groups, 0x33)
        assert group is not None
        assert group.color == "#00ff00"

    def test_no_group(
        self, matcher: KeyMatcher, groups: list[GroupDefinition]
    ) -> None:
        assert matcher.find_group(groups, 0x99) is None

    def test_no_groups(self, matcher: KeyMatcher) -> None:
        assert matcher.find_group([], 1) is None

    def test_module_level_function(self, groups: list[GroupDefinition]) -> None:
        group = find_group(groups, 8)
        assert group is not None
        assert group.name == "Layer 1"

    def test_structural_group_object(self, matcher: KeyMatcher) -> None:
        @dataclass
        class SavedGroup:
            name: str
            color: str
            members: list[str] = field(default_factory=list)

        saved = SavedGroup(name="Saved", color="#123456", members=["0x033"])
        assert matcher.find_group([saved], 0x33) is saved
