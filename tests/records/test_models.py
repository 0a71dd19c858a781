"""Tests for the NodeRecord frozen dataclass."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import FrozenInstanceError

import pytest

from route_topo.records.models import NodeRecord

RecordFactory = Callable[..., NodeRecord]


class TestNodeRecord:
    def test_frozen(self, make_record: RecordFactory) -> None:
        record = make_record(1, 2, 1)
        with pytest.raises(FrozenInstanceError):
            record.parent_reference_value = 3  # type: ignore[misc]

    def test_equal_values_are_equal(self, make_record: RecordFactory) -> None:
        assert make_record(1, 2, 1) == make_record(1, 2, 1)

    def test_self_referencing(self, make_record: RecordFactory) -> None:
        assert make_record(3, 5, 5).is_self_referencing is True
        assert make_record(3, 5, 1).is_self_referencing is False

    def test_root_candidate_by_index(self, make_record: RecordFactory) -> None:
        assert make_record(0, 0x2C, 1).is_root_candidate is True

    def test_root_candidate_by_identifier(self, make_record: RecordFactory) -> None:
        assert make_record(7, 1, 1).is_root_candidate is True

    def test_not_root_candidate(self, make_record: RecordFactory) -> None:
        assert make_record(7, 0x2C, 1).is_root_candidate is False
