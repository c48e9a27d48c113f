"""
Unit tests for the to_map collector.
"""

from collections import OrderedDict

import pytest

from collectlib import DuplicateKeyError, ReductionError, collect, to_map

TRIPS = [("NY", 2300), ("TX", 2500), ("NY", 100)]


def test_duplicate_key_raises() -> None:
    with pytest.raises(DuplicateKeyError) as info:
        collect(TRIPS, to_map(lambda t: t[0], lambda t: t[1]))
    err = info.value
    assert isinstance(err, ReductionError)
    assert err.key == "NY"
    assert (err.existing, err.incoming) == (2300, 100)
    # 聚合器补全失败元素在输入中的下标
    assert err.index == 2


def test_merge_function_resolves_duplicates() -> None:
    result = collect(TRIPS, to_map(lambda t: t[0], lambda t: t[1], lambda a, b: a + b))
    assert result == {"NY": 2400, "TX": 2500}
    assert list(result) == ["NY", "TX"]


def test_map_factory() -> None:
    result = collect(TRIPS[:2], to_map(lambda t: t[0], lambda t: t[1], map_factory=OrderedDict))
    assert isinstance(result, OrderedDict)
    assert result == OrderedDict([("NY", 2300), ("TX", 2500)])


def test_combine_applies_same_rules() -> None:
    collector = to_map(lambda t: t[0], lambda t: t[1])
    left = collector.fold(collector.seed(), ("NY", 1))
    right = collector.fold(collector.seed(), ("NY", 2))
    with pytest.raises(DuplicateKeyError):
        collector.combine(left, right)
