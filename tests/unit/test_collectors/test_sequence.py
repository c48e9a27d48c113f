"""
Unit tests for container collectors (to_list / to_set / to_array / joining).
"""

import numpy as np
import pytest

from collectlib import ParamValidationError, collect, group_by, joining, to_array, to_list, to_set


def test_to_list_preserves_order() -> None:
    assert collect([3, 1, 2], to_list()) == [3, 1, 2]
    assert collect([], to_list()) == []


def test_to_set_deduplicates() -> None:
    assert collect(["a", "b", "a"], to_set()) == {"a", "b"}


def test_to_array_with_mapper_and_dtype() -> None:
    result = collect([{"v": 1}, {"v": 2}], to_array(lambda r: r["v"], dtype=np.int64))
    assert isinstance(result, np.ndarray)
    assert result.dtype == np.int64
    assert result.tolist() == [1, 2]
    assert to_array(dtype="float32").get_metadata()["dtype"] == "float32"


def test_joining_prefix_suffix() -> None:
    assert collect(["NY", "TX", "CA"], joining(", ", "[", "]")) == "[NY, TX, CA]"
    assert collect([], joining(", ", "[", "]")) == "[]"
    assert collect([1, 2], joining()) == "12"
    with pytest.raises(ParamValidationError):
        joining(separator=1)  # type: ignore[arg-type]


def test_combiners_concatenate_in_order() -> None:
    collector = to_list()
    left = collector.fold(collector.fold(collector.seed(), 1), 2)
    right = collector.fold(collector.seed(), 3)
    assert collector.combine(left, right) == [1, 2, 3]


def test_group_by_joining_names() -> None:
    people = [("ann", "NY"), ("bob", "TX"), ("cid", "NY")]
    result = group_by(people, lambda p: p[1], joining("|"))
    assert result == {"NY": "('ann', 'NY')|('cid', 'NY')", "TX": "('bob', 'TX')"}
