"""
Unit tests for composing collectors.
"""
# 说明：mapping / flat_mapping / filtering / collecting_and_then / teeing / reducing 的单元测试。

import pytest

from collectlib import (
    ParamValidationError,
    collect,
    collecting_and_then,
    counting,
    filtering,
    flat_mapping,
    group_by,
    mapping,
    reducing,
    summing,
    teeing,
    to_list,
    to_set,
)
from collectlib.core.utils import configure

EMPLOYEES = [
    {"name": "ann", "city": "NY", "age": 31, "skills": ["sql", "go"]},
    {"name": "bob", "city": "TX", "age": 45, "skills": ["java"]},
    {"name": "cid", "city": "NY", "age": 27, "skills": ["go"]},
]

pytestmark = pytest.mark.usefixtures("runtime_config")


def test_mapping_downstream_of_group_by() -> None:
    result = group_by(EMPLOYEES, lambda e: e["city"], mapping(lambda e: e["name"], to_list()))
    assert result == {"NY": ["ann", "cid"], "TX": ["bob"]}


def test_flat_mapping() -> None:
    result = group_by(EMPLOYEES, lambda e: e["city"], flat_mapping(lambda e: e["skills"], to_set()))
    assert result == {"NY": {"sql", "go"}, "TX": {"java"}}


def test_filtering_keeps_groups_with_no_matches() -> None:
    result = group_by(EMPLOYEES, lambda e: e["city"], filtering(lambda e: e["age"] > 40, counting()))
    assert result == {"NY": 0, "TX": 1}


def test_collecting_and_then() -> None:
    collector = collecting_and_then(to_list(), tuple)
    assert collect([1, 2], collector) == (1, 2)
    assert collector.supports_combine is True


def test_teeing_merges_two_results() -> None:
    mean_age = teeing(summing(lambda e: e["age"]), counting(), lambda total, n: total / n)
    assert collect(EMPLOYEES, mean_age) == pytest.approx(103 / 3)
    assert mean_age.supports_combine is True


def test_reducing_with_and_without_identity() -> None:
    assert collect([1, 2, 3], reducing(lambda a, b: a * b)) == 6
    assert collect([], reducing(lambda a, b: a * b)) is None
    assert collect([], reducing(lambda a, b: a * b, identity=1)) == 1
    oldest = reducing(max, identity=0, mapper=lambda e: e["age"])
    assert collect(EMPLOYEES, oldest) == 45


def test_reducing_combine() -> None:
    collector = reducing(lambda a, b: a + b)
    assert collector.combine(collector.seed(), 3) == 3
    assert collector.combine(4, collector.seed()) == 4
    assert collector.combine(4, 3) == 7


def test_downstream_must_be_collector() -> None:
    with pytest.raises(ParamValidationError):
        mapping(lambda x: x, "to_list")  # type: ignore[arg-type]


def test_metadata_nests_downstream() -> None:
    meta = mapping(lambda x: x, counting()).get_metadata()
    assert meta["type"] == "mapping"
    assert meta["downstream"]["type"] == "counting"


def test_non_callable_mapper_allowed_when_not_strict() -> None:
    configure(strict_validation=False)
    collector = mapping("len", to_list())  # type: ignore[arg-type]
    assert collector.mapper == "len"
