"""
Unit tests for grouping_by / partitioning_by used as collectors.
"""
# 说明：分组与分区收集器的单元测试。
# 覆盖：
# - 多级分组（grouping_by 作为下游）
# - 分区收集器始终包含 False / True 两个键，分片合并后亦然
# - 分类函数异常与不可哈希的键包装为 ClassificationError
# - 下游 finisher 失败时 ReductionError 带上所在分组键（嵌套时为内层键）

from collections import OrderedDict

import pytest

from collectlib import (
    ClassificationError,
    Collector,
    ReductionError,
    collect,
    counting,
    group_by,
    grouping_by,
    partitioning_by,
    summing,
    to_list,
)

CITIES = [("NY", "east", 8), ("TX", "south", 29), ("VA", "east", 8), ("FL", "south", 21)]


def test_grouping_by_as_downstream() -> None:
    result = group_by(CITIES, lambda c: c[1], grouping_by(lambda c: c[2], counting()))
    assert result == {"east": {8: 2}, "south": {29: 1, 21: 1}}


def test_partitioning_by_as_downstream() -> None:
    result = group_by(CITIES, lambda c: c[1], partitioning_by(lambda c: c[2] > 10, counting()))
    assert result == {"east": {False: 2, True: 0}, "south": {False: 0, True: 2}}


def test_grouping_collector_directly() -> None:
    result = collect(CITIES, grouping_by(lambda c: c[0][0]))
    assert result == {"N": [CITIES[0]], "T": [CITIES[1]], "V": [CITIES[2]], "F": [CITIES[3]]}


def test_map_factory_applies_to_result() -> None:
    result = collect(CITIES, grouping_by(lambda c: c[1], summing(lambda c: c[2]), map_factory=OrderedDict))
    assert isinstance(result, OrderedDict)
    assert list(result.items()) == [("east", 16), ("south", 50)]


def test_partitioning_seed_has_both_keys() -> None:
    collector = partitioning_by(lambda x: x > 0)
    assert collector.empty_result() == {False: [], True: []}
    left = collector.fold(collector.seed(), 1)
    right = collector.fold(collector.seed(), -1)
    assert collector.finish(collector.combine(left, right)) == {False: [-1], True: [1]}


def test_predicate_result_is_coerced_to_bool() -> None:
    result = collect(["", "a", "bb"], partitioning_by(len, to_list()))
    assert result == {False: [""], True: ["a", "bb"]}


def test_nested_classifier_failure_is_classification_error() -> None:
    with pytest.raises(ClassificationError) as info:
        group_by(CITIES, lambda c: c[1], grouping_by(lambda c: c[5]))
    assert info.value.index == 0
    assert isinstance(info.value.__cause__, IndexError)


def test_grouping_combine_keeps_first_seen_order() -> None:
    collector = grouping_by(lambda x: x % 3)
    left = collector.seed()
    for x in (1, 2):
        left = collector.fold(left, x)
    right = collector.seed()
    for x in (3, 4):
        right = collector.fold(right, x)
    merged = collector.finish(collector.combine(left, right))
    assert list(merged.items()) == [(1, [1, 4]), (2, [2]), (0, [3])]


def test_unhashable_key_is_a_classification_error() -> None:
    collector = grouping_by(lambda c: [c[1]])
    with pytest.raises(ClassificationError, match="unhashable key of type list"):
        collector.fold(collector.seed(), CITIES[0])


def test_nested_finish_failure_keeps_inner_key() -> None:
    def finisher(acc):
        raise ValueError("bad group")

    broken = Collector.of(list, lambda acc, x: acc + [x], finisher=finisher)
    collector = grouping_by(lambda c: c[1], grouping_by(lambda c: c[0], broken))
    acc = collector.seed()
    for city in CITIES:
        acc = collector.fold(acc, city)
    with pytest.raises(ReductionError) as info:
        collector.finish(acc)
    assert info.value.key == "NY"
    assert info.value.stage == "finish"
    assert isinstance(info.value.__cause__, ValueError)
