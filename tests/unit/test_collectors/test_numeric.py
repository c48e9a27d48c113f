"""
Unit tests for numeric collectors.
"""
# 说明：counting / summing / averaging / summarizing 的单元测试。
# 覆盖：
# - summing 对整数保持精确、对浮点自然提升，numpy 定宽整数不溢出
# - averaging 总是返回 float，空分组遵循 nan / zero / error 三种策略
# - summarizing 的一次遍历汇总结果与空分组结果

import math

import numpy as np
import pytest

from collectlib import (
    EmptyGroupError,
    ParamValidationError,
    averaging,
    collect,
    configure,
    counting,
    group_by_sharded,
    summarizing,
    summing,
)

pytestmark = pytest.mark.usefixtures("runtime_config")


def test_counting() -> None:
    assert collect("abcde", counting()) == 5
    assert collect([], counting()) == 0


def test_summing_int_stays_int() -> None:
    total = collect([1, 2, 3], summing(lambda x: x))
    assert total == 6
    assert isinstance(total, int)


def test_summing_promotes_to_float() -> None:
    assert collect([1, 2.5], summing(lambda x: x)) == pytest.approx(3.5)


def test_summing_numpy_fixed_width_does_not_overflow() -> None:
    values = [np.int32(2**31 - 1), np.int32(2**31 - 1)]
    assert collect(values, summing(lambda x: x)) == 2 * (2**31 - 1)


def test_averaging_returns_float_for_ints() -> None:
    result = collect([1, 2], averaging(lambda x: x))
    assert result == 1.5
    assert isinstance(collect([2, 2], averaging(lambda x: x)), float)


def test_averaging_large_integers_exact() -> None:
    big = 10**17
    assert collect([big + 1, big + 3], averaging(lambda x: x)) == float(big + 2)


def test_averaging_empty_policies() -> None:
    assert math.isnan(collect([], averaging(lambda x: x)))
    assert collect([], averaging(lambda x: x, empty="zero")) == 0.0
    with pytest.raises(EmptyGroupError):
        collect([], averaging(lambda x: x, empty="error"))


def test_averaging_empty_policy_from_config() -> None:
    configure(empty_average="zero")
    assert collect([], averaging(lambda x: x)) == 0.0
    # 显式参数优先于全局配置
    assert math.isnan(collect([], averaging(lambda x: x, empty="nan")))


def test_averaging_rejects_unknown_policy() -> None:
    with pytest.raises(ParamValidationError):
        averaging(lambda x: x, empty="inf")


def test_averaging_combine() -> None:
    collector = averaging(lambda x: x)
    left = collector.fold(collector.fold(collector.seed(), 1), 2)
    right = collector.fold(collector.seed(), 6)
    assert collector.finish(collector.combine(left, right)) == pytest.approx(3.0)


def test_summarizing() -> None:
    stats = collect([2300, 2500, 5600], summarizing(lambda x: x))
    assert stats.count == 3
    assert stats.total == 10400
    assert stats.minimum == 2300
    assert stats.maximum == 5600
    assert stats.mean == pytest.approx(10400 / 3)
    assert stats.variance == pytest.approx(np.var([2300, 2500, 5600], ddof=1))
    assert stats.to_dict()["count"] == 3


def test_summarizing_empty() -> None:
    stats = collect([], summarizing(lambda x: x))
    assert stats.count == 0
    assert stats.total == 0
    assert stats.minimum is None and stats.maximum is None
    assert math.isnan(stats.mean)


@pytest.mark.parametrize("infinity", [math.inf, -math.inf])
def test_averaging_and_summarizing_with_infinity(infinity) -> None:
    values = [infinity, 1.0, 2.0]
    assert collect(values, averaging(lambda x: x)) == infinity
    assert collect(values, averaging(lambda x: x)) == collect(values, summing(lambda x: x)) / 3
    stats = collect(values, summarizing(lambda x: x))
    assert stats.total == infinity
    assert stats.mean == infinity
    assert math.isnan(stats.variance)


def test_infinity_survives_sharded_merge() -> None:
    values = [1.0, 2.0, math.inf, 4.0, 5.0, 6.0]
    averages = group_by_sharded(values, lambda x: x > 3, averaging(lambda x: x), shard_size=2)
    assert averages == {False: 1.5, True: math.inf}
    stats = group_by_sharded(values, lambda x: "all", summarizing(lambda x: x), shard_size=2)["all"]
    assert stats.total == math.inf
    assert stats.mean == math.inf
