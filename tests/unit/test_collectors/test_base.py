"""
Unit tests for the collector contract and function-backed collectors.
"""
# 说明：BaseCollector 契约与 Collector.of(...) 自定义收集器的单元测试。
# 覆盖：
# - seed 每次返回新的累加器，不在分组之间共享可变状态
# - finisher / combiner 可选，supports_combine 随之变化
# - 非可调用参数在构造时被拒绝

import pytest

from collectlib import Collector, ParamValidationError, collect, group_by
from collectlib.collectors import BaseCollector, to_list


def test_custom_collector_with_finisher() -> None:
    product = Collector.of(lambda: 1, lambda acc, x: acc * x, finisher=lambda acc: f"p={acc}", name="product")
    assert collect([2, 3, 4], product) == "p=24"
    assert product.name == "product"
    assert product.supports_combine is False


def test_custom_collector_seed_is_fresh_per_group() -> None:
    # 使用可变累加器：若 seed 被共享，不同分组的元素会串在一起
    gather = Collector.of(list, lambda acc, x: acc + [x])
    result = group_by([1, 2, 3, 4], lambda x: x % 2, gather)
    assert result == {1: [1, 3], 0: [2, 4]}


def test_combine_requires_combiner() -> None:
    with_combiner = Collector.of(lambda: 0, lambda acc, x: acc + x, combiner=lambda a, b: a + b)
    assert with_combiner.supports_combine is True
    assert with_combiner.combine(3, 4) == 7
    without = Collector.of(lambda: 0, lambda acc, x: acc + x)
    with pytest.raises(NotImplementedError):
        without.combine(1, 2)


def test_builtin_supports_combine_and_metadata() -> None:
    collector = to_list()
    assert isinstance(collector, BaseCollector)
    assert collector.supports_combine is True
    assert collector.get_metadata() == {"type": "to_list", "combinable": True}
    assert collector.empty_result() == []


def test_non_callable_arguments_rejected() -> None:
    with pytest.raises(ParamValidationError):
        Collector.of(0, lambda acc, x: acc)
    with pytest.raises(ParamValidationError):
        Collector.of(list, lambda acc, x: acc, finisher="not callable")
