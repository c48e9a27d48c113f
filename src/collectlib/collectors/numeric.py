"""
Scalar numeric reductions: counting, summing, averaging and summarizing.

Responsibilities
  - Count elements and sum mapped values without truncating integers.
  - Average mapped values as floats with compensated accumulation.
  - Summarise count/total/min/max/mean/variance in a single pass.

Usage Context
  - Typical downstream collectors for grouping and partitioning.

Limitations
  - Averaging an empty group follows the configured empty policy
    ("nan", "zero" or "error"); summarizing an empty group yields
    count 0 with missing extremes and a NaN mean.
"""
# 说明：标量数值归约类收集器：计数、求和、求平均与一次遍历的汇总统计。
# 职责：
# - CountingCollector：逐元素 +1，支持分片合并
# - SummingCollector：对 mapper 结果求和，int 保持精确、遇到 float 自然提升，不做截断
# - AveragingCollector：整数精确累加 + 浮点 Kahan 补偿，finish 时统一输出 float；空分组按策略处理
# - SummarizingCollector：基于 RunningStats（Welford）输出 SummaryStatistics，支持 Chan 合并

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

import numpy as np

from collectlib.core.utils.config import EMPTY_AVERAGE_POLICIES, get_config
from collectlib.core.utils.math_utils import KahanSum, Number, RunningStats
from collectlib.core.utils.param_validation import ParamValidationError, ensure_callable
from .base import BaseCollector
from .exceptions import EmptyGroupError


def _plain(value: Any) -> Any:
    # numpy 标量转为 Python 数值，避免 int32 等定宽类型在累加中溢出
    if isinstance(value, np.generic):
        return value.item()
    return value


class CountingCollector(BaseCollector[Any, int, int]):
    """Count the elements of a group."""

    name = "counting"

    def seed(self) -> int:
        return 0

    def fold(self, acc: int, element: Any) -> int:
        return acc + 1

    def combine(self, left: int, right: int) -> int:
        return left + right


class SummingCollector(BaseCollector[Any, Number, Number]):
    """Sum ``mapper(element)`` over a group, starting from integer zero."""

    name = "summing"

    def __init__(self, mapper: Callable[[Any], Any]) -> None:
        ensure_callable(mapper, label="mapper")
        self.mapper = mapper

    def seed(self) -> Number:
        return 0

    def fold(self, acc: Number, element: Any) -> Number:
        return acc + _plain(self.mapper(element))

    def combine(self, left: Number, right: Number) -> Number:
        return left + right


@dataclass
class _AverageState:
    total: KahanSum
    count: int = 0


class AveragingCollector(BaseCollector[Any, _AverageState, float]):
    """
    Arithmetic mean of ``mapper(element)`` returned as a float.

    - Configuration
      - mapper: Extracts the numeric value from an element.
      - empty: Policy for a group with no elements; defaults to
        ``RuntimeConfig.empty_average`` read at finish time.
        "nan" -> ``float("nan")``, "zero" -> ``0.0``, "error" -> EmptyGroupError.
    """

    name = "averaging"

    def __init__(self, mapper: Callable[[Any], Any], *, empty: Optional[str] = None) -> None:
        ensure_callable(mapper, label="mapper")
        if empty is not None and empty not in EMPTY_AVERAGE_POLICIES:
            raise ParamValidationError(f"empty must be one of {EMPTY_AVERAGE_POLICIES}, got {empty!r}")
        self.mapper = mapper
        self.empty = empty

    def seed(self) -> _AverageState:
        return _AverageState(total=KahanSum())

    def fold(self, acc: _AverageState, element: Any) -> _AverageState:
        acc.total.add(self.mapper(element))
        acc.count += 1
        return acc

    def finish(self, acc: _AverageState) -> float:
        if acc.count == 0:
            policy = self.empty or get_config().empty_average
            if policy == "error":
                raise EmptyGroupError()
            return 0.0 if policy == "zero" else float("nan")
        # 整数总和精确保存，真除法直接得到正确舍入的 float
        return acc.total.value / acc.count

    def combine(self, left: _AverageState, right: _AverageState) -> _AverageState:
        left.total.merge(right.total)
        left.count += right.count
        return left

    def get_metadata(self):
        return {**super().get_metadata(), "empty": self.empty or get_config().empty_average}


@dataclass(frozen=True)
class SummaryStatistics:
    """Single-pass summary of a numeric group."""

    count: int
    total: Number
    minimum: Optional[Number]
    maximum: Optional[Number]
    mean: float
    variance: float

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "total": self.total,
            "minimum": self.minimum,
            "maximum": self.maximum,
            "mean": self.mean,
            "variance": self.variance,
        }


class SummarizingCollector(BaseCollector[Any, RunningStats, SummaryStatistics]):
    """Count, total, extremes, mean and sample variance of ``mapper(element)``."""

    name = "summarizing"

    def __init__(self, mapper: Callable[[Any], Any]) -> None:
        ensure_callable(mapper, label="mapper")
        self.mapper = mapper

    def seed(self) -> RunningStats:
        return RunningStats()

    def fold(self, acc: RunningStats, element: Any) -> RunningStats:
        return acc.update(self.mapper(element))

    def finish(self, acc: RunningStats) -> SummaryStatistics:
        mean = acc.mean if acc.count else float("nan")
        return SummaryStatistics(
            count=acc.count,
            total=acc.total,
            minimum=acc.minimum,
            maximum=acc.maximum,
            mean=mean,
            variance=acc.variance,
        )

    def combine(self, left: RunningStats, right: RunningStats) -> RunningStats:
        return left.merge(right)


def counting() -> CountingCollector:
    return CountingCollector()


def summing(mapper: Callable[[Any], Any]) -> SummingCollector:
    return SummingCollector(mapper)


def averaging(mapper: Callable[[Any], Any], *, empty: Optional[str] = None) -> AveragingCollector:
    return AveragingCollector(mapper, empty=empty)


def summarizing(mapper: Callable[[Any], Any]) -> SummarizingCollector:
    return SummarizingCollector(mapper)
