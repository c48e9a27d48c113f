"""
Numerical utilities shared across the collectors.

Responsibilities
  - Provide a compensated running sum that keeps integer parts exact.
  - Provide single-pass, mergeable summary statistics (Welford / Chan).
  - Normalise numpy scalars into plain Python numbers.

Usage Context
  - Used by averaging and summarizing collectors, including the sharded
    aggregation path that merges partial accumulators.

Limitations
  - Assumes numeric inputs (int, float, or numpy scalars).
  - Variance is the sample variance (ddof=1); fewer than two values yield 0.0.
  - Non-finite inputs switch sums to plain IEEE addition; the variance is
    then nan.
"""
# 说明：收集器共享的数值工具，集中实现数值稳定且可合并的累加与在线统计。
# 职责：
# - KahanSum：整数部分精确累加、浮点部分 Kahan 补偿累加，可与另一个实例合并
# - RunningStats：Welford 在线均值/方差，附带最小值/最大值，并支持 Chan 并行合并公式
# - to_python_number：将 numpy 标量规范化为 Python int/float，避免 dtype 溢出或截断

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Optional, Union

import numpy as np

Number = Union[int, float]


def to_python_number(value: Any) -> Number:
    """Convert numpy scalars into plain Python numbers; reject non-numerics."""
    # bool 是 int 的子类，这里按数值 0/1 处理
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, (int, float)):
        return value
    raise TypeError(f"expected a numeric value, got {type(value).__name__}")


@dataclass
class KahanSum:
    """Running sum keeping integers exact and compensating float error."""

    int_total: int = 0
    float_total: float = 0.0
    _compensation: float = 0.0
    has_float: bool = False

    def add(self, value: Any) -> "KahanSum":
        number = to_python_number(value)
        if isinstance(number, int):
            self.int_total += number
            return self
        self.has_float = True
        # Kahan 补偿：降低浮点累加误差
        y = number - self._compensation
        t = self.float_total + y
        # 出现 inf/nan 后补偿项失去意义，退化为普通加法，避免 inf - inf 产生 nan
        self._compensation = (t - self.float_total) - y if math.isfinite(t) else 0.0
        self.float_total = t
        return self

    def merge(self, other: "KahanSum") -> "KahanSum":
        self.int_total += other.int_total
        if other.has_float:
            self.add(other.float_total - other._compensation)
        return self

    @property
    def value(self) -> Number:
        if not self.has_float:
            return self.int_total
        return self.int_total + self.float_total


@dataclass
class RunningStats:
    """Online count/sum/min/max/mean/variance using Welford's method."""
    # 在线统计（Welford）：单次遍历、数值稳定、适合流式数据；merge 使用 Chan 等人的并行公式

    count: int = 0
    _mean: float = 0.0
    minimum: Optional[Number] = None
    maximum: Optional[Number] = None
    _m2: float = 0.0  # 累积二阶矩（用于计算方差）
    _total: KahanSum = field(default_factory=KahanSum)
    _finite: bool = True  # 是否所有输入均为有限值

    def update(self, value: Any) -> "RunningStats":
        number = to_python_number(value)
        self._total.add(number)
        self.count += 1
        if isinstance(number, float) and not math.isfinite(number):
            self._finite = False
        delta = number - self._mean
        self._mean += delta / self.count
        delta2 = number - self._mean
        self._m2 += delta * delta2
        if self.minimum is None or number < self.minimum:
            self.minimum = number
        if self.maximum is None or number > self.maximum:
            self.maximum = number
        return self

    def merge(self, other: "RunningStats") -> "RunningStats":
        if other.count == 0:
            return self
        if self.count == 0:
            self.count, self._mean, self._m2 = other.count, other._mean, other._m2
            self._finite = other._finite
            self.minimum, self.maximum = other.minimum, other.maximum
            self._total = KahanSum().merge(other._total)
            return self
        count = self.count + other.count
        delta = other._mean - self._mean
        self._mean += delta * other.count / count
        self._finite = self._finite and other._finite
        self._m2 += other._m2 + delta * delta * self.count * other.count / count
        self.count = count
        self.minimum = min(self.minimum, other.minimum)  # type: ignore[type-var]
        self.maximum = max(self.maximum, other.maximum)  # type: ignore[type-var]
        self._total.merge(other._total)
        return self

    @property
    def mean(self) -> float:
        # 含 inf/nan 时 Welford 增量会得到 inf - inf，改用总和计算
        if self._finite or self.count == 0:
            return self._mean
        return self._total.value / self.count

    @property
    def total(self) -> Number:
        return self._total.value

    @property
    def variance(self) -> float:
        # 样本方差（ddof=1）；当样本不足 2 个返回 0.0
        if self.count < 2:
            return 0.0
        if not self._finite:
            return float("nan")
        return self._m2 / (self.count - 1)

    @property
    def std(self) -> float:
        return math.sqrt(self.variance)
