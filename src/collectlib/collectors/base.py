"""
Base abstractions for downstream collectors.

Responsibilities
  - Define the reducer contract: seed, fold, optional finish and combine.
  - Provide a function-backed collector for caller-supplied reducers.
  - Standardise metadata and the zero-element result across implementations.

Usage Context
  - Use as the base for every built-in collector and for custom reducers
    passed as ``downstream`` to grouping and partitioning.

Limitations
  - Collectors hold no per-call state; accumulators live only inside a pass.
  - ``combine`` is optional; sharded aggregation requires it.
"""
# 说明：下游收集器（reducer）的抽象接口，约定 seed / fold / finish / combine 四个步骤。
# 职责：
# - BaseCollector：定义收集器的最小行为契约，finish 默认恒等、combine 默认不支持
# - Collector：以普通函数构造收集器，作为调用方自定义 reducer 的入口
# - empty_result：统一“零元素”结果（partition 缺失一侧时使用）

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterable, Mapping, Optional, TypeVar

from collectlib.core.utils.param_validation import ensure_callable

T = TypeVar("T")
A = TypeVar("A")
R = TypeVar("R")


class BaseCollector(ABC, Generic[T, A, R]):
    """
    Abstract reducer folding elements of one group into a result.

    - Behavior
      - ``seed`` returns a fresh accumulator for every group; accumulators
        are never shared between keys or between calls.
      - ``fold`` returns the updated accumulator (mutable accumulators may
        return themselves).
      - ``finish`` runs once per group after the pass; identity by default.
      - ``combine`` merges an accumulator built from a later shard into one
        built from an earlier shard.

    - Usage Notes
      - Subclasses that can merge partial results override ``combine``;
        ``supports_combine`` then reports True.
    """

    name: str = "collector"

    @abstractmethod
    def seed(self) -> A:
        """Return a fresh accumulator."""
        raise NotImplementedError

    @abstractmethod
    def fold(self, acc: A, element: T) -> A:
        """Fold a single element into the accumulator."""
        raise NotImplementedError

    def finish(self, acc: A) -> R:
        return acc  # type: ignore[return-value]

    def combine(self, left: A, right: A) -> A:
        raise NotImplementedError(f"{self.name} does not support combining accumulators")

    @property
    def supports_combine(self) -> bool:
        return type(self).combine is not BaseCollector.combine

    def empty_result(self) -> R:
        """Result for a group that received no elements."""
        return self.finish(self.seed())

    def reduce(self, elements: Iterable[T]) -> R:
        # 无异常包装的直接归约，供嵌套收集器在内部使用
        acc = self.seed()
        for element in elements:
            acc = self.fold(acc, element)
        return self.finish(acc)

    def get_metadata(self) -> Mapping[str, Any]:
        return {"type": self.name, "combinable": self.supports_combine}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class Collector(BaseCollector[T, A, R]):
    """
    Collector assembled from plain functions.

    - Configuration
      - seed: Zero-argument factory returning a fresh accumulator.
      - fold: ``(acc, element) -> acc``.
      - finisher: Optional ``acc -> result``.
      - combiner: Optional ``(left, right) -> acc``.
    """

    def __init__(
        self,
        seed: Callable[[], A],
        fold: Callable[[A, T], A],
        finisher: Optional[Callable[[A], R]] = None,
        combiner: Optional[Callable[[A, A], A]] = None,
        *,
        name: Optional[str] = None,
    ) -> None:
        ensure_callable(seed, label="seed")
        ensure_callable(fold, label="fold")
        ensure_callable(finisher, label="finisher", optional=True)
        ensure_callable(combiner, label="combiner", optional=True)
        self._seed = seed
        self._fold = fold
        self._finisher = finisher
        self._combiner = combiner
        self.name = name or "custom"

    @classmethod
    def of(
        cls,
        seed: Callable[[], A],
        fold: Callable[[A, T], A],
        finisher: Optional[Callable[[A], R]] = None,
        combiner: Optional[Callable[[A, A], A]] = None,
        *,
        name: Optional[str] = None,
    ) -> "Collector[T, A, R]":
        return cls(seed, fold, finisher, combiner, name=name)

    def seed(self) -> A:
        return self._seed()

    def fold(self, acc: A, element: T) -> A:
        return self._fold(acc, element)

    def finish(self, acc: A) -> R:
        if self._finisher is None:
            return acc  # type: ignore[return-value]
        return self._finisher(acc)

    def combine(self, left: A, right: A) -> A:
        if self._combiner is None:
            return super().combine(left, right)
        return self._combiner(left, right)

    @property
    def supports_combine(self) -> bool:
        return self._combiner is not None
