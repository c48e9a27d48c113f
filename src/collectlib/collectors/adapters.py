"""
Collectors that adapt or compose other collectors.

Responsibilities
  - Transform elements before a downstream collector (mapping, flat_mapping).
  - Drop elements before a downstream collector (filtering).
  - Post-process a downstream result (collecting_and_then).
  - Run two collectors over the same elements (teeing).
  - Reduce with a plain binary operator (reducing).

Usage Context
  - Used as ``downstream`` arguments to express nested reductions such as
    "sum of X grouped by Y" or "names of the oldest employee per city".

Limitations
  - A wrapper can combine partial results only when every wrapped collector can.
"""
# 说明：对其他收集器进行适配与组合的收集器。
# 职责：
# - MappingCollector / FlatMappingCollector：在交给下游之前对元素做一对一或一对多转换
# - FilteringCollector：仅把满足谓词的元素交给下游，不满足的分组仍然保留（下游零元素结果）
# - CollectingAndThen：在下游 finish 之后再做一次结果变换
# - TeeingCollector：同一批元素同时喂给两个收集器，最后用 merger 合并两个结果
# - ReducingCollector：以二元运算符归约，可选 identity 与 mapper

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Tuple

from collectlib.core.utils.param_validation import ensure_callable, ensure_type
from .base import BaseCollector

_MISSING: Any = object()


class _DownstreamCollector(BaseCollector[Any, Any, Any]):
    """Shared plumbing for collectors delegating to one downstream collector."""

    def __init__(self, downstream: BaseCollector) -> None:
        ensure_type(downstream, (BaseCollector,), label="downstream")
        self.downstream = downstream

    def seed(self) -> Any:
        return self.downstream.seed()

    def fold(self, acc: Any, element: Any) -> Any:
        return self.downstream.fold(acc, element)

    def finish(self, acc: Any) -> Any:
        return self.downstream.finish(acc)

    def combine(self, left: Any, right: Any) -> Any:
        return self.downstream.combine(left, right)

    @property
    def supports_combine(self) -> bool:
        return self.downstream.supports_combine

    def get_metadata(self):
        return {**super().get_metadata(), "downstream": self.downstream.get_metadata()}


class MappingCollector(_DownstreamCollector):
    """Apply ``mapper`` to each element before folding it downstream."""

    name = "mapping"

    def __init__(self, mapper: Callable[[Any], Any], downstream: BaseCollector) -> None:
        super().__init__(downstream)
        ensure_callable(mapper, label="mapper")
        self.mapper = mapper

    def fold(self, acc: Any, element: Any) -> Any:
        return self.downstream.fold(acc, self.mapper(element))


class FlatMappingCollector(_DownstreamCollector):
    """Fold every item of ``mapper(element)`` downstream."""

    name = "flat_mapping"

    def __init__(self, mapper: Callable[[Any], Iterable[Any]], downstream: BaseCollector) -> None:
        super().__init__(downstream)
        ensure_callable(mapper, label="mapper")
        self.mapper = mapper

    def fold(self, acc: Any, element: Any) -> Any:
        for item in self.mapper(element):
            acc = self.downstream.fold(acc, item)
        return acc


class FilteringCollector(_DownstreamCollector):
    """Fold only elements matching ``predicate`` downstream."""

    name = "filtering"

    def __init__(self, predicate: Callable[[Any], bool], downstream: BaseCollector) -> None:
        super().__init__(downstream)
        ensure_callable(predicate, label="predicate")
        self.predicate = predicate

    def fold(self, acc: Any, element: Any) -> Any:
        if self.predicate(element):
            return self.downstream.fold(acc, element)
        return acc


class CollectingAndThen(_DownstreamCollector):
    """Apply ``finisher`` to the downstream result."""

    name = "collecting_and_then"

    def __init__(self, downstream: BaseCollector, finisher: Callable[[Any], Any]) -> None:
        super().__init__(downstream)
        ensure_callable(finisher, label="finisher")
        self.finisher = finisher

    def finish(self, acc: Any) -> Any:
        return self.finisher(self.downstream.finish(acc))


class TeeingCollector(BaseCollector[Any, Tuple[Any, Any], Any]):
    """Feed each element to two collectors and merge both results."""

    name = "teeing"

    def __init__(self, first: BaseCollector, second: BaseCollector, merger: Callable[[Any, Any], Any]) -> None:
        ensure_type(first, (BaseCollector,), label="first")
        ensure_type(second, (BaseCollector,), label="second")
        ensure_callable(merger, label="merger")
        self.first = first
        self.second = second
        self.merger = merger

    def seed(self) -> Tuple[Any, Any]:
        return self.first.seed(), self.second.seed()

    def fold(self, acc: Tuple[Any, Any], element: Any) -> Tuple[Any, Any]:
        return self.first.fold(acc[0], element), self.second.fold(acc[1], element)

    def finish(self, acc: Tuple[Any, Any]) -> Any:
        return self.merger(self.first.finish(acc[0]), self.second.finish(acc[1]))

    def combine(self, left: Tuple[Any, Any], right: Tuple[Any, Any]) -> Tuple[Any, Any]:
        return self.first.combine(left[0], right[0]), self.second.combine(left[1], right[1])

    @property
    def supports_combine(self) -> bool:
        return self.first.supports_combine and self.second.supports_combine


class ReducingCollector(BaseCollector[Any, Any, Any]):
    """
    Reduce (optionally mapped) elements with a binary operator.

    Without ``identity`` an empty group reduces to None; with it the identity
    is the seed and also the empty result.
    """

    name = "reducing"

    def __init__(
        self,
        op: Callable[[Any, Any], Any],
        *,
        identity: Any = _MISSING,
        mapper: Optional[Callable[[Any], Any]] = None,
    ) -> None:
        ensure_callable(op, label="op")
        ensure_callable(mapper, label="mapper", optional=True)
        self.op = op
        self.identity = identity
        self.mapper = mapper

    def seed(self) -> Any:
        return self.identity

    def fold(self, acc: Any, element: Any) -> Any:
        value = element if self.mapper is None else self.mapper(element)
        if acc is _MISSING:
            return value
        return self.op(acc, value)

    def finish(self, acc: Any) -> Any:
        return None if acc is _MISSING else acc

    def combine(self, left: Any, right: Any) -> Any:
        if right is _MISSING:
            return left
        if left is _MISSING:
            return right
        return self.op(left, right)


def mapping(mapper: Callable[[Any], Any], downstream: BaseCollector) -> MappingCollector:
    return MappingCollector(mapper, downstream)


def flat_mapping(mapper: Callable[[Any], Iterable[Any]], downstream: BaseCollector) -> FlatMappingCollector:
    return FlatMappingCollector(mapper, downstream)


def filtering(predicate: Callable[[Any], bool], downstream: BaseCollector) -> FilteringCollector:
    return FilteringCollector(predicate, downstream)


def collecting_and_then(downstream: BaseCollector, finisher: Callable[[Any], Any]) -> CollectingAndThen:
    return CollectingAndThen(downstream, finisher)


def teeing(first: BaseCollector, second: BaseCollector, merger: Callable[[Any, Any], Any]) -> TeeingCollector:
    return TeeingCollector(first, second, merger)


def reducing(
    op: Callable[[Any, Any], Any],
    *,
    identity: Any = _MISSING,
    mapper: Optional[Callable[[Any], Any]] = None,
) -> ReducingCollector:
    return ReducingCollector(op, identity=identity, mapper=mapper)
