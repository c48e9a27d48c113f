"""
Grouping and partitioning expressed as collectors.

Responsibilities
  - Classify each element and fold it into that key's downstream accumulator.
  - Keep first-seen key order and per-key input order.
  - Always expose both boolean keys when partitioning.
  - Merge per-shard group tables key by key.

Usage Context
  - Backing implementation of ``Aggregator.group_by`` / ``Aggregator.partition``.
  - Usable as a downstream collector for multi-level grouping.

Limitations
  - Keys must be hashable.
  - Grouping only materialises observed keys; partitioning is the exception.
"""
# 说明：以收集器形式实现的分组（groupingBy）与分区（partitioningBy）。
# 职责：
# - GroupingCollector：对每个元素计算分组键，首次出现时为该键创建下游累加器，并按首次出现顺序保存
# - PartitioningCollector：键域固定为 {False, True}，即使某一侧没有元素也会在结果中出现
# - classify：分类函数异常统一包装为 ClassificationError，嵌套收集器抛出的库内异常原样透传
# - combine：按键合并两个分片的分组表，左侧分片的键顺序与组内顺序优先

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from collectlib.core.utils.param_validation import ensure_callable, ensure_type
from .base import BaseCollector
from .exceptions import ClassificationError, CollectorError, ReductionError
from .sequence import ToListCollector

Groups = Dict[Any, Any]


class GroupingCollector(BaseCollector[Any, Groups, Mapping[Any, Any]]):
    """
    Group elements by ``classifier`` and reduce each group with ``downstream``.

    - Configuration
      - classifier: ``element -> key``; must succeed for every element.
      - downstream: Collector applied per key; defaults to ``to_list()``.
      - map_factory: Zero-argument factory for the result mapping.

    - Behavior
      - The accumulator is an insertion-ordered dict of key -> downstream
        accumulator; ``finish`` runs the downstream finisher once per key.
    """

    name = "grouping_by"

    def __init__(
        self,
        classifier: Callable[[Any], Any],
        downstream: Optional[BaseCollector] = None,
        *,
        map_factory: Callable[[], Any] = dict,
    ) -> None:
        ensure_callable(classifier, label="classifier")
        ensure_callable(map_factory, label="map_factory")
        if downstream is not None:
            ensure_type(downstream, (BaseCollector,), label="downstream")
        self.classifier = classifier
        self.downstream: BaseCollector = downstream if downstream is not None else ToListCollector()
        self.map_factory = map_factory

    def classify(self, element: Any) -> Any:
        try:
            key = self.classifier(element)
        except CollectorError:
            raise
        except Exception as exc:
            raise ClassificationError(
                f"classifier failed on element: {type(exc).__name__}: {exc}", element=element
            ) from exc
        try:
            hash(key)
        except TypeError as exc:
            raise ClassificationError(
                f"classifier returned an unhashable key of type {type(key).__name__}", element=element
            ) from exc
        return key

    def fold_keyed(self, acc: Groups, key: Any, element: Any) -> Groups:
        """Fold ``element`` into the accumulator of an already computed ``key``."""
        if key not in acc:
            acc[key] = self.downstream.seed()
        acc[key] = self.downstream.fold(acc[key], element)
        return acc

    def seed(self) -> Groups:
        return {}

    def fold(self, acc: Groups, element: Any) -> Groups:
        return self.fold_keyed(acc, self.classify(element), element)

    def finish(self, acc: Groups) -> Mapping[Any, Any]:
        result = self.map_factory()
        for key, state in acc.items():
            result[key] = self._finish_group(key, state)
        return result

    def _finish_group(self, key: Any, state: Any) -> Any:
        # 下游 finisher 失败时带上当前分组键；嵌套分组中内层已填写的键保持不变
        try:
            return self.downstream.finish(state)
        except ReductionError as exc:
            if exc.key is None:
                exc.key = key
            raise
        except CollectorError:
            raise
        except Exception as exc:
            raise ReductionError(
                f"finish failed for key {key!r}: {type(exc).__name__}: {exc}", key=key, stage="finish"
            ) from exc

    def combine(self, left: Groups, right: Groups) -> Groups:
        for key, state in right.items():
            if key in left:
                left[key] = self.downstream.combine(left[key], state)
            else:
                left[key] = state
        return left

    @property
    def supports_combine(self) -> bool:
        return self.downstream.supports_combine

    def get_metadata(self):
        return {**super().get_metadata(), "downstream": self.downstream.get_metadata()}


class PartitioningCollector(GroupingCollector):
    """Split elements by ``bool(predicate(element))``; both keys always present."""

    name = "partitioning_by"

    def __init__(self, predicate: Callable[[Any], Any], downstream: Optional[BaseCollector] = None) -> None:
        ensure_callable(predicate, label="predicate")
        super().__init__(lambda element: bool(predicate(element)), downstream)
        self.predicate = predicate

    def classify(self, element: Any) -> bool:
        try:
            return bool(self.predicate(element))
        except CollectorError:
            raise
        except Exception as exc:
            raise ClassificationError(
                f"predicate failed on element: {type(exc).__name__}: {exc}", element=element
            ) from exc

    def seed(self) -> Groups:
        # 预先放入两个键：空的一侧在 finish 时得到下游的零元素结果
        return {False: self.downstream.seed(), True: self.downstream.seed()}


def grouping_by(
    classifier: Callable[[Any], Any],
    downstream: Optional[BaseCollector] = None,
    *,
    map_factory: Callable[[], Any] = dict,
) -> GroupingCollector:
    return GroupingCollector(classifier, downstream, map_factory=map_factory)


def partitioning_by(predicate: Callable[[Any], Any], downstream: Optional[BaseCollector] = None) -> PartitioningCollector:
    return PartitioningCollector(predicate, downstream)
