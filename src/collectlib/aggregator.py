"""
Aggregator orchestrating single-pass grouping, partitioning and reduction.

Responsibilities
  - Provide the entry points ``collect``, ``group_by``, ``partition`` and
    ``group_by_sharded`` over finite element sequences.
  - Translate failures into ClassificationError / ReductionError carrying the
    failing element position and key; never return partial results.
  - Log a summary per completed operation and a warning per aborted one.

Usage Context
  - Use module-level helpers for one-off calls, or an ``Aggregator`` instance
    to route logging through a dedicated logger.

Limitations
  - Inputs must be finite; ``group_by_sharded`` materialises its input.
  - Sharded aggregation needs a downstream collector that supports combine.
"""
# 说明：聚合器统一入口，负责单次遍历的分组、分区与归约，以及可选的分片聚合与合并。
# 职责：
# - collect：对整个序列执行 seed -> fold -> finish 三步归约
# - group_by：按分类函数分组，首次出现顺序保存键，每个键独立累加后统一 finish
# - partition：固定 {False, True} 两个键，空的一侧返回下游的零元素结果
# - group_by_sharded：将输入切成连续分片独立累加（可交给 Executor 执行），再按分片顺序逐键 combine
# - 失败时快速失败：包装为 ClassificationError / ReductionError 并补全元素下标与分组键，不返回部分结果

from __future__ import annotations

import logging
from concurrent.futures import Executor
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple

from collectlib.collectors.base import BaseCollector
from collectlib.collectors.exceptions import ClassificationError, CollectorError, ReductionError
from collectlib.collectors.grouping import GroupingCollector, Groups, grouping_by, partitioning_by
from collectlib.core.utils.logging import ElementFilter, get_logger
from collectlib.core.utils.param_validation import (
    ParamValidationError,
    ensure,
    ensure_type,
    positive_int,
    validate_arguments,
)

_NO_KEY: Any = object()


class Aggregator:
    """
    Stateless, reentrant driver for collector-based aggregation.

    - Configuration
      - logger: Optional logger; defaults to ``collectlib.aggregator``. An
        ElementFilter is attached to it so element payloads stay masked.

    - Behavior
      - Every call builds fresh accumulators, folds each element exactly once,
        finishes every accumulator once and discards them.
      - Classifier failures raise ClassificationError; fold, finish and
        combine failures raise ReductionError. Library errors raised by nested
        collectors propagate unchanged with missing positions filled in.

    - Usage Notes
      - Safe to share across threads as long as callers do not share inputs
        that are mutated during a pass.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        if logger is None:
            logger = get_logger(__name__)
        elif not any(isinstance(f, ElementFilter) for f in logger.filters):
            # 根 logger 上的过滤器不作用于子 logger 传播上来的记录，需直接挂在该 logger 上
            logger.addFilter(ElementFilter())
        self._logger = logger

    # ------------------------------------------------------------------ operations
    def collect(self, elements: Iterable[Any], collector: BaseCollector) -> Any:
        """Reduce all ``elements`` with ``collector``."""
        ensure(elements is not None, "elements must be an iterable, got None")
        ensure_type(collector, (BaseCollector,), label="collector")
        acc = self._guard("seed", collector.seed)
        count = 0
        for index, element in enumerate(elements):
            acc = self._guard("fold", collector.fold, acc, element, index=index, element=element)
            count += 1
        result = self._guard("finish", collector.finish, acc)
        self._logger.debug("collect[%s] folded %d elements", collector.name, count)
        return result

    def group_by(
        self,
        elements: Iterable[Any],
        classifier: Callable[[Any], Any],
        downstream: Optional[BaseCollector] = None,
        *,
        map_factory: Callable[[], Any] = dict,
    ) -> Mapping[Any, Any]:
        """
        Group ``elements`` by ``classifier`` and reduce each group.

        Args:
            elements: Finite sequence; empty input yields an empty mapping.
            classifier: ``element -> key``.
            downstream: Collector per key (default: ``to_list()``).
            map_factory: Factory of the result mapping (default: ``dict``,
                which keeps first-seen key order).
        """
        ensure(elements is not None, "elements must be an iterable, got None")
        grouping = grouping_by(classifier, downstream, map_factory=map_factory)
        groups, count = self._accumulate(grouping, elements)
        result = self._guard("finish", grouping.finish, groups)
        self._logger.debug(
            "group_by[%s] folded %d elements into %d groups", grouping.downstream.name, count, len(groups)
        )
        return result

    def partition(
        self,
        elements: Iterable[Any],
        predicate: Callable[[Any], Any],
        downstream: Optional[BaseCollector] = None,
    ) -> Mapping[bool, Any]:
        """
        Split ``elements`` on ``predicate``; the result always has both
        ``False`` and ``True`` keys (in that order).
        """
        ensure(elements is not None, "elements must be an iterable, got None")
        partitioning = partitioning_by(predicate, downstream)
        groups, count = self._accumulate(partitioning, elements)
        result = self._guard("finish", partitioning.finish, groups)
        self._logger.debug("partition[%s] folded %d elements", partitioning.downstream.name, count)
        return result

    @validate_arguments({"shard_size": positive_int})
    def group_by_sharded(
        self,
        elements: Iterable[Any],
        classifier: Callable[[Any], Any],
        downstream: Optional[BaseCollector] = None,
        *,
        shard_size: int,
        executor: Optional[Executor] = None,
        map_factory: Callable[[], Any] = dict,
    ) -> Mapping[Any, Any]:
        """
        Group consecutive shards independently, then merge them in order.

        Shards are accumulated in the calling thread unless ``executor`` is
        given. The merge follows shard order, so key order and within-key
        order match ``group_by`` for associative collectors.
        """
        ensure(elements is not None, "elements must be an iterable, got None")
        grouping = grouping_by(classifier, downstream, map_factory=map_factory)
        if not grouping.supports_combine:
            raise ParamValidationError(
                f"downstream collector '{grouping.downstream.name}' does not support combine"
            )
        items = list(elements)
        starts = range(0, len(items), shard_size)
        if executor is None:
            partials = [self._accumulate(grouping, items[start:start + shard_size], start)[0] for start in starts]
        else:
            futures = [executor.submit(self._accumulate, grouping, items[start:start + shard_size], start) for start in starts]
            partials = [future.result()[0] for future in futures]

        merged: Groups = grouping.seed()
        for partial in partials:
            merged = self._guard("combine", grouping.combine, merged, partial)
        result = self._guard("finish", grouping.finish, merged)
        self._logger.debug(
            "group_by_sharded[%s] merged %d shards of %d elements into %d groups",
            grouping.downstream.name,
            len(partials),
            len(items),
            len(merged),
        )
        return result

    # ------------------------------------------------------------------ internals
    def _accumulate(self, grouping: GroupingCollector, elements: Iterable[Any], offset: int = 0) -> Tuple[Groups, int]:
        groups = self._guard("seed", grouping.seed)
        count = 0
        for index, element in enumerate(elements, start=offset):
            key = self._guard("classify", grouping.classify, element, index=index, element=element)
            groups = self._guard(
                "fold", grouping.fold_keyed, groups, key, element, index=index, key=key, element=element
            )
            count += 1
        return groups, count

    def _guard(
        self,
        stage: str,
        fn: Callable[..., Any],
        *args: Any,
        index: Optional[int] = None,
        key: Any = _NO_KEY,
        element: Any = None,
    ) -> Any:
        # 统一异常出口：库内异常补全位置后透传，其他异常包装为 ReductionError
        try:
            return fn(*args)
        except CollectorError as exc:
            if getattr(exc, "index", None) is None:
                exc.index = index
            if isinstance(exc, ReductionError) and exc.key is None and key is not _NO_KEY:
                exc.key = key
            self._log_failure(stage, exc, element, key)
            raise
        except Exception as exc:
            where = f" at element {index}" if index is not None else ""
            error = ReductionError(
                f"{stage} failed{where}: {type(exc).__name__}: {exc}",
                index=index,
                key=None if key is _NO_KEY else key,
                stage=stage,
            )
            self._log_failure(stage, error, element, key)
            raise error from exc

    def _log_failure(self, stage: str, exc: CollectorError, element: Any, key: Any) -> None:
        kind = "classification" if isinstance(exc, ClassificationError) else "reduction"
        self._logger.warning(
            "aggregation aborted during %s (%s error, index=%s): %s",
            stage,
            kind,
            getattr(exc, "index", None),
            exc,
            extra={"element": element, "key": getattr(exc, "key", None) if key is _NO_KEY else key},
        )


_DEFAULT_AGGREGATOR: Optional[Aggregator] = None


def get_aggregator() -> Aggregator:
    # 懒加载默认聚合器，避免导入时即初始化日志系统
    global _DEFAULT_AGGREGATOR
    if _DEFAULT_AGGREGATOR is None:
        _DEFAULT_AGGREGATOR = Aggregator()
    return _DEFAULT_AGGREGATOR


def collect(elements: Iterable[Any], collector: BaseCollector) -> Any:
    return get_aggregator().collect(elements, collector)


def group_by(
    elements: Iterable[Any],
    classifier: Callable[[Any], Any],
    downstream: Optional[BaseCollector] = None,
    *,
    map_factory: Callable[[], Any] = dict,
) -> Mapping[Any, Any]:
    return get_aggregator().group_by(elements, classifier, downstream, map_factory=map_factory)


def partition(
    elements: Iterable[Any],
    predicate: Callable[[Any], Any],
    downstream: Optional[BaseCollector] = None,
) -> Mapping[bool, Any]:
    return get_aggregator().partition(elements, predicate, downstream)


def group_by_sharded(
    elements: Iterable[Any],
    classifier: Callable[[Any], Any],
    downstream: Optional[BaseCollector] = None,
    *,
    shard_size: int,
    executor: Optional[Executor] = None,
    map_factory: Callable[[], Any] = dict,
) -> Mapping[Any, Any]:
    return get_aggregator().group_by_sharded(
        elements, classifier, downstream, shard_size=shard_size, executor=executor, map_factory=map_factory
    )


__all__: List[str] = [
    "Aggregator",
    "get_aggregator",
    "collect",
    "group_by",
    "partition",
    "group_by_sharded",
]
