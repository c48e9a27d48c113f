"""Collector building a mapping from per-element key and value functions."""
# 说明：按元素计算键与值并收集为映射的收集器（对应 toMap）。
# 职责：
# - 键冲突且未提供 merge 函数时抛出 DuplicateKeyError，而不是静默覆盖
# - 提供 merge 时以 merge(旧值, 新值) 解决冲突，分片合并沿用同一规则
# - map_factory 控制最终映射类型，累加阶段内部统一使用 dict 保持插入顺序

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from collectlib.core.utils.param_validation import ensure_callable
from .base import BaseCollector
from .exceptions import DuplicateKeyError


class ToMapCollector(BaseCollector[Any, Dict[Any, Any], Mapping[Any, Any]]):
    """Collect ``key_mapper(e) -> value_mapper(e)`` entries into a mapping."""

    name = "to_map"

    def __init__(
        self,
        key_mapper: Callable[[Any], Any],
        value_mapper: Callable[[Any], Any],
        merge: Optional[Callable[[Any, Any], Any]] = None,
        *,
        map_factory: Callable[[], Any] = dict,
    ) -> None:
        ensure_callable(key_mapper, label="key_mapper")
        ensure_callable(value_mapper, label="value_mapper")
        ensure_callable(merge, label="merge", optional=True)
        ensure_callable(map_factory, label="map_factory")
        self.key_mapper = key_mapper
        self.value_mapper = value_mapper
        self.merge = merge
        self.map_factory = map_factory

    def _put(self, acc: Dict[Any, Any], key: Any, value: Any) -> None:
        if key in acc:
            if self.merge is None:
                raise DuplicateKeyError(key, acc[key], value)
            acc[key] = self.merge(acc[key], value)
        else:
            acc[key] = value

    def seed(self) -> Dict[Any, Any]:
        return {}

    def fold(self, acc: Dict[Any, Any], element: Any) -> Dict[Any, Any]:
        self._put(acc, self.key_mapper(element), self.value_mapper(element))
        return acc

    def finish(self, acc: Dict[Any, Any]) -> Mapping[Any, Any]:
        if self.map_factory is dict:
            return acc
        result = self.map_factory()
        result.update(acc)
        return result

    def combine(self, left: Dict[Any, Any], right: Dict[Any, Any]) -> Dict[Any, Any]:
        for key, value in right.items():
            self._put(left, key, value)
        return left


def to_map(
    key_mapper: Callable[[Any], Any],
    value_mapper: Callable[[Any], Any],
    merge: Optional[Callable[[Any, Any], Any]] = None,
    *,
    map_factory: Callable[[], Any] = dict,
) -> ToMapCollector:
    return ToMapCollector(key_mapper, value_mapper, merge, map_factory=map_factory)
