"""Minimum / maximum collectors with an absent-capable result."""
# 说明：按 key 函数或比较器求分组内最小/最大元素的收集器。
# 职责：
# - ExtremeCollector：维护“当前极值”，比较相等时保留先出现的元素
# - 空分组没有极值，finish 返回 default（默认 None），与内置 min/max 的 default 参数一致
# - combine：左侧分片优先，保证与单次遍历的平局处理一致

from __future__ import annotations

import functools
from typing import Any, Callable, Optional

from collectlib.core.utils.param_validation import ParamValidationError, ensure_callable
from .base import BaseCollector

_MISSING: Any = object()


def _identity(value: Any) -> Any:
    return value


class ExtremeCollector(BaseCollector[Any, Any, Any]):
    """
    Keep the least (``largest=False``) or greatest element of a group.

    - Configuration
      - key: Optional key function (Python ``min``/``max`` style).
      - comparator: Optional ``(a, b) -> int`` comparison; exclusive with key.
      - default: Result for a group with no elements.
      - largest: Select the maximum instead of the minimum.
    """

    def __init__(
        self,
        key: Optional[Callable[[Any], Any]] = None,
        *,
        comparator: Optional[Callable[[Any, Any], int]] = None,
        default: Any = None,
        largest: bool = False,
    ) -> None:
        if key is not None and comparator is not None:
            raise ParamValidationError("pass either key or comparator, not both")
        ensure_callable(key, label="key", optional=True)
        ensure_callable(comparator, label="comparator", optional=True)
        if comparator is not None:
            key = functools.cmp_to_key(comparator)
        self.key = key or _identity
        self.default = default
        self.largest = largest
        self.name = "max_by" if largest else "min_by"

    def _better(self, candidate: Any, current: Any) -> bool:
        # 严格比较：相等时不替换，保留先出现的元素
        if self.largest:
            return self.key(candidate) > self.key(current)
        return self.key(candidate) < self.key(current)

    def seed(self) -> Any:
        return _MISSING

    def fold(self, acc: Any, element: Any) -> Any:
        if acc is _MISSING or self._better(element, acc):
            return element
        return acc

    def finish(self, acc: Any) -> Any:
        return self.default if acc is _MISSING else acc

    def combine(self, left: Any, right: Any) -> Any:
        if right is _MISSING:
            return left
        return self.fold(left, right)


def min_by(
    key: Optional[Callable[[Any], Any]] = None,
    *,
    comparator: Optional[Callable[[Any, Any], int]] = None,
    default: Any = None,
) -> ExtremeCollector:
    return ExtremeCollector(key, comparator=comparator, default=default)


def max_by(
    key: Optional[Callable[[Any], Any]] = None,
    *,
    comparator: Optional[Callable[[Any, Any], int]] = None,
    default: Any = None,
) -> ExtremeCollector:
    return ExtremeCollector(key, comparator=comparator, default=default, largest=True)
