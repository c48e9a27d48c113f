"""
Collectors gathering the elements of a group into a container.

Provides list, set, numpy-array and string-joining collectors. All of them
keep input order where the container has one and can merge partial results.
"""
# 说明：将分组内元素收集到容器中的收集器：列表、集合、numpy 数组与字符串拼接。
# 职责：
# - ToListCollector：保持输入顺序收集为 list，是 group_by 的默认下游
# - ToSetCollector：去重收集为 set
# - ToArrayCollector：收集后在 finish 阶段转为 numpy.ndarray，可指定 dtype
# - JoiningCollector：对每个元素取 str() 后按分隔符与前后缀拼接

from __future__ import annotations

from typing import Any, Callable, List, Optional, Set

import numpy as np

from collectlib.core.utils.param_validation import ensure_callable, ensure_type
from .base import BaseCollector


class ToListCollector(BaseCollector[Any, List[Any], List[Any]]):
    """Collect elements into a list in encounter order."""

    name = "to_list"

    def seed(self) -> List[Any]:
        return []

    def fold(self, acc: List[Any], element: Any) -> List[Any]:
        acc.append(element)
        return acc

    def combine(self, left: List[Any], right: List[Any]) -> List[Any]:
        # 左侧分片在前，拼接后保持组内原始顺序
        left.extend(right)
        return left


class ToSetCollector(BaseCollector[Any, Set[Any], Set[Any]]):
    """Collect elements into a set."""

    name = "to_set"

    def seed(self) -> Set[Any]:
        return set()

    def fold(self, acc: Set[Any], element: Any) -> Set[Any]:
        acc.add(element)
        return acc

    def combine(self, left: Set[Any], right: Set[Any]) -> Set[Any]:
        left |= right
        return left


class ToArrayCollector(BaseCollector[Any, List[Any], np.ndarray]):
    """Collect (optionally mapped) elements into a numpy array."""

    name = "to_array"

    def __init__(self, mapper: Optional[Callable[[Any], Any]] = None, dtype: Any = None) -> None:
        ensure_callable(mapper, label="mapper", optional=True)
        self.mapper = mapper
        self.dtype = dtype

    def seed(self) -> List[Any]:
        return []

    def fold(self, acc: List[Any], element: Any) -> List[Any]:
        acc.append(element if self.mapper is None else self.mapper(element))
        return acc

    def finish(self, acc: List[Any]) -> np.ndarray:
        # 空分组时未指定 dtype 的 np.asarray([]) 默认为 float64
        return np.asarray(acc, dtype=self.dtype)

    def combine(self, left: List[Any], right: List[Any]) -> List[Any]:
        left.extend(right)
        return left

    def get_metadata(self):
        return {**super().get_metadata(), "dtype": None if self.dtype is None else np.dtype(self.dtype).name}


class JoiningCollector(BaseCollector[Any, List[str], str]):
    """Concatenate ``str(element)`` values with a separator, prefix and suffix."""

    name = "joining"

    def __init__(self, separator: str = "", prefix: str = "", suffix: str = "") -> None:
        for label, value in (("separator", separator), ("prefix", prefix), ("suffix", suffix)):
            ensure_type(value, (str,), label=label)
        self.separator = separator
        self.prefix = prefix
        self.suffix = suffix

    def seed(self) -> List[str]:
        return []

    def fold(self, acc: List[str], element: Any) -> List[str]:
        acc.append(str(element))
        return acc

    def finish(self, acc: List[str]) -> str:
        return f"{self.prefix}{self.separator.join(acc)}{self.suffix}"

    def combine(self, left: List[str], right: List[str]) -> List[str]:
        left.extend(right)
        return left


def to_list() -> ToListCollector:
    return ToListCollector()


def to_set() -> ToSetCollector:
    return ToSetCollector()


def to_array(mapper: Optional[Callable[[Any], Any]] = None, dtype: Any = None) -> ToArrayCollector:
    return ToArrayCollector(mapper, dtype)


def joining(separator: str = "", prefix: str = "", suffix: str = "") -> JoiningCollector:
    return JoiningCollector(separator, prefix, suffix)
