"""
Error hierarchy for collectors and the aggregation pass.

Responsibilities
  - Define shared exception types for classification and reduction failures.
  - Carry the failing element position (and key, where known) for diagnostics.
  - Provide specialised reduction errors for duplicate keys and empty groups.

Usage Context
  - Raised by Aggregator operations and by collectors composed downstream.

Limitations
  - Exceptions are fail-fast; no partial result is attached to them.
"""
# 说明：收集器与聚合流程的异常体系，统一分类失败与归约失败的错误类型。
# 职责：
# - CollectorError：本库聚合相关异常的统一基类
# - ClassificationError：分类函数/谓词在某个元素上执行失败
# - ReductionError：fold/finisher/combine 在某个元素或分组上执行失败
# - DuplicateKeyError / EmptyGroupError：to_map 键冲突与空分组求平均的专用归约异常

from __future__ import annotations

from typing import Any, Optional

_UNSET: Any = object()


class CollectorError(RuntimeError):
    """
    Base error type for aggregation failures.

    - Behavior
      - Serves as the common ancestor for classification and reduction errors.

    - Usage Notes
      - Catch to handle any failed aggregation pass without mixing with
        argument validation errors (ParamValidationError).
    """


class ClassificationError(CollectorError):
    """
    Raised when a classifier or predicate fails on an element.

    - Configuration
      - index: Position of the failing element in the input (None if unknown).
      - element: The failing element.
    """

    def __init__(self, message: str, *, index: Optional[int] = None, element: Any = _UNSET) -> None:
        super().__init__(message)
        self.index = index
        self.element = None if element is _UNSET else element


class ReductionError(CollectorError):
    """
    Raised when a fold, finisher or combine step fails.

    - Configuration
      - index: Position of the failing element (None for finish/combine).
      - key: Group key being reduced, when the failure happened inside a group.
      - stage: One of "seed", "fold", "finish", "combine".
    """

    def __init__(
        self,
        message: str,
        *,
        index: Optional[int] = None,
        key: Any = None,
        stage: str = "fold",
    ) -> None:
        super().__init__(message)
        self.index = index
        self.key = key
        self.stage = stage


class DuplicateKeyError(ReductionError):
    """Raised by to_map when two elements produce the same key and no merge function is set."""

    def __init__(self, key: Any, existing: Any, incoming: Any) -> None:
        super().__init__(
            f"duplicate key {key!r} (attempted merging values {existing!r} and {incoming!r})",
            key=key,
        )
        self.existing = existing
        self.incoming = incoming


class EmptyGroupError(ReductionError):
    """Raised when averaging a group with no elements under the 'error' policy."""

    def __init__(self, message: str = "cannot average an empty group") -> None:
        super().__init__(message, stage="finish")
