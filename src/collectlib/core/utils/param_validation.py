"""
Argument checks shared by collectors and the aggregator.

Collectors validate their callables and downstreams eagerly at construction
time so that a misconfigured pipeline fails before any element is folded.
"""
# 说明：构造收集器与调用聚合入口时使用的参数检查工具。
# 职责：
# - ParamValidationError：参数非法时抛出的异常（ValueError 子类）
# - ensure / ensure_type / ensure_callable：条件、类型、可调用性检查，错误信息带参数名
# - positive_int：分片大小等计数参数的校验器
# - validate_arguments：按参数名绑定调用实参并逐项应用校验器的装饰器

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Mapping, Tuple, Type

from .config import get_config


class ParamValidationError(ValueError):
    """Raised when a collector or aggregation call is configured with bad arguments."""


def ensure(condition: bool, message: str, *, error: Type[Exception] = ParamValidationError) -> None:
    if not condition:
        raise error(message)


def ensure_type(value: Any, expected: Tuple[type, ...], *, label: str = "value") -> None:
    if not isinstance(value, expected):
        names = " or ".join(t.__name__ for t in expected)
        raise ParamValidationError(
            f"{label} must be instance of {names}, got {type(value).__name__}"
        )


def ensure_callable(value: Any, *, label: str = "function", optional: bool = False) -> None:
    # 关闭 strict_validation 时跳过检查，错误会在首次调用时暴露
    if optional and value is None:
        return
    if get_config().strict_validation and not callable(value):
        raise ParamValidationError(f"{label} must be callable, got {type(value).__name__}")


def positive_int(value: Any) -> int:
    # bool 是 int 的子类，需要单独排除
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ParamValidationError(f"expected a positive integer, got {value!r}")
    return value


def validate_arguments(schema: Mapping[str, Callable[[Any], Any]]) -> Callable:
    """
    Decorator applying per-argument validators before the call.

    ``schema`` maps parameter names to callables that return the (possibly
    converted) value or raise ParamValidationError. Arguments left at their
    default are not validated; names missing from the signature are ignored.
    """

    def decorator(func: Callable) -> Callable:
        signature = inspect.signature(func)
        checked = {name: fn for name, fn in schema.items() if name in signature.parameters}

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                bound = signature.bind(*args, **kwargs)
            except TypeError as exc:
                raise ParamValidationError(f"{func.__name__}(): {exc}") from exc
            for name, validator in checked.items():
                if name in bound.arguments:
                    bound.arguments[name] = validator(bound.arguments[name])
            return func(*bound.args, **bound.kwargs)

        return wrapper

    return decorator
