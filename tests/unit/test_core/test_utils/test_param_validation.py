"""
Unit tests for validation helpers and decorators.
"""
# 说明：参数验证工具（ensure / ensure_type / ensure_callable / validate_arguments）的单元测试。

import pytest

from collectlib.core.utils import (
    ParamValidationError,
    configure,
    ensure,
    ensure_callable,
    ensure_type,
    positive_int,
    validate_arguments,
)

pytestmark = pytest.mark.usefixtures("runtime_config")


def test_ensure_passes_and_fails() -> None:
    ensure(True, "should not raise")
    with pytest.raises(ParamValidationError):
        ensure(False, "error")


def test_ensure_type_checks() -> None:
    ensure_type(5, (int,), label="value")
    with pytest.raises(ParamValidationError, match="value must be instance of int"):
        ensure_type("text", (int,), label="value")


def test_ensure_callable_respects_strict_validation() -> None:
    ensure_callable(len, label="fn")
    ensure_callable(None, label="fn", optional=True)
    with pytest.raises(ParamValidationError, match="fn must be callable"):
        ensure_callable(42, label="fn")
    # 关闭严格校验后不再提前检查
    configure(strict_validation=False)
    ensure_callable(42, label="fn")


def test_validate_arguments_with_positive_int() -> None:
    @validate_arguments({"size": positive_int})
    def chunk(values, *, size: int) -> int:
        return len(values) // size

    assert chunk([1, 2, 3, 4], size=2) == 2
    for bad in (0, -1, 1.5, True):
        with pytest.raises(ParamValidationError):
            chunk([1], size=bad)
