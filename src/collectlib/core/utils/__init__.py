"""Shared utility helpers used across the library."""

from .config import (
    EMPTY_AVERAGE_POLICIES,
    RuntimeConfig,
    get_config,
    configure,
)
from .logging import (
    ElementFilter,
    get_logger,
    configure_logging,
)
from .math_utils import (
    KahanSum,
    RunningStats,
    to_python_number,
)
from .param_validation import (
    ensure,
    ensure_type,
    ensure_callable,
    positive_int,
    validate_arguments,
    ParamValidationError,
)

__all__ = [
    "EMPTY_AVERAGE_POLICIES",
    "RuntimeConfig",
    "get_config",
    "configure",
    "ElementFilter",
    "get_logger",
    "configure_logging",
    "KahanSum",
    "RunningStats",
    "to_python_number",
    "ensure",
    "ensure_type",
    "ensure_callable",
    "positive_int",
    "validate_arguments",
    "ParamValidationError",
]
