"""
Runtime configuration utilities.

Centralises the library's tunable options and exposes helpers to read
from environment variables or update settings at runtime.
"""
# 说明：运行时配置管理工具，集中管理库内可调选项，并支持环境变量覆写与运行期更新。
# 职责：
# - RuntimeConfig：封装严格校验开关、日志等级、日志中元素掩码、空分组求平均策略等配置项
# - load_from_env(...)：按统一前缀（如 COLLECTLIB_）从环境变量加载并解析配置值
# - get_config()：获取全局 RuntimeConfig 单例，作为库级默认配置入口
# - configure(...)：通过关键字参数便捷更新全局配置并返回更新后的实例
# 约定：
# - 布尔类环境变量使用 {"1", "true", "yes", "on"}（大小写不敏感）视为 True
# - EMPTY_AVERAGE 只接受 "nan" / "zero" / "error"
# - 未知配置键在 update(...) 中会触发 AttributeError，避免静默吞错

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict

EMPTY_AVERAGE_POLICIES = ("nan", "zero", "error")


def _env_flag(raw: str) -> bool:
    return raw.strip().lower() in {"1", "true", "yes", "on"}


_ENV_PARSERS: Dict[str, Callable[[str], Any]] = {
    "strict_validation": _env_flag,
    "log_level": lambda raw: raw.strip().upper(),
    "mask_elements": _env_flag,
    "empty_average": lambda raw: raw.strip().lower(),
}


@dataclass
class RuntimeConfig:
    strict_validation: bool = True
    log_level: str = field(default_factory=lambda: os.environ.get("COLLECTLIB_LOG_LEVEL", "INFO"))
    mask_elements: bool = True
    empty_average: str = "nan"
    extra: Dict[str, Any] = field(default_factory=dict)

    def update(self, **kwargs: Any) -> None:
        # 按关键字参数更新当前配置实例，未知字段名将显式报错
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError(f"unknown config option '{key}'")
            if key == "empty_average" and value not in EMPTY_AVERAGE_POLICIES:
                raise ValueError(f"empty_average must be one of {EMPTY_AVERAGE_POLICIES}")
            setattr(self, key, value)

    def load_from_env(self, prefix: str = "COLLECTLIB_") -> None:
        # 仅处理已设置的环境变量，其余字段保持当前值
        for name, parse in _ENV_PARSERS.items():
            raw = os.environ.get(f"{prefix}{name.upper()}")
            if raw is not None:
                self.update(**{name: parse(raw)})


# 全局配置单例，用作库内默认的运行时配置
_GLOBAL_CONFIG = RuntimeConfig()


def get_config() -> RuntimeConfig:
    # 返回全局 RuntimeConfig 实例，供调用方读取或在本进程内共享配置
    return _GLOBAL_CONFIG


def configure(**kwargs: Any) -> RuntimeConfig:
    # 以关键字参数更新全局配置，并返回更新后的实例（便于链式调用或调试）
    _GLOBAL_CONFIG.update(**kwargs)
    return _GLOBAL_CONFIG
