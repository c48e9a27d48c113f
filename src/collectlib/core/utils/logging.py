"""
Lightweight logging helpers with element-masking defaults.
"""
# 说明：轻量级日志工具，提供对输入元素脱敏的默认配置与统一的 logger 获取入口。
# 职责：
# - ElementFilter：根据运行时配置对日志记录中携带的元素/分组键进行脱敏处理
# - configure_logging(...)：初始化 logging 基本配置并为根 logger 挂载元素过滤器
# - get_logger(...)：按名称获取 logger，必要时自动完成日志系统初始化
# 约定：
# - 是否掩码元素由 RuntimeConfig.mask_elements 控制
# - 日志级别优先级：显式参数 level > 环境变量 COLLECTLIB_LOG_LEVEL > 运行时配置的 log_level

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import get_config

_MASKED_ATTRS = ("element", "key")


class ElementFilter(logging.Filter):
    """Filter that masks element payloads on log records if configured."""
    # 日志元素过滤器：在启用掩码配置时，对约定字段名（element / key）进行统一脱敏处理

    def filter(self, record: logging.LogRecord) -> bool:
        config = get_config()
        if not config.mask_elements:
            return True
        # 保留字段结构但隐藏具体内容，元素可能携带业务数据
        for attr in _MASKED_ATTRS:
            if hasattr(record, attr):
                setattr(record, attr, "***")
        return True


def configure_logging(level: Optional[str] = None) -> None:
    # 初始化根 logger：确定最终日志级别、设置格式，并挂载 ElementFilter
    log_level = level or os.environ.get("COLLECTLIB_LOG_LEVEL", get_config().log_level)
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(name)s %(asctime)s | %(message)s",
    )
    root = logging.getLogger()
    if not any(isinstance(f, ElementFilter) for f in root.filters):
        root.addFilter(ElementFilter())


def get_logger(name: str) -> logging.Logger:
    # 获取指定名称的 logger，若尚无 handler，则懒加载方式调用 configure_logging 进行初始化
    logger = logging.getLogger(name)
    if not logger.handlers:
        configure_logging()
    if not any(isinstance(f, ElementFilter) for f in logger.filters):
        logger.addFilter(ElementFilter())
    return logger
