"""
Unit tests for logging utilities.
"""
# 说明：日志配置与元素脱敏过滤相关的单元测试。
# 覆盖：
# - get_logger(...)：获取带 ElementFilter 的 logger 实例
# - mask_elements 开启时 element / key 字段被掩码，关闭时保留原值

import logging

import pytest

from collectlib.core.utils import configure, configure_logging, get_logger

pytestmark = pytest.mark.usefixtures("runtime_config")


def test_element_fields_are_masked(caplog) -> None:
    configure_logging(level="INFO")
    logger = get_logger("collectlib.test")
    with caplog.at_level(logging.INFO):
        logger.info("message", extra={"element": "secret-row", "key": "secret-key"})
    record = caplog.records[-1]
    assert "message" in caplog.text
    assert record.element == "***"
    assert record.key == "***"


def test_masking_can_be_disabled(caplog) -> None:
    configure(mask_elements=False)
    logger = get_logger("collectlib.test.unmasked")
    with caplog.at_level(logging.INFO):
        logger.info("message", extra={"element": "visible"})
    assert caplog.records[-1].element == "visible"
