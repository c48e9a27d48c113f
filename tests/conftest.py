"""Shared pytest configuration and path setup for test modules."""

import sys
from dataclasses import replace
from pathlib import Path

import pytest

# Ensure repo root and src/ are on sys.path for all tests
_ROOT = Path(__file__).resolve().parents[1]
_SRC = _ROOT / "src"
for p in (str(_ROOT), str(_SRC)):
    if p not in sys.path:
        sys.path.insert(0, p)

from collectlib.core.utils.config import get_config  # noqa: E402


@pytest.fixture
def runtime_config():
    # 每个测试结束后恢复全局运行时配置，避免 configure(...) 在测试之间串扰
    config = get_config()
    snapshot = replace(config, extra=dict(config.extra))
    yield config
    for name in ("strict_validation", "log_level", "mask_elements", "empty_average", "extra"):
        setattr(config, name, getattr(snapshot, name))
