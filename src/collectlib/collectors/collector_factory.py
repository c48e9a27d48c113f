"""Factory and registry utilities for collectors."""
# 说明：提供收集器的注册与按名称创建能力，便于通过配置选择下游归约策略。
# 职责：
# - 维护从字符串标识到收集器工厂（类或函数）的注册表，支持运行时扩展
# - 提供按名称查找与实例化收集器的统一工厂入口
# - 通过 CollectorFactory 封装类方便在配置驱动或依赖注入场景中使用

from __future__ import annotations

from typing import Any, Callable, Dict, List

from collectlib.core.utils.param_validation import ParamValidationError, ensure_callable
from .adapters import collecting_and_then, filtering, flat_mapping, mapping, reducing, teeing
from .base import BaseCollector, Collector
from .extremes import max_by, min_by
from .grouping import grouping_by, partitioning_by
from .numeric import averaging, counting, summarizing, summing
from .sequence import joining, to_array, to_list, to_set
from .to_map import to_map

CollectorFactoryFn = Callable[..., BaseCollector]

_COLLECTOR_REGISTRY: Dict[str, CollectorFactoryFn] = {}


def register_collector(name: str, factory: CollectorFactoryFn) -> None:
    """Register a collector factory under a string identifier."""
    if not name:
        raise ParamValidationError("collector name must be non-empty")
    ensure_callable(factory, label="factory")
    _COLLECTOR_REGISTRY[str(name)] = factory


def get_collector_factory(name: str) -> CollectorFactoryFn:
    """Retrieve a collector factory by name."""
    key = str(name)
    if key not in _COLLECTOR_REGISTRY:
        raise ParamValidationError(f"collector '{name}' not registered")
    return _COLLECTOR_REGISTRY[key]


def create_collector(name: str, *args: Any, **kwargs: Any) -> BaseCollector:
    """Instantiate a collector from the registry."""
    factory = get_collector_factory(name)
    return factory(*args, **kwargs)


def registered_collectors() -> List[str]:
    return sorted(_COLLECTOR_REGISTRY)


class CollectorFactory:
    """Convenience wrapper mirroring the function-based factory helpers."""

    @staticmethod
    def register(name: str, factory: CollectorFactoryFn) -> None:
        register_collector(name, factory)

    @staticmethod
    def get(name: str) -> CollectorFactoryFn:
        return get_collector_factory(name)

    @staticmethod
    def create(name: str, *args: Any, **kwargs: Any) -> BaseCollector:
        return create_collector(name, *args, **kwargs)


# Pre-register built-in collectors
register_collector("custom", Collector.of)
register_collector("to_list", to_list)
register_collector("to_set", to_set)
register_collector("to_array", to_array)
register_collector("joining", joining)
register_collector("counting", counting)
register_collector("summing", summing)
register_collector("averaging", averaging)
register_collector("summarizing", summarizing)
register_collector("min_by", min_by)
register_collector("max_by", max_by)
register_collector("mapping", mapping)
register_collector("flat_mapping", flat_mapping)
register_collector("filtering", filtering)
register_collector("collecting_and_then", collecting_and_then)
register_collector("teeing", teeing)
register_collector("reducing", reducing)
register_collector("to_map", to_map)
register_collector("grouping_by", grouping_by)
register_collector("partitioning_by", partitioning_by)
