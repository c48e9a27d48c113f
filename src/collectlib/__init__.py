"""
collectlib: grouping, partitioning and downstream reduction over finite sequences.

Typical use::

    from collectlib import group_by, partition, summing

    by_state = group_by(trips, lambda t: t.state, summing(lambda t: t.distance))
    long_short = partition(trips, lambda t: t.distance > 4000, summing(lambda t: t.distance))
"""

from __future__ import annotations

from .aggregator import Aggregator, collect, get_aggregator, group_by, group_by_sharded, partition
from .collectors import (
    BaseCollector,
    ClassificationError,
    Collector,
    CollectorError,
    CollectorFactory,
    DuplicateKeyError,
    EmptyGroupError,
    ReductionError,
    SummaryStatistics,
    averaging,
    collecting_and_then,
    counting,
    create_collector,
    filtering,
    flat_mapping,
    grouping_by,
    joining,
    mapping,
    max_by,
    min_by,
    partitioning_by,
    reducing,
    register_collector,
    summarizing,
    summing,
    teeing,
    to_array,
    to_list,
    to_map,
    to_set,
)
from .core import ParamValidationError, RuntimeConfig, configure, get_config, get_logger

__version__ = "0.1.0"

__all__ = [
    "Aggregator",
    "get_aggregator",
    "collect",
    "group_by",
    "partition",
    "group_by_sharded",
    "BaseCollector",
    "Collector",
    "CollectorFactory",
    "create_collector",
    "register_collector",
    "CollectorError",
    "ClassificationError",
    "ReductionError",
    "DuplicateKeyError",
    "EmptyGroupError",
    "SummaryStatistics",
    "to_list",
    "to_set",
    "to_array",
    "joining",
    "counting",
    "summing",
    "averaging",
    "summarizing",
    "min_by",
    "max_by",
    "mapping",
    "flat_mapping",
    "filtering",
    "collecting_and_then",
    "teeing",
    "reducing",
    "to_map",
    "grouping_by",
    "partitioning_by",
    "ParamValidationError",
    "RuntimeConfig",
    "configure",
    "get_config",
    "get_logger",
]
