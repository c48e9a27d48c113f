"""Collector layer entrypoint."""

from __future__ import annotations

from .adapters import (
    CollectingAndThen,
    FilteringCollector,
    FlatMappingCollector,
    MappingCollector,
    ReducingCollector,
    TeeingCollector,
    collecting_and_then,
    filtering,
    flat_mapping,
    mapping,
    reducing,
    teeing,
)
from .base import BaseCollector, Collector
from .collector_factory import (
    CollectorFactory,
    create_collector,
    get_collector_factory,
    register_collector,
    registered_collectors,
)
from .exceptions import (
    ClassificationError,
    CollectorError,
    DuplicateKeyError,
    EmptyGroupError,
    ReductionError,
)
from .extremes import ExtremeCollector, max_by, min_by
from .grouping import GroupingCollector, PartitioningCollector, grouping_by, partitioning_by
from .numeric import (
    AveragingCollector,
    CountingCollector,
    SummarizingCollector,
    SummaryStatistics,
    SummingCollector,
    averaging,
    counting,
    summarizing,
    summing,
)
from .sequence import (
    JoiningCollector,
    ToArrayCollector,
    ToListCollector,
    ToSetCollector,
    joining,
    to_array,
    to_list,
    to_set,
)
from .to_map import ToMapCollector, to_map

__all__ = [
    "BaseCollector",
    "Collector",
    "CollectorError",
    "ClassificationError",
    "ReductionError",
    "DuplicateKeyError",
    "EmptyGroupError",
    "ToListCollector",
    "ToSetCollector",
    "ToArrayCollector",
    "JoiningCollector",
    "CountingCollector",
    "SummingCollector",
    "AveragingCollector",
    "SummarizingCollector",
    "SummaryStatistics",
    "ExtremeCollector",
    "MappingCollector",
    "FlatMappingCollector",
    "FilteringCollector",
    "CollectingAndThen",
    "TeeingCollector",
    "ReducingCollector",
    "ToMapCollector",
    "GroupingCollector",
    "PartitioningCollector",
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
    "register_collector",
    "get_collector_factory",
    "create_collector",
    "registered_collectors",
    "CollectorFactory",
]
