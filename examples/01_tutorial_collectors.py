"""
Example 01: Collectors walkthrough on the tutorial trips.

Goal:
    Replay the collect / groupingBy / partitioningBy walkthrough: whole-stream
    collectors, grouping trips by state and partitioning them by distance.

Usage:
    python examples/01_tutorial_collectors.py
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[1]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, io, toy_data
from collectlib import (
    averaging,
    collect,
    counting,
    group_by,
    grouping_by,
    joining,
    mapping,
    max_by,
    min_by,
    partition,
    summing,
    to_list,
    to_map,
    to_set,
)
from collectlib.core.utils import configure_logging


def distance(trip):
    return trip.distance


def main(argv=None):
    args = cli.parse_args("Collectors walkthrough", argv)
    configure_logging(args.log_level)
    trips = toy_data.tutorial_trips()

    # 1. Whole-stream collectors
    whole = {
        "to_list": collect(trips, mapping(distance, to_list())),
        "to_set": collect(trips, mapping(lambda t: t.state, to_set())),
        "to_map": collect(trips, to_map(lambda t: t.state, distance)),
        "summing": collect(trips, summing(distance)),
        "averaging": collect(trips, averaging(distance)),
        "min_by": collect(trips, min_by(distance)).state,
        "max_by": collect(trips, max_by(distance)).state,
        "counting": collect(trips, counting()),
        "joining": collect(trips, mapping(lambda t: t.state, joining(", ", "[", "]"))),
    }

    # 2. Grouping and partitioning
    by_state = group_by(trips, lambda t: t.state, summing(distance))
    long_short = partition(trips, lambda t: t.distance > 4000, summing(distance))
    states_by_length = partition(trips, lambda t: t.distance > 4000, mapping(lambda t: t.state, to_list()))
    nested = group_by(
        trips,
        lambda t: t.distance // 1000 * 1000,
        grouping_by(lambda t: t.state[0], counting()),
    )

    result = {
        "name": "01_tutorial_collectors",
        "config": {"n_trips": len(trips)},
        "outputs": {
            "whole_stream": whole,
            "group_by_state": by_state,
            "partition_by_distance": long_short,
            "states_by_length": states_by_length,
            "nested": nested,
        },
    }
    io.print_summary(result)
    return result


if __name__ == "__main__":
    main()
