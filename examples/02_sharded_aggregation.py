"""
Example 02: Sharded aggregation with combinable collectors.

Goal:
    Group generated trips per state in independent shards on a thread pool,
    merge the shard accumulators, and check the result against a single pass.

Usage:
    python examples/02_sharded_aggregation.py --quick
"""
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import numpy as np

project_root = Path(__file__).resolve().parents[1]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, io, toy_data
from collectlib import group_by, group_by_sharded, summarizing
from collectlib.core.utils import configure_logging


def main(argv=None):
    args = cli.parse_args("Sharded aggregation", argv)
    configure_logging(args.log_level)
    generator = np.random.default_rng(args.seed)

    n_trips = 500 if args.quick else 20_000
    trips = toy_data.build_trips(n_trips, rng=generator)
    downstream = summarizing(lambda t: t.distance)

    with ThreadPoolExecutor(max_workers=4) as executor:
        sharded = group_by_sharded(
            trips, lambda t: t.state, downstream, shard_size=args.shard_size, executor=executor
        )
    single = group_by(trips, lambda t: t.state, downstream)

    result = {
        "name": "02_sharded_aggregation",
        "config": {"n_trips": n_trips, "shard_size": args.shard_size, "seed": args.seed},
        "outputs": {
            "per_state": sharded,
            "counts_match": all(sharded[k].count == single[k].count for k in single),
            "totals_match": all(sharded[k].total == single[k].total for k in single),
        },
    }
    io.print_summary(result)
    return result


if __name__ == "__main__":
    main()
