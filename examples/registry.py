"""
Registry of available examples.
"""
from typing import List, TypedDict


class ExampleMetadata(TypedDict):
    path: str
    tags: List[str]
    description: str


EXAMPLES: List[ExampleMetadata] = [
    {
        "path": "01_tutorial_collectors.py",
        "tags": ["basic", "p0"],
        "description": "Whole-stream collectors, group_by by state and partition by distance.",
    },
    {
        "path": "02_sharded_aggregation.py",
        "tags": ["sharded", "p0"],
        "description": "Sharded group_by on a thread pool, checked against a single pass.",
    },
]
