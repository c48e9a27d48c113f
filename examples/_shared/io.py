"""
Output helpers for examples.
"""
import json
from typing import Any, Dict


def _jsonable(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_jsonable(v) for v in value]
    if hasattr(value, "to_dict"):
        return _jsonable(value.to_dict())
    return value


def print_summary(result: Dict[str, Any]) -> None:
    """
    Print a summary of the example result to stdout.

    Expects result dict to have keys: 'name', 'config', 'outputs'.
    """
    print("=" * 60)
    print(f"EXAMPLE: {result.get('name', 'Unknown')}")
    print("-" * 60)
    if "config" in result:
        print("Config:")
        for k, v in result["config"].items():
            print(f"  {k}: {v}")
    print("-" * 60)
    print(json.dumps(_jsonable(result.get("outputs", {})), indent=2, default=str))
    print("=" * 60)
