"""
Run every registered example in a subprocess and report pass/fail.

Usage:
    python examples/run_all.py --quick
"""
import argparse
import subprocess
import sys
from pathlib import Path
from typing import Optional

sys.path.append(str(Path(__file__).resolve().parent.parent))

from examples.registry import EXAMPLES, ExampleMetadata

EXAMPLES_DIR = Path(__file__).resolve().parent


def _run_example(entry: ExampleMetadata, seed: int, quick: bool) -> Optional[str]:
    """Run one example; return a failure reason or None on success."""
    script = EXAMPLES_DIR / entry["path"]
    if not script.exists():
        return "File not found"
    cmd = [sys.executable, str(script), "--seed", str(seed)]
    if quick:
        cmd.append("--quick")
    # 子进程运行，隔离全局配置与日志状态
    proc = subprocess.run(cmd, capture_output=True, text=True)
    if proc.returncode != 0:
        return f"exit code {proc.returncode}\n{proc.stderr}"
    return None


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run collectlib examples.")
    parser.add_argument("--quick", action="store_true", help="Run examples in quick mode")
    parser.add_argument("--seed", type=int, default=0, help="Seed forwarded to every example")
    parser.add_argument("--tags", type=str, help="Comma-separated tags; run only matching examples")
    parser.add_argument("--fail-fast", action="store_true", help="Stop on first failure")
    args = parser.parse_args(argv)

    wanted = set(args.tags.split(",")) if args.tags else None
    selected = [e for e in EXAMPLES if wanted is None or wanted.intersection(e["tags"])]
    failures = {}

    for entry in selected:
        print(f"[RUN ] {entry['path']} ...", end="", flush=True)
        reason = _run_example(entry, args.seed, args.quick)
        if reason is None:
            print(" [PASS]")
            continue
        print(" [FAIL]")
        print(f"  {reason}")
        failures[entry["path"]] = reason
        if args.fail_fast:
            break

    print("-" * 60)
    print(f"{len(selected) - len(failures)}/{len(selected)} examples passed "
          f"({len(EXAMPLES) - len(selected)} skipped by tag)")
    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
