"""
Min-priority queue command-line interface.

Usage examples:
    python -m min_binary_heap.cli sort 16 14 10 8 7 9 3 2 4 1
    python -m min_binary_heap.cli demo
    python -m min_binary_heap.cli -v bench --path heap.csv --base-input 100 --steps 8
"""

import argparse
import logging
import math
import sys

from .benchmark import run_benchmarks
from .heap import MinBinaryHeap

logger = logging.getLogger(__name__)

# Insertion order used by the `demo` subcommand.
DEMO_VALUES = [16, 14, 10, 8, 7, 9, 3, 2, 4, 1]


def parse_number(text):
    """argparse type: int if possible, otherwise a float other than NaN."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    if math.isnan(value):
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    return value


# -------------------------------------------------------------------
# Commands
# -------------------------------------------------------------------
def cmd_sort(args):
    """Print the values in extraction (ascending) order."""
    queue = MinBinaryHeap(args.values)
    print(" ".join(str(v) for v in queue.drain()))


def cmd_demo(args):
    """Insert the demo values and extract until the queue is empty."""
    queue = MinBinaryHeap()
    for v in DEMO_VALUES:
        queue.insert(v)
    print(f"Inserted {DEMO_VALUES}; size={queue.size()}")
    while True:
        v = queue.extract_min()
        print(f"  extract_min -> {v}")
        if v is None:
            break


def cmd_bench(args):
    """Run the insert/extract_min benchmark and write a CSV."""
    rows = run_benchmarks(args.path, base_input=args.base_input, steps=args.steps,
                          iterations=args.iterations)
    print(f"Benchmark completed. {len(rows)} rows saved to {args.path}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m min_binary_heap.cli", description="Min binary heap CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("sort", help="Heap-sort numbers given on the command line")
    s.add_argument("values", nargs="+", type=parse_number)
    s.set_defaults(func=cmd_sort)

    s = sub.add_parser("demo", help="Run the insert/extract round-trip demo")
    s.set_defaults(func=cmd_demo)

    s = sub.add_parser("bench", help="Benchmark heap operations to CSV")
    s.add_argument("--path", required=True)
    s.add_argument("--base-input", type=int, default=100)
    s.add_argument("--steps", type=int, default=12)
    s.add_argument("--iterations", type=int, default=5)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m min_binary_heap.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("min_binary_heap").setLevel(level)
    if args.cmd == "bench" and (args.base_input < 1 or args.steps < 1 or args.iterations < 1):
        parser.error("--base-input, --steps and --iterations must be positive")
    logger.debug("running %s", args.cmd)
    args.func(args)


if __name__ == "__main__":
    main()
