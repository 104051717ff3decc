"""Benchmarks for MinBinaryHeap operations.

Each operation is timed on its own: the heap that an extraction or a peek
runs against is built before the clock starts. Input sizes double from one
step to the next, so an O(log n) per-element cost shows up as a slightly
super-linear total in the CSV.
"""

from __future__ import annotations

import csv
import logging
import random
import statistics
import sys
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .heap import MinBinaryHeap

logger = logging.getLogger(__name__)

FIELDS = (
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Average Space (bytes)",
)

MAX_VALUE = 1000000
PEEKS_PER_RUN = 3


def generate_random_list(size: int, seed: Optional[int] = None) -> List[int]:
    """Random ints in ``[0, MAX_VALUE]``; the same seed gives the same list."""
    rng = random.Random(seed)
    return [rng.randint(0, MAX_VALUE) for _ in range(size)]


def heap_nbytes(heap: MinBinaryHeap) -> int:
    """Backing array plus the elements it references."""
    return heap.storage_nbytes() + sum(sys.getsizeof(item) for item in heap)


def _elapsed_ms(run: Callable[[], None]) -> float:
    start = time.perf_counter()
    run()
    return (time.perf_counter() - start) * 1000


# Each timer returns (elapsed ms, bytes held by the populated heap).

def time_insert(data: Sequence[int]) -> Tuple[float, int]:
    heap: MinBinaryHeap[int] = MinBinaryHeap()

    def run():
        for item in data:
            heap.insert(item)

    elapsed = _elapsed_ms(run)
    return elapsed, heap_nbytes(heap)


def time_extract(data: Sequence[int]) -> Tuple[float, int]:
    heap = MinBinaryHeap(data)
    space = heap_nbytes(heap)

    def run():
        while heap.extract_min() is not None:
            pass

    return _elapsed_ms(run), space


def time_peek(data: Sequence[int]) -> Tuple[float, int]:
    heap = MinBinaryHeap(data)
    space = heap_nbytes(heap)

    def run():
        for _ in range(PEEKS_PER_RUN):
            heap.peek()

    return _elapsed_ms(run), space


TIMERS: Dict[str, Callable[[Sequence[int]], Tuple[float, int]]] = {
    "insert": time_insert,
    "extract_min": time_extract,
    "peek": time_peek,
}


@dataclass
class Measurement:
    size: int
    operation: str
    avg_ms: float
    std_ms: float
    avg_bytes: float

    def as_row(self) -> list:
        return [self.size, self.operation, f"{self.avg_ms:.3f}", f"{self.std_ms:.3f}", f"{self.avg_bytes:.0f}"]


def measure(operation: str, size: int, iterations: int = 5, seed: Optional[int] = None) -> Measurement:
    """Run one timer `iterations` times on fresh random input of length `size`.

    Raises:
        KeyError: if `operation` is not one of ``TIMERS``.
        ValueError: if `iterations` is not positive.
    """
    if iterations < 1:
        raise ValueError("iterations must be positive")
    timer = TIMERS[operation]

    times: List[float] = []
    spaces: List[int] = []
    for i in range(iterations):
        data = generate_random_list(size, None if seed is None else seed + i)
        elapsed, space = timer(data)
        times.append(elapsed)
        spaces.append(space)

    return Measurement(
        size=size,
        operation=operation,
        avg_ms=statistics.mean(times),
        std_ms=statistics.stdev(times) if len(times) > 1 else 0.0,
        avg_bytes=statistics.mean(spaces),
    )


def run_benchmarks(output_file: str, base_input: int = 100, steps: int = 12,
                   iterations: int = 5) -> List[Measurement]:
    """Measure every operation at sizes ``base_input * 2**k`` and write them to a CSV."""
    if base_input < 1 or steps < 1:
        raise ValueError("base_input and steps must be positive")

    sizes = [base_input * (2 ** k) for k in range(steps)]
    results: List[Measurement] = []

    with open(output_file, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(FIELDS)
        for operation in TIMERS:
            for size in sizes:
                m = measure(operation, size, iterations)
                writer.writerow(m.as_row())
                results.append(m)
                logger.info("%s n=%d avg=%.3fms std=%.3fms space=%.0fB",
                            m.operation, m.size, m.avg_ms, m.std_ms, m.avg_bytes)

    return results
