"""Micro-benchmarks for string comparison, counting loops and the search routines.

Each benchmark runs for a range of sizes. Results can be printed as a table
or as CSV.
"""

from __future__ import annotations

import argparse
import csv
import io
import random
import sys
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Any

from searchlab.search import binary_search, binary_search_par, exponential_search

__all__ = [
    "BenchmarkResult",
    "compare_strings",
    "add_by_value",
    "increment",
    "sorted_data",
    "random_data",
    "power_range",
    "measure",
    "run_all",
    "to_csv",
    "main",
]

_WORD_MODULUS = 2**64
_RAND_LIMIT = 2**31
_CSV_HEADER = ("name", "iterations", "real_time", "cpu_time", "time_unit", "items_per_second")


@dataclass(frozen=True)
class BenchmarkResult:
    """Timing of one benchmark run at one set of arguments."""

    name: str
    args: tuple[int, ...]
    iterations: int
    real_seconds: float
    cpu_seconds: float
    items_processed: int | None = None

    @property
    def label(self) -> str:
        """Name followed by each argument, separated by slashes."""
        return "/".join([self.name, *(str(a) for a in self.args)])

    @property
    def real_time_ns(self) -> float:
        """Wall-clock nanoseconds per iteration."""
        return self.real_seconds / self.iterations * 1e9

    @property
    def cpu_time_ns(self) -> float:
        """CPU nanoseconds per iteration."""
        return self.cpu_seconds / self.iterations * 1e9

    @property
    def items_per_second(self) -> float | None:
        """Processed items per second of wall-clock time, if items were counted."""
        if self.items_processed is None or self.real_seconds <= 0:
            return None
        return self.items_processed / self.real_seconds


def compare_strings(size: int) -> int:
    """Build two equal strings of ``size`` dashes and compare them (-1, 0 or 1)."""
    first = "-" * size
    second = "-" * size
    return (first > second) - (first < second)


def add_by_value(n: int, value: int) -> int:
    """Add ``value`` to a 64-bit unsigned accumulator ``n`` times."""
    total = 0
    for _ in range(n):
        total = (total + value) % _WORD_MODULUS
    return total


def increment(n: int) -> int:
    """Increment a 64-bit unsigned counter ``n`` times and return it."""
    count = 0
    for _ in range(n):
        count = (count + 1) % _WORD_MODULUS
    return count


def sorted_data(size: int) -> list[int]:
    """Return ``0, 1, ..., size - 1``."""
    return list(range(size))


def random_data(size: int, seed: int = 10) -> list[int]:
    """Return ``size`` seeded pseudo-random non-negative integers, sorted."""
    rng = random.Random(seed)
    return sorted(rng.randrange(_RAND_LIMIT) for _ in range(size))


def power_range(low: int, high: int, multiplier: int = 2) -> list[int]:
    """Return ``low``, the powers of ``multiplier`` strictly between, and ``high``."""
    if low < 0 or high < low:
        raise ValueError("range requires 0 <= low <= high")
    if multiplier < 2:
        raise ValueError("multiplier must be at least 2")
    values = [low]
    power = 1
    while power < high:
        if power > low:
            values.append(power)
        power *= multiplier
    if high != low:
        values.append(high)
    return values


def measure(
    name: str,
    func: Callable[..., Any],
    arg: int | Iterable[int],
    min_time: float = 0.5,
) -> BenchmarkResult:
    """Call ``func(*args)`` repeatedly for at least ``min_time`` seconds.

    At least one iteration is always run.
    """
    if min_time < 0:
        raise ValueError("min_time must not be negative")
    args = (arg,) if isinstance(arg, int) else tuple(arg)

    iterations = 0
    cpu_start = time.process_time()
    start = time.perf_counter()
    while True:
        func(*args)
        iterations += 1
        elapsed = time.perf_counter() - start
        if elapsed >= min_time:
            break
    cpu_elapsed = time.process_time() - cpu_start
    return BenchmarkResult(name, args, iterations, elapsed, cpu_elapsed)


def _search_benchmark(
    name: str,
    search: Callable[[Sequence[int], int], int],
    size: int,
    min_time: float,
    extra: tuple[int, ...] = (),
) -> BenchmarkResult:
    data = sorted_data(size)
    target = data[100]
    result = measure(name, lambda *_: search(data, target), (size, *extra), min_time)
    return replace(result, items_processed=result.iterations * size)


def run_all(min_time: float = 0.5) -> list[BenchmarkResult]:
    """Run every registered benchmark over its size range."""
    results = [
        measure("BM_SomeFunction", compare_strings, size, min_time)
        for size in power_range(1 << 10, 1 << 20)
    ]
    results.extend(
        measure("BM_Increment", increment, size, min_time)
        for size in power_range(1 << 8, 1 << 10)
    )
    search_sizes = power_range(1 << 15, 1 << 18)
    results.extend(
        _search_benchmark("BM_BinarySearch", binary_search, size, min_time)
        for size in search_sizes
    )
    results.extend(
        _search_benchmark("BM_ExponentialSearch", exponential_search, size, min_time)
        for size in search_sizes
    )
    threads = 2
    results.extend(
        _search_benchmark(
            "BM_BinarySearchPar",
            lambda nums, n: binary_search_par(nums, n, threads),
            size,
            min_time,
            (threads,),
        )
        for size in search_sizes
    )
    return results


def to_csv(results: Iterable[BenchmarkResult]) -> str:
    """Render results as CSV with a header row; times are in nanoseconds."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(_CSV_HEADER)
    for result in results:
        rate = result.items_per_second
        writer.writerow(
            (
                result.label,
                result.iterations,
                f"{result.real_time_ns:.6g}",
                f"{result.cpu_time_ns:.6g}",
                "ns",
                "" if rate is None else f"{rate:.6g}",
            )
        )
    return buffer.getvalue()


def _to_table(results: Sequence[BenchmarkResult]) -> str:
    width = max((len(r.label) for r in results), default=9)
    width = max(width, len("Benchmark"))
    lines = [
        f"{'Benchmark':<{width}}  {'Time':>14}  {'CPU':>14}  {'Iterations':>10}",
        "-" * (width + 46),
    ]
    for r in results:
        line = (
            f"{r.label:<{width}}  {r.real_time_ns:>11.0f} ns  "
            f"{r.cpu_time_ns:>11.0f} ns  {r.iterations:>10}"
        )
        rate = r.items_per_second
        if rate is not None:
            line += f"  items_per_second={rate:.4g}/s"
        lines.append(line)
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run all benchmarks and print the results."""
    parser = argparse.ArgumentParser(description="Run the searchlab benchmarks.")
    parser.add_argument(
        "--min-time",
        type=float,
        default=0.5,
        help="minimum seconds to spend on each benchmark (default: 0.5)",
    )
    parser.add_argument(
        "--format",
        choices=("console", "csv"),
        default="console",
        help="output format (default: console)",
    )
    options = parser.parse_args(argv)
    if options.min_time < 0:
        parser.error("--min-time must not be negative")

    results = run_all(options.min_time)
    output = to_csv(results) if options.format == "csv" else _to_table(results)
    sys.stdout.write(output)
    return 0