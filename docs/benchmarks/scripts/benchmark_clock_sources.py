#!/usr/bin/env python3
"""Performance benchmark: coarse vs precise clock sources.

Compares the per-call cost of:
1. The coarse cached clock (a module attribute load)
2. The precise pendulum-backed clock
3. A bare pendulum.now("UTC") call, as the baseline
4. Timestamp.now() through whichever source is bound for this process

Run twice with FAST_UTC_CLOCK_SOURCE=coarse and =precise to compare the
bound Timestamp.now() cost of each strategy.
"""

import os
import timeit
from typing import NamedTuple

# Set environment variables BEFORE importing fast_utc
os.environ.setdefault("FAST_UTC_LOG_LEVEL", "ERROR")

import pendulum

from fast_utc import Timestamp
from fast_utc.utils.clock import CLOCK_SOURCE, coarse, precise


class BenchmarkResult(NamedTuple):
    """Result from a single benchmark run."""

    name: str
    calls: int
    ns_per_call: float


def run_benchmark(name: str, func, calls: int, repeat: int = 5) -> BenchmarkResult:
    """Time ``func`` and keep the best of ``repeat`` rounds."""
    best = min(timeit.repeat(func, number=calls, repeat=repeat))
    return BenchmarkResult(name=name, calls=calls, ns_per_call=best / calls * 1e9)


def format_results(results: list[BenchmarkResult]) -> str:
    """Format benchmark results as a table."""
    baseline = next(r for r in results if r.name == 'pendulum.now("UTC")')
    lines = [
        "",
        "=" * 72,
        f"CLOCK SOURCE BENCHMARK (bound source: {CLOCK_SOURCE.value})",
        "=" * 72,
        f"{'Function':<40} {'ns/call':>12} {'vs pendulum':>14}",
        "-" * 72,
    ]
    for r in results:
        lines.append(f"{r.name:<40} {r.ns_per_call:>12.1f} {baseline.ns_per_call / r.ns_per_call:>13.2f}x")
    return "\n".join(lines)


def main():
    """Run all benchmarks."""
    calls = 200_000
    coarse.update()

    results = [
        run_benchmark("coarse.recent_since_epoch_millis()", coarse.recent_since_epoch_millis, calls),
        run_benchmark("precise.now_millis()", precise.now_millis, calls),
        run_benchmark('pendulum.now("UTC")', lambda: pendulum.now("UTC"), calls),
        run_benchmark(f"Timestamp.now() ({CLOCK_SOURCE.value})", Timestamp.now, calls),
    ]
    print(format_results(results))


if __name__ == "__main__":
    main()
