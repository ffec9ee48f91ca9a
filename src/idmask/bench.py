# SPDX-License-Identifier: MIT
"""Micro-benchmarks for the encode and decode paths.

Each scenario runs the maximum value of a common integer width through
encode, decode or a full round trip and reports the mean time per call.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

import logfire

from .constants import INT32_MAX, INT64_MAX, UINT64_MAX
from .core import Hashids

BENCH_SALT = "this is my salt"
WIDTHS = {"int32": INT32_MAX, "int64": INT64_MAX, "uint64": UINT64_MAX}


@dataclass(frozen=True)
class BenchmarkResult:
    """Timing collected for a single scenario."""

    name: str
    iterations: int
    seconds: float

    @property
    def microseconds_per_call(self) -> float:
        """Return the mean duration of one call in microseconds."""

        if not self.iterations:
            return 0.0
        return self.seconds / self.iterations * 1_000_000


def _time(name: str, call: Callable[[], object], iterations: int) -> BenchmarkResult:
    """Run ``call`` ``iterations`` times and return the elapsed time."""

    with logfire.span("bench.{name}", name=name, iterations=iterations):
        start = time.perf_counter()
        for _ in range(iterations):
            call()
        elapsed = time.perf_counter() - start
    return BenchmarkResult(name=name, iterations=iterations, seconds=elapsed)


def run_benchmarks(
    codec: Hashids | None = None, iterations: int = 10_000
) -> list[BenchmarkResult]:
    """Time encode, decode and round trip for each integer width.

    Args:
        codec: Encoder under test. Defaults to one salted with ``BENCH_SALT``.
        iterations: Calls per scenario.

    Returns:
        list[BenchmarkResult]: One result per scenario, in execution order.

    Raises:
        ValueError: If ``iterations`` is negative.
    """

    if iterations < 0:
        raise ValueError("iterations must be non-negative")
    codec = codec or Hashids(salt=BENCH_SALT)
    results: list[BenchmarkResult] = []
    for width, value in WIDTHS.items():
        hashid = codec.encode(value)
        results.append(
            _time(f"encode_{width}", lambda v=value: codec.encode(v), iterations)
        )
        results.append(
            _time(f"decode_{width}", lambda h=hashid: codec.decode(h), iterations)
        )
        results.append(
            _time(
                f"roundtrip_{width}",
                lambda v=value: codec.decode(codec.encode(v)),
                iterations,
            )
        )
    return results


def format_results(results: list[BenchmarkResult]) -> str:
    """Return ``results`` as an aligned plain-text table."""

    width = max((len(result.name) for result in results), default=4)
    lines = [f"{'name':<{width}}  {'calls':>8}  {'us/call':>10}"]
    for result in results:
        lines.append(
            f"{result.name:<{width}}  {result.iterations:>8}"
            f"  {result.microseconds_per_call:>10.2f}"
        )
    return "\n".join(lines)


__all__ = ["BENCH_SALT", "BenchmarkResult", "format_results", "run_benchmarks"]
