"""Benchmark runner — times ``entropy()`` over random inputs of fixed sizes."""

from __future__ import annotations

import logging
import random
import string
import time
from typing import List

from shannon.bench.models import BenchReport, BenchResult
from shannon.config.schema import BenchConfig
from shannon.entropy import entropy

logger = logging.getLogger(__name__)

ALPHANUMERIC = string.ascii_letters + string.digits

# Accented Latin, Greek, CJK and astral-plane emoji: 2, 2, 3 and 4 bytes in UTF-8.
NON_ASCII = "éüñçøßλπΣΩ日本語漢字😀🔑🚀"
MIXED = ALPHANUMERIC + NON_ASCII


def random_text(size: int, charset: str, rng: random.Random) -> str:
    """Return *size* code points drawn uniformly from *charset*."""
    alphabet = MIXED if charset == "mixed" else ALPHANUMERIC
    return "".join(rng.choice(alphabet) for _ in range(size))


def _time_case(name: str, text: str, iterations: int, warmup: int) -> BenchResult:
    for _ in range(warmup):
        entropy(text)

    timings: List[int] = []
    value = 0.0
    for _ in range(iterations):
        start = time.perf_counter_ns()
        value = entropy(text)
        timings.append(time.perf_counter_ns() - start)

    return BenchResult(
        name=name,
        size=len(text),
        iterations=iterations,
        mean_ns=sum(timings) / len(timings),
        min_ns=min(timings),
        max_ns=max(timings),
        entropy=float(value),
    )


def run_benchmarks(config: BenchConfig) -> BenchReport:
    """Run every configured case and return a BenchReport."""
    start = time.perf_counter()
    bench = config.bench
    rng = random.Random(bench.seed)

    results: List[BenchResult] = []
    for name, size in bench.cases.items():
        text = random_text(size, bench.charset, rng)
        logger.debug(
            "Running case %s: %d code points, %d iterations", name, size, bench.iterations
        )
        result = _time_case(name, text, bench.iterations, bench.warmup)
        logger.debug("Case %s: mean %.0fns", name, result.mean_ns)
        results.append(result)

    elapsed = (time.perf_counter() - start) * 1000

    return BenchReport(
        results=results,
        charset=bench.charset,
        seed=bench.seed,
        duration_ms=round(elapsed, 2),
    )
