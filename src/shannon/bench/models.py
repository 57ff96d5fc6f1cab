"""Benchmark result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class BenchResult:
    """Timings for one benchmark case."""

    name: str
    size: int  # input length in code points
    iterations: int
    mean_ns: float
    min_ns: int
    max_ns: int
    entropy: float  # value computed for the case input

    @property
    def ns_per_code_point(self) -> Optional[float]:
        if self.size == 0:
            return None
        return self.mean_ns / self.size


@dataclass
class BenchReport:
    """Complete result of a benchmark run."""

    results: List[BenchResult] = field(default_factory=list)
    charset: str = "alphanumeric"
    seed: Optional[int] = None
    duration_ms: float = 0.0

    @property
    def total_iterations(self) -> int:
        return sum(r.iterations for r in self.results)
