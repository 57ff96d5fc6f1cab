"""Benchmarks — runner and result models."""

from shannon.bench.models import BenchReport, BenchResult
from shannon.bench.runner import random_text, run_benchmarks

__all__ = [
    "BenchReport",
    "BenchResult",
    "random_text",
    "run_benchmarks",
]
