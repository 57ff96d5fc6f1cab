"""Shared test fixtures — configs and sample reports."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from shannon.bench.models import BenchReport, BenchResult
from shannon.config.schema import BenchConfig, BenchSection


@pytest.fixture(autouse=True)
def _clear_bench_env(monkeypatch):
    for name in ("ITERATIONS", "WARMUP", "SEED", "CHARSET", "FORMAT"):
        monkeypatch.delenv(f"SHANNON_BENCH_{name}", raising=False)


@pytest.fixture
def fast_config() -> BenchConfig:
    """A config small enough to run inside a unit test."""
    return BenchConfig(
        bench=BenchSection(
            iterations=3,
            warmup=1,
            seed=42,
            cases={"empty": 0, "tiny": 8, "small": 64},
        )
    )


@pytest.fixture
def fast_config_file(tmp_path: Path) -> Path:
    """A .shannon-bench.toml with tiny cases, written to *tmp_path*."""
    path = tmp_path / ".shannon-bench.toml"
    path.write_text(textwrap.dedent("""\
        version = "1.0"

        [bench]
        iterations = 2
        warmup = 0
        seed = 1

        [bench.cases]
        empty = 0
        small = 16
    """))
    return path


@pytest.fixture
def sample_report() -> BenchReport:
    return BenchReport(
        results=[
            BenchResult(
                name="empty", size=0, iterations=10,
                mean_ns=55.0, min_ns=40, max_ns=90, entropy=0.0,
            ),
            BenchResult(
                name="small", size=64, iterations=10,
                mean_ns=6400.0, min_ns=6000, max_ns=9000, entropy=5.4375,
            ),
        ],
        charset="alphanumeric",
        seed=42,
        duration_ms=1.25,
    )
