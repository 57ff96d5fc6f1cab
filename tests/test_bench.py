"""Tests for the benchmark runner."""

import random

import pytest

from shannon.bench.models import BenchResult
from shannon.bench.runner import ALPHANUMERIC, MIXED, NON_ASCII, random_text, run_benchmarks
from shannon.entropy import entropy


class TestRandomText:
    def test_size_is_code_points(self):
        text = random_text(100, "mixed", random.Random(0))
        assert len(text) == 100

    def test_empty(self):
        assert random_text(0, "alphanumeric", random.Random(0)) == ""

    def test_alphanumeric_is_ascii(self):
        text = random_text(500, "alphanumeric", random.Random(1))
        assert set(text) <= set(ALPHANUMERIC)
        assert text.isascii()

    def test_mixed_reaches_non_ascii(self):
        text = random_text(2000, "mixed", random.Random(2))
        assert set(text) <= set(MIXED)
        assert set(text) & set(NON_ASCII)

    def test_seeded_is_reproducible(self):
        a = random_text(64, "mixed", random.Random(5))
        b = random_text(64, "mixed", random.Random(5))
        assert a == b


class TestRunBenchmarks:
    def test_runs_every_case(self, fast_config):
        report = run_benchmarks(fast_config)
        assert [r.name for r in report.results] == ["empty", "tiny", "small"]
        assert [r.size for r in report.results] == [0, 8, 64]

    def test_result_fields(self, fast_config):
        report = run_benchmarks(fast_config)
        for r in report.results:
            assert isinstance(r, BenchResult)
            assert r.iterations == 3
            assert 0 <= r.min_ns <= r.mean_ns <= r.max_ns
            assert isinstance(r.entropy, float)

    def test_entropy_matches_input(self, fast_config):
        report = run_benchmarks(fast_config)
        rng = random.Random(42)
        for r in report.results:
            text = random_text(r.size, "alphanumeric", rng)
            assert r.entropy == float(entropy(text))

    def test_empty_case_zero_entropy(self, fast_config):
        report = run_benchmarks(fast_config)
        assert report.results[0].entropy == 0.0
        assert report.results[0].ns_per_code_point is None

    def test_report_metadata(self, fast_config):
        fast_config.bench.charset = "mixed"
        report = run_benchmarks(fast_config)
        assert report.charset == "mixed"
        assert report.seed == 42
        assert report.total_iterations == 9
        assert report.duration_ms >= 0

    def test_same_seed_same_entropies(self, fast_config):
        a = run_benchmarks(fast_config)
        b = run_benchmarks(fast_config)
        assert [r.entropy for r in a.results] == [r.entropy for r in b.results]


class TestBenchResult:
    def test_ns_per_code_point(self):
        r = BenchResult(name="x", size=4, iterations=1, mean_ns=100.0, min_ns=100, max_ns=100, entropy=2.0)
        assert r.ns_per_code_point == pytest.approx(25.0)
