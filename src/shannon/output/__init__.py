"""Benchmark reporters."""
