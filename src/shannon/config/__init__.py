"""Benchmark configuration loading, schema, and defaults."""

from shannon.config.loader import ConfigError, load_config
from shannon.config.schema import BenchConfig, BenchSection, OutputSection

__all__ = [
    "BenchConfig",
    "BenchSection",
    "ConfigError",
    "OutputSection",
    "load_config",
]
