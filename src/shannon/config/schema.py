"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Optional

Charset = Literal["alphanumeric", "mixed"]
OutputFormat = Literal["terminal", "json"]

CHARSETS = ("alphanumeric", "mixed")
FORMATS = ("terminal", "json")

# Sizes of the original four benchmarks, in code points.
DEFAULT_CASES: Dict[str, int] = {
    "empty": 0,
    "small": 64,
    "medium": 1024,
    "large": 65536,
}


@dataclass
class BenchSection:
    iterations: int = 100
    warmup: int = 5
    seed: Optional[int] = None  # None = fresh random inputs each run
    charset: Charset = "alphanumeric"
    cases: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_CASES))


@dataclass
class OutputSection:
    format: OutputFormat = "terminal"
    show_summary: bool = True


@dataclass
class BenchConfig:
    version: str = "1.0"
    bench: BenchSection = field(default_factory=BenchSection)
    output: OutputSection = field(default_factory=OutputSection)
