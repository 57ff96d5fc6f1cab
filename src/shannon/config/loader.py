"""Load and merge configuration from .shannon-bench.toml and env vars."""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from shannon.config.schema import (
    CHARSETS,
    FORMATS,
    BenchConfig,
    BenchSection,
    OutputSection,
)

CONFIG_FILENAME = ".shannon-bench.toml"

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    unknown = sorted(set(raw) - valid_fields)
    if unknown:
        logger.debug("Ignoring unknown keys in [%s]: %s", section, ", ".join(unknown))
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _int_env(name: str) -> Optional[int]:
    val = os.environ.get(name)
    if val is None:
        return None
    try:
        return int(val)
    except ValueError:
        logger.debug("Ignoring non-integer %s=%r", name, val)
        return None


def _merge_env_overrides(cfg: BenchConfig) -> None:
    """Apply SHANNON_BENCH_* environment variable overrides."""
    iterations = _int_env("SHANNON_BENCH_ITERATIONS")
    if iterations is not None and iterations > 0:
        cfg.bench.iterations = iterations
    warmup = _int_env("SHANNON_BENCH_WARMUP")
    if warmup is not None and warmup >= 0:
        cfg.bench.warmup = warmup
    seed = _int_env("SHANNON_BENCH_SEED")
    if seed is not None:
        cfg.bench.seed = seed
    if val := os.environ.get("SHANNON_BENCH_CHARSET"):
        if val in CHARSETS:
            cfg.bench.charset = val  # type: ignore[assignment]
    if val := os.environ.get("SHANNON_BENCH_FORMAT"):
        if val in FORMATS:
            cfg.output.format = val  # type: ignore[assignment]


def validate(cfg: BenchConfig) -> None:
    """Raise ConfigError on values the bench runner cannot use."""
    bench = cfg.bench
    if not isinstance(bench.iterations, int) or bench.iterations < 1:
        raise ConfigError(f"bench.iterations must be a positive integer, got {bench.iterations!r}")
    if not isinstance(bench.warmup, int) or bench.warmup < 0:
        raise ConfigError(f"bench.warmup must be a non-negative integer, got {bench.warmup!r}")
    if bench.seed is not None and not isinstance(bench.seed, int):
        raise ConfigError(f"bench.seed must be an integer, got {bench.seed!r}")
    if bench.charset not in CHARSETS:
        raise ConfigError(
            f"bench.charset must be one of {', '.join(CHARSETS)}, got {bench.charset!r}"
        )
    if not isinstance(bench.cases, dict) or not bench.cases:
        raise ConfigError("bench.cases must be a non-empty table of name = size")
    for name, size in bench.cases.items():
        if not isinstance(size, int) or size < 0:
            raise ConfigError(f"bench.cases.{name} must be a non-negative integer, got {size!r}")
    if cfg.output.format not in FORMATS:
        raise ConfigError(
            f"output.format must be one of {', '.join(FORMATS)}, got {cfg.output.format!r}"
        )


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> BenchConfig:
    """Load, validate, and return a BenchConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        logger.debug("No %s under %s, using defaults", CONFIG_FILENAME, root)
        cfg = BenchConfig()
    else:
        logger.debug("Loading config from %s", config_path)
        raw = _parse_toml(config_path)
        cfg = BenchConfig(
            version=raw.get("version", "1.0"),
            bench=_build_section(raw, BenchSection, "bench"),
            output=_build_section(raw, OutputSection, "output"),
        )

    _merge_env_overrides(cfg)
    validate(cfg)
    return cfg
