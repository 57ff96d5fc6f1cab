"""shannon-bench CLI — Typer application with run and init commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from shannon import __version__

app = typer.Typer(
    name="shannon-bench",
    help="Benchmark the Shannon entropy calculator.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _setup_logging(debug: bool) -> None:
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# ── run ───────────────────────────────────────────────────────────────────────


@app.command()
def run(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .shannon-bench.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-n", help="Timed calls per case"),
    charset: Optional[str] = typer.Option(None, "--charset", help="Input charset: alphanumeric | mixed"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the random inputs"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """Time entropy() over random inputs of each configured size."""
    from shannon.bench.runner import run_benchmarks
    from shannon.config.loader import ConfigError, load_config, validate
    from shannon.output import json_report, terminal

    _setup_logging(debug)

    # --- Load config ---
    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if format is not None:
        cfg.output.format = format  # type: ignore[assignment]
    if iterations is not None:
        cfg.bench.iterations = iterations
    if charset is not None:
        cfg.bench.charset = charset  # type: ignore[assignment]
    if seed is not None:
        cfg.bench.seed = seed

    try:
        validate(cfg)
    except ConfigError as exc:
        console.print(f"[bold red]Invalid option:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    report = run_benchmarks(cfg)

    # --- Output ---
    if cfg.output.format == "terminal":
        terminal.render(report, show_summary=cfg.output.show_summary, console=console)
    else:
        print(json_report.render(report))

    if output:
        Path(output).write_text(json_report.render(report), encoding="utf-8")
        console.print(f"[dim]Report written to {output}[/dim]")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config"),
) -> None:
    """Generate a starter .shannon-bench.toml in the current directory."""
    from shannon.config.defaults import DEFAULT_TOML
    from shannon.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists() and not force:
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"shannon-bench {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """shannon-bench — Benchmark the Shannon entropy calculator."""
