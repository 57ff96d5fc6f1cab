"""Rich terminal reporter for benchmark results."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table

from shannon.bench.models import BenchReport


def _fmt_ns(ns: float) -> str:
    if ns >= 1_000_000:
        return f"{ns / 1_000_000:.2f} ms"
    if ns >= 1_000:
        return f"{ns / 1_000:.2f} µs"
    return f"{ns:.0f} ns"


def render(
    report: BenchReport,
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print benchmark results to the terminal using Rich."""
    console = console or Console(stderr=True)

    if not report.results:
        console.print("[dim]No benchmark cases configured.[/dim]")
        return

    console.print()
    table = Table(
        title="Shannon Entropy Benchmarks",
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Case", style="cyan", min_width=10)
    table.add_column("Size", justify="right", style="magenta")
    table.add_column("Iterations", justify="right")
    table.add_column("Mean", justify="right", style="green")
    table.add_column("Min", justify="right")
    table.add_column("Max", justify="right")
    table.add_column("ns/char", justify="right")
    table.add_column("Entropy", justify="right", style="yellow")

    for r in report.results:
        per_char = r.ns_per_code_point
        table.add_row(
            r.name,
            str(r.size),
            str(r.iterations),
            _fmt_ns(r.mean_ns),
            _fmt_ns(r.min_ns),
            _fmt_ns(r.max_ns),
            f"{per_char:.1f}" if per_char is not None else "-",
            f"{r.entropy:.4f}",
        )

    console.print(table)

    if show_summary:
        _print_summary(console, report)


def _print_summary(console: Console, report: BenchReport) -> None:
    console.print()
    console.print(f"[dim]Charset:[/dim]     {report.charset}")
    console.print(f"[dim]Seed:[/dim]        {report.seed if report.seed is not None else 'random'}")
    console.print(f"[dim]Cases:[/dim]       {len(report.results)}")
    console.print(f"[dim]Iterations:[/dim]  {report.total_iterations}")
    console.print(f"[dim]Duration:[/dim]    {report.duration_ms:.0f}ms")
