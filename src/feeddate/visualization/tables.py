"""Rich-powered tables for date scans, benchmarks and timing stats."""
from __future__ import annotations

from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

_console = Console()


def print_scan_table(
    rows: list[dict[str, Any]],
    title: str = "Feed dates",
    max_rows: int = 100,
) -> None:
    """Render scan results (raw, format, instant, fresh, relative) as a Rich table."""
    if not rows:
        _console.print("[yellow]No dates to display.[/yellow]")
        return

    table = Table(title=title, box=box.ROUNDED, show_lines=False)
    table.add_column("#", style="dim", width=4)
    table.add_column("raw", overflow="fold", max_width=40)
    table.add_column("format")
    table.add_column("instant (ms)", justify="right", style="cyan")
    table.add_column("fresh", justify="center")
    table.add_column("relative")

    for row in rows[:max_rows]:
        fresh = "[green]yes[/green]" if row["fresh"] else "[red]no[/red]"
        table.add_row(
            str(row["line"]),
            row["raw"],
            row["format"] or "[dim]-[/dim]",
            "" if row["instant_ms"] is None else str(row["instant_ms"]),
            fresh,
            row["relative"] or "",
        )

    _console.print(table)
    if len(rows) > max_rows:
        _console.print(f"[dim]... and {len(rows) - max_rows} more rows[/dim]")


def print_benchmark_table(result: dict[str, float], title: str = "Benchmark") -> None:
    """Render a BenchmarkResult.as_dict() as a Rich table."""
    iterations = int(result["iterations"])
    table = Table(title=f"{title} — {iterations} iterations", box=box.SIMPLE_HEAVY)
    table.add_column("Operation", style="bold")
    table.add_column("Total (ms)", justify="right", style="cyan")
    table.add_column("Per call (µs)", justify="right")

    passes = {"parse_ms": iterations, "format_ms": iterations, "filter_ms": max(1, iterations // 100)}
    for key, calls in passes.items():
        total = result[key]
        table.add_row(key.removesuffix("_ms"), f"{total:.2f}", f"{total / calls * 1000:.2f}")

    _console.print(table)


def print_stats_table(
    summary: dict[str, dict[str, float]],
    title: str = "Call timings",
) -> None:
    """Render a PerformanceMonitor.summary() dict as a Rich table."""
    table = Table(title=title, box=box.MINIMAL_DOUBLE_HEAD)
    table.add_column("Operation", style="bold")
    for col in ("count", "mean", "p50", "p90", "p99", "max"):
        table.add_column(col, justify="right", style="cyan")

    for op, stats in summary.items():
        if op == "overall":
            continue
        table.add_row(
            op,
            str(int(stats["count"])),
            *[f"{stats[k]:.3f}" for k in ("mean", "p50", "p90", "p99", "max")],
        )

    _console.print(table)
