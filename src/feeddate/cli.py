"""Feeddate CLI — entry point.

Commands:
    feeddate parse  <text>            Parse a feed date to epoch milliseconds
    feeddate format <ms>              Relative display string for a timestamp
    feeddate filter --hours N <ts>... Indices of timestamps inside a window
    feeddate scan   <file>            Parse every line of a file of dates
    feeddate bench                    Time the date operations
"""
from __future__ import annotations

import json
import logging
import sys
import time
from datetime import timezone
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler

from .api import filter_by_time_window, format_article_date, parse_rss_date
from .config import settings
from .errors import BoundaryError
from .filtering.time_window import ms_to_seconds
from .formatting.relative import format_relative
from .parsers.date_parser import default_parser
from .validation.freshness import default_validator

console = Console()
err_console = Console(stderr=True)

# ── Helpers ─────────────────────────────────────────────────────────────────


def _now_option(now: float | None) -> float:
    return now if now is not None else time.time() * 1000


def _coerce_timestamp(raw: str) -> Any:
    """Numbers become floats; anything else is passed through and skipped by the filter."""
    try:
        return float(raw)
    except ValueError:
        return raw


def _scan_line(line_no: int, raw: str, now_ms: float) -> dict[str, Any]:
    now = ms_to_seconds(now_ms)
    instant = default_parser.parse(raw)
    return {
        "line": line_no,
        "raw": raw,
        "format": default_parser.detect(raw),
        "instant_ms": None if instant is None else instant * 1000,
        "fresh": default_validator.is_fresh(instant, now),
        "relative": None if instant is None else format_relative(instant, now),
    }


# ── CLI root ─────────────────────────────────────────────────────────────────


@click.group()
@click.version_option(version="1.0.0", prog_name="feeddate")
@click.option(
    "--log-level", default=settings.log_level, show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level for diagnostic output (written to stderr).",
)
def main(log_level: str) -> None:
    """feeddate — parse, validate and display feed publication dates."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


# ── parse ────────────────────────────────────────────────────────────────────


@main.command()
@click.argument("text")
@click.option("--fallback", default="", help="Date used when TEXT is empty (e.g. the feed's isoDate).")
@click.option("--now", type=float, default=None, help="Current time in epoch ms (default: wall clock).")
@click.option("--no-validate", is_flag=True, help="Skip the freshness window; only require a parseable date.")
def parse(text: str, fallback: str, now: float | None, no_validate: bool) -> None:
    """Parse a feed date and print it as epoch milliseconds.

    Exits with status 1 when the date is unparseable or outside the
    freshness window (with --no-validate, only when it is unparseable).

    \b
    Examples:
      feeddate parse "Fri, 25 Dec 2020 12:00:00 GMT"
      feeddate parse "" --fallback 2020-12-25T12:00:00Z
      feeddate parse 2019-01-01 --no-validate
    """
    if no_validate:
        instant = default_parser.parse(text or fallback)
        result = None if instant is None else instant * 1000
    else:
        result = parse_rss_date(text, fallback, now=_now_option(now))
    if result is None:
        err_console.print(f"[yellow]Unusable date: {(text or fallback)!r}[/yellow]")
        sys.exit(1)
    click.echo(result)


# ── format ───────────────────────────────────────────────────────────────────


@main.command("format")
@click.argument("instant", type=float)
@click.option("--now", type=float, default=None, help="Current time in epoch ms (default: wall clock).")
@click.option("--utc", is_flag=True, help="Render absolute dates in UTC instead of local time.")
def format_(instant: float, now: float | None, utc: bool) -> None:
    """Print the relative display string for an epoch-ms INSTANT.

    \b
    Examples:
      feeddate format 1608897600000
      feeddate format 1608897600000 --utc
    """
    tz = timezone.utc if utc else None
    try:
        click.echo(format_article_date(instant, now=_now_option(now), tz=tz))
    except BoundaryError as exc:
        raise click.BadParameter(str(exc), param_hint="INSTANT") from exc


# ── filter ───────────────────────────────────────────────────────────────────


@main.command("filter")
@click.argument("timestamps", nargs=-1)
@click.option("--hours", "-H", type=float, required=True, help="Window size in hours.")
@click.option("--now", type=float, default=None, help="Current time in epoch ms (default: wall clock).")
def filter_(timestamps: tuple[str, ...], hours: float, now: float | None) -> None:
    """Print the indices of TIMESTAMPS (epoch ms) inside the last N hours.

    Non-numeric values are skipped.

    \b
    Examples:
      feeddate filter --hours 24 1608897600000 1608800000000 bad
    """
    values = [_coerce_timestamp(t) for t in timestamps]
    try:
        indices = filter_by_time_window(values, hours, now=_now_option(now))
    except BoundaryError as exc:
        raise click.BadParameter(str(exc), param_hint="--hours") from exc
    click.echo(json.dumps(indices))


# ── scan ─────────────────────────────────────────────────────────────────────


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output", "-o", "output_fmt", default="table",
    type=click.Choice(["table", "json"], case_sensitive=False),
    help="Output format.",
    show_default=True,
)
@click.option("--now", type=float, default=None, help="Current time in epoch ms (default: wall clock).")
def scan(file: Path, output_fmt: str, now: float | None) -> None:
    """Parse every non-empty line of FILE as a feed date.

    \b
    Examples:
      feeddate scan dates.txt
      feeddate scan dates.txt --output json
    """
    from .visualization.tables import print_scan_table

    now_ms = _now_option(now)
    rows: list[dict[str, Any]] = []
    with file.open(encoding="utf-8", errors="replace") as fh:
        for line_no, raw_line in enumerate(fh, start=1):
            raw = raw_line.strip()
            if raw:
                rows.append(_scan_line(line_no, raw, now_ms))

    if not rows:
        err_console.print(f"[yellow]No dates found in {file.name}[/yellow]")
        return

    if output_fmt == "json":
        for row in rows:
            click.echo(json.dumps(row))
    else:
        print_scan_table(rows, title=file.name)

    parsed = sum(1 for r in rows if r["instant_ms"] is not None)
    fresh = sum(1 for r in rows if r["fresh"])
    err_console.print(f"[dim]{len(rows)} lines, {parsed} parsed, {fresh} fresh[/dim]")


# ── bench ────────────────────────────────────────────────────────────────────


@main.command()
@click.option("--iterations", "-n", default=10_000, type=click.IntRange(min=1), show_default=True)
def bench(iterations: int) -> None:
    """Time parse, format and filter over a fixed sample of feed dates."""
    from .perf.benchmark import run_benchmark
    from .perf.monitor import performance_monitor
    from .visualization.tables import print_benchmark_table, print_stats_table

    result = run_benchmark(iterations)
    print_benchmark_table(result.as_dict())
    print_stats_table(performance_monitor.summary())
    performance_monitor.log_summary()


if __name__ == "__main__":
    main()
