"""Shared pytest fixtures for feeddate tests."""
from __future__ import annotations

import time
from datetime import datetime, timezone
from pathlib import Path

import pytest

from feeddate.perf.monitor import performance_monitor

# Fri, 25 Dec 2020 12:00:00 UTC
CHRISTMAS_NOON = 1_608_897_600
CHRISTMAS_MIDNIGHT = 1_608_854_400
HOUR = 3600
DAY = 24 * HOUR


def iso(instant: int) -> str:
    """Canonical ISO string (no zone suffix) for an epoch-seconds instant."""
    return datetime.fromtimestamp(instant, timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")


@pytest.fixture()
def now() -> int:
    """A fixed "current time" three hours after Christmas noon, in epoch seconds."""
    return CHRISTMAS_NOON + 3 * HOUR


@pytest.fixture()
def now_ms(now: int) -> int:
    return now * 1000


@pytest.fixture(autouse=True)
def _reset_monitor():
    performance_monitor.clear()
    yield
    performance_monitor.clear()


@pytest.fixture()
def local_tz(monkeypatch: pytest.MonkeyPatch):
    """Pin the process's local time zone; absolute dates render in local time.

    Usage: ``local_tz("UTC-14")`` (POSIX TZ string, so local = UTC+14).
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")

    def _set(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()


@pytest.fixture()
def dates_file(tmp_path: Path):
    """Return a factory that creates temporary files of date strings."""

    def _make(lines: list[str], name: str = "dates.txt") -> Path:
        p = tmp_path / name
        p.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return p

    return _make
