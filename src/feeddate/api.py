"""Public entry points, using the millisecond-epoch convention of feed consumers.

    parse_rss_date("Fri, 25 Dec 2020 12:00:00 GMT")   -> 1608897600000 or None
    format_article_date(1608897600000)                 -> "3 hours ago"
    filter_by_time_window([ts0, ts1, "bad"], 24)       -> [0, 1]

Every call takes an optional ``now`` (milliseconds) so results are
reproducible; it defaults to the wall clock. Each call is timed by the
shared performance monitor.
"""
from __future__ import annotations

import math
import time
from collections.abc import Iterable
from datetime import datetime, tzinfo
from numbers import Real
from typing import Any, Callable, Sequence, TypeVar

from .errors import BoundaryError
from .filtering.recent import select_recent
from .filtering.time_window import filter_indices, ms_to_seconds
from .formatting.relative import format_relative
from .parsers.date_parser import default_parser
from .perf.monitor import performance_monitor
from .validation.freshness import default_validator

T = TypeVar("T")


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def _now_seconds(now: float | None) -> int:
    if now is None:
        return int(time.time())
    return ms_to_seconds(now)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_finite_number(value: Any) -> bool:
    """A real number that fits a float; ints past the float range do not."""
    if not _is_number(value):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


# ── parseRSSDate ────────────────────────────────────────────────────────────


def parse_rss_date(
    primary: str | None = None,
    fallback: str | None = None,
    *,
    now: float | None = None,
) -> int | None:
    """Parse a feed date and return it in milliseconds, or None if unusable.

    ``primary`` (the feed's pubDate) wins when non-empty, otherwise
    ``fallback`` (its isoDate) is used. Non-string arguments count as absent.
    None is returned when both are empty, when no format matches, and when
    the date falls outside the freshness window.
    """

    def _run() -> int | None:
        text = _as_text(primary) or _as_text(fallback)
        if not text:
            return None
        instant = default_parser.parse(text)
        if not default_validator.is_fresh(instant, _now_seconds(now)):
            return None
        return instant * 1000

    return performance_monitor.measure("parseRSSDate", _run)


# ── formatArticleDate ───────────────────────────────────────────────────────


def _instant_seconds(value: Any) -> int:
    if isinstance(value, datetime):
        return int(value.timestamp())
    if not _is_finite_number(value):
        raise BoundaryError("formatArticleDate", "instant", value, "a finite millisecond timestamp")
    return ms_to_seconds(value)


def format_article_date(
    instant: Any = MISSING,
    *,
    now: float | None = None,
    tz: tzinfo | None = None,
) -> str | None:
    """Relative display string for a millisecond timestamp (or datetime).

    Returns None when no instant is supplied. Dates older than a week are
    shown as MM/DD/YYYY in the local zone unless ``tz`` is given.
    """
    if instant is MISSING:
        return None

    def _run() -> str:
        seconds = _instant_seconds(instant)
        try:
            return format_relative(seconds, _now_seconds(now), tz)
        except (OverflowError, OSError, ValueError) as exc:
            raise BoundaryError(
                "formatArticleDate", "instant", instant, "within the platform's date range"
            ) from exc

    return performance_monitor.measure("formatArticleDate", _run)


# ── filterByTimeWindow ──────────────────────────────────────────────────────


def filter_by_time_window(
    timestamps: Any = MISSING,
    hours: Any = MISSING,
    *,
    now: float | None = None,
) -> list[int] | None:
    """Indices of millisecond timestamps no older than ``hours`` hours.

    Non-numeric entries are skipped. Returns None if either argument is
    missing; raises BoundaryError if ``hours`` is not a number or
    ``timestamps`` is not a sequence.
    """
    if timestamps is MISSING or hours is MISSING:
        return None
    if not _is_finite_number(hours):
        raise BoundaryError("filterByTimeWindow", "hours", hours)
    if isinstance(timestamps, (str, bytes)) or not isinstance(timestamps, Iterable):
        raise BoundaryError("filterByTimeWindow", "timestamps", timestamps, "a sequence")

    values = list(timestamps)
    return performance_monitor.measure(
        "filterByTimeWindow",
        lambda: filter_indices(values, hours, _now_seconds(now)),
        item_count=len(values),
    )


# ── filterRecentArticles ────────────────────────────────────────────────────


def filter_recent_articles(
    articles: Sequence[T],
    get_pub_date: Callable[[T], str | None],
    *,
    now: float | None = None,
) -> list[T]:
    """Articles from the narrowest recent window that holds enough of them."""
    return performance_monitor.measure(
        "filterRecentArticles",
        lambda: select_recent(articles, get_pub_date, now=_now_seconds(now)),
        item_count=len(articles),
    )
