"""Relative-time rendering: "Just now", "5 minutes ago", ..., "12/25/2020".

Buckets are evaluated in order, first match wins:

    elapsed < 60s      Just now
    elapsed < 1 hour   N minute(s) ago
    elapsed < 1 day    N hour(s) ago
    elapsed < 1 week   N day(s) ago
    otherwise          MM/DD/YYYY

A future instant has negative elapsed time and lands in "Just now".

The absolute date is rendered in the *local* time zone of the process while
parsing is UTC-only. Pass ``tz`` to pin the zone.
"""
from __future__ import annotations

import enum
from datetime import datetime, tzinfo

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY


class Bucket(enum.IntEnum):
    """Elapsed-time categories, ordered from most to least recent."""

    JUST_NOW = 0
    MINUTES = 1
    HOURS = 2
    DAYS = 3
    ABSOLUTE = 4


# (upper bound exclusive, bucket, unit seconds, noun)
_BUCKETS: list[tuple[int, Bucket, int, str]] = [
    (MINUTE, Bucket.JUST_NOW, 1, ""),
    (HOUR, Bucket.MINUTES, MINUTE, "minute"),
    (DAY, Bucket.HOURS, HOUR, "hour"),
    (WEEK, Bucket.DAYS, DAY, "day"),
]


def bucket_for(elapsed: int) -> Bucket:
    for limit, bucket, _, _ in _BUCKETS:
        if elapsed < limit:
            return bucket
    return Bucket.ABSOLUTE


def pluralize(count: int, noun: str) -> str:
    """'1 minute', '2 minutes', '0 minutes'."""
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def format_absolute(instant: int, tz: tzinfo | None = None) -> str:
    """MM/DD/YYYY of instant, in tz or the local zone when tz is None."""
    return datetime.fromtimestamp(instant, tz).strftime("%m/%d/%Y")


def format_relative(instant: int, now: int, tz: tzinfo | None = None) -> str:
    """Render instant relative to now (both epoch seconds)."""
    elapsed = now - instant
    for limit, bucket, unit, noun in _BUCKETS:
        if elapsed < limit:
            if bucket is Bucket.JUST_NOW:
                return "Just now"
            return f"{pluralize(elapsed // unit, noun)} ago"
    return format_absolute(instant, tz)
