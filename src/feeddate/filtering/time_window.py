"""Rolling recency window over a batch of millisecond timestamps."""
from __future__ import annotations

import math
from numbers import Real
from typing import Any, Iterable

HOUR = 3600


def ms_to_seconds(value: float) -> int:
    """Millisecond timestamp to whole epoch seconds, truncating toward zero."""
    return int(value / 1000.0)


def _is_timestamp(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


class TimeWindowFilter:
    """Select timestamps no older than ``hours`` before ``now``.

    There is no upper bound, so future timestamps always pass. A zero or
    negative ``hours`` puts the cutoff at or after ``now``.
    """

    def __init__(self, hours: float, now: int) -> None:
        self.hours = int(hours)
        self.now = now

    @property
    def cutoff(self) -> int:
        return self.now - self.hours * HOUR

    def matches(self, timestamp_ms: float) -> bool:
        return ms_to_seconds(timestamp_ms) >= self.cutoff

    def indices(self, timestamps: Iterable[Any]) -> list[int]:
        """Original positions of matching entries, in input order.

        Entries that are not numbers are skipped without complaint.
        """
        return [
            i
            for i, value in enumerate(timestamps)
            if _is_timestamp(value) and self.matches(value)
        ]


def filter_indices(timestamps: Iterable[Any], hours: float, now: int) -> list[int]:
    return TimeWindowFilter(hours, now).indices(timestamps)
