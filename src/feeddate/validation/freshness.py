"""Plausibility window for article timestamps."""
from __future__ import annotations

from dataclasses import dataclass

from ..config import settings


@dataclass(frozen=True)
class TimeWindow:
    """Closed interval of instants, [start, end] in epoch seconds."""

    start: int
    end: int

    @classmethod
    def around(cls, now: int, before: int, after: int) -> "TimeWindow":
        return cls(start=now - before, end=now + after)

    def __contains__(self, instant: int) -> bool:
        return self.start <= instant <= self.end


class FreshnessValidator:
    """Accept instants from the last ``max_age`` seconds up to ``future_tolerance`` ahead.

    Old dates (e.g. 1970 from a zeroed field) and dates far in the future are
    rejected; the future allowance absorbs clock skew between a feed and us.
    The window is rebuilt from ``now`` on every call.
    """

    def __init__(
        self,
        max_age: int | None = None,
        future_tolerance: int | None = None,
    ) -> None:
        self.max_age = settings.max_age_seconds if max_age is None else max_age
        self.future_tolerance = (
            settings.future_tolerance_seconds if future_tolerance is None else future_tolerance
        )

    def window(self, now: int) -> TimeWindow:
        return TimeWindow.around(now, self.max_age, self.future_tolerance)

    def is_fresh(self, instant: int | None, now: int) -> bool:
        if instant is None:
            return False
        return instant in self.window(now)


default_validator = FreshnessValidator()


def is_valid_article_date(instant: int | None, now: int) -> bool:
    """Freshness check with the configured window."""
    return default_validator.is_fresh(instant, now)
