"""The four date layouts found in feed metadata.

ISO:     2020-12-25T12:00:00[.sss][Z|+hh:mm]
RFC2822: Fri, 25 Dec 2020 12:00:00 [GMT]
Simple:  2020-12-25 12:00:00
Date:    2020-12-25

Each pattern only has to match a prefix of the input; whatever follows the
seconds field (fractions, zone names, offsets) is ignored. Parsed fields are
read as UTC wall-clock time, so a trailing "+05:00" does not shift the result.
"""
from __future__ import annotations

import re
from datetime import datetime, timezone

from .base import Instant

_MONTHS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}
_MONTH_NAMES = {
    "january": 1, "february": 2, "march": 3, "april": 4, "june": 6,
    "july": 7, "august": 8, "september": 9, "october": 10,
    "november": 11, "december": 12,
}
_WEEKDAYS = frozenset({
    "mon", "tue", "wed", "thu", "fri", "sat", "sun",
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
})

_DATE = r"(?P<year>\d{1,4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
_TIME = r"(?P<hour>\d{1,2}):(?P<minute>\d{1,2}):(?P<second>\d{1,2})"

_ISO_RE = re.compile(r"\s*" + _DATE + "T" + _TIME)

_RFC2822_RE = re.compile(
    r"\s*(?P<weekday>[A-Za-z]+),"     # Fri,
    r"\s*(?P<day>\d{1,2})"            # 25
    r"\s*(?P<month>[A-Za-z]+)"        # Dec
    r"\s*(?P<year>\d{1,4})"           # 2020
    r"\s*" + _TIME                    # 12:00:00
)

_SIMPLE_RE = re.compile(r"\s*" + _DATE + r"\s*" + _TIME)

_DATE_ONLY_RE = re.compile(r"\s*" + _DATE)


def _month_number(raw: str) -> int | None:
    key = raw.lower()
    if key.isdigit():
        return int(key)
    return _MONTHS.get(key) or _MONTH_NAMES.get(key)


def to_instant(
    year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0
) -> Instant | None:
    """Seconds since the epoch for UTC wall-clock fields, or None if they are not a real time."""
    try:
        moment = datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    except ValueError:
        return None
    return int(moment.timestamp())


class PatternFormat:
    """A date layout recognised by an anchored regex over the start of the text."""

    def __init__(self, name: str, regex: re.Pattern[str]) -> None:
        self._name = name
        self._regex = regex

    @property
    def name(self) -> str:
        return self._name

    def parse(self, text: str) -> Instant | None:
        m = self._regex.match(text)
        if not m:
            return None
        d = m.groupdict()
        if "weekday" in d and d["weekday"].lower() not in _WEEKDAYS:
            return None
        month = _month_number(d["month"])
        if month is None:
            return None
        return to_instant(
            int(d["year"]),
            month,
            int(d["day"]),
            int(d.get("hour") or 0),
            int(d.get("minute") or 0),
            int(d.get("second") or 0),
        )

    def __repr__(self) -> str:
        return f"PatternFormat({self._name!r})"


ISO_DATETIME = PatternFormat("iso", _ISO_RE)
RFC2822_DATETIME = PatternFormat("rfc2822", _RFC2822_RE)
SIMPLE_DATETIME = PatternFormat("simple", _SIMPLE_RE)
DATE_ONLY = PatternFormat("date", _DATE_ONLY_RE)

# Trial order is significant: first structural match wins.
DEFAULT_FORMATS: tuple[PatternFormat, ...] = (
    ISO_DATETIME,
    RFC2822_DATETIME,
    SIMPLE_DATETIME,
    DATE_ONLY,
)
