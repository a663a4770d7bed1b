"""Adaptive recency selection for a batch of feed items.

Narrow windows are tried first; the first one that yields enough items wins.
When none does, every item with a usable date is returned instead.
"""
from __future__ import annotations

import logging
from typing import Callable, Sequence, TypeVar

from ..config import settings
from ..parsers.date_parser import DateParser, default_parser
from ..validation.freshness import FreshnessValidator, default_validator
from .time_window import filter_indices

logger = logging.getLogger(__name__)

T = TypeVar("T")


def usable_timestamps(
    items: Sequence[T],
    get_date: Callable[[T], str | None],
    now: int,
    parser: DateParser = default_parser,
    validator: FreshnessValidator = default_validator,
) -> list[int]:
    """Millisecond timestamp per item; 0 where the date is missing, unparseable or stale."""
    stamps: list[int] = []
    for item in items:
        instant = parser.parse(get_date(item))
        stamps.append(instant * 1000 if validator.is_fresh(instant, now) else 0)
    return stamps


def select_recent(
    items: Sequence[T],
    get_date: Callable[[T], str | None],
    *,
    now: int,
    windows: Sequence[int] | None = None,
    min_items: int | None = None,
) -> list[T]:
    """Return the items of the narrowest window holding at least ``min_items``.

    Args:
        items:     Feed items in display order.
        get_date:  Extracts the raw date string of an item.
        now:       Current time in epoch seconds.
        windows:   Hour windows to try, narrowest first.
        min_items: Items a window must yield to be accepted.
    """
    if not items:
        return []
    windows = settings.recent_windows if windows is None else windows
    min_items = settings.min_recent_items if min_items is None else min_items

    stamps = usable_timestamps(items, get_date, now)
    for hours in windows:
        selected = [items[i] for i in filter_indices(stamps, hours, now)]
        logger.info("Found %d articles from the past %d hours", len(selected), hours)
        if len(selected) >= min_items:
            return selected

    valid = [item for item, stamp in zip(items, stamps) if stamp > 0]
    logger.info("Using %d articles with valid publication dates", len(valid))
    return valid
