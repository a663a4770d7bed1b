"""Multi-format date parser with fixed fallback ordering."""
from __future__ import annotations

import logging
from typing import Sequence

from ..config import settings
from .base import DateFormat, Instant
from .patterns import DEFAULT_FORMATS

logger = logging.getLogger(__name__)


class DateParser:
    """Try each date format in order and return the first successful parse.

    Trial order (first match wins, even if a later format would also match):
      1. ISO      — 2020-12-25T12:00:00
      2. RFC 2822 — Fri, 25 Dec 2020 12:00:00
      3. Simple   — 2020-12-25 12:00:00
      4. Date     — 2020-12-25 (midnight UTC)

    Input longer than ``max_length`` characters is truncated before any
    format is tried; nothing past that point is ever parsed.
    """

    def __init__(
        self,
        formats: Sequence[DateFormat] = DEFAULT_FORMATS,
        max_length: int | None = None,
    ) -> None:
        self._formats = list(formats)
        self._max_length = settings.max_input_length if max_length is None else max_length

    @property
    def formats(self) -> list[str]:
        return [f.name for f in self._formats]

    def parse(self, text: str | None) -> Instant | None:
        """Return seconds since the epoch (UTC), or None if no format matches."""
        if not isinstance(text, str) or not text:
            return None
        text = text[: self._max_length]
        for fmt in self._formats:
            instant = fmt.parse(text)
            if instant is not None:
                return instant
        logger.debug("No date format matched %r", text)
        return None

    def detect(self, text: str | None) -> str | None:
        """Return the name of the format that would parse text, or None."""
        if not isinstance(text, str) or not text:
            return None
        text = text[: self._max_length]
        for fmt in self._formats:
            if fmt.parse(text) is not None:
                return fmt.name
        return None


default_parser = DateParser()


def parse_date(text: str | None) -> Instant | None:
    """Parse text with the default format order."""
    return default_parser.parse(text)
