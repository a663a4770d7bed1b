"""Abstract date format — every format pattern implements this Protocol."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


Instant = int


@runtime_checkable
class DateFormat(Protocol):
    """Protocol for date formats — duck-typed, no inheritance required."""

    def parse(self, text: str) -> Instant | None:
        """Parse the start of text. Returns None if the layout does not match."""
        ...

    @property
    def name(self) -> str:
        """Human-readable format name (e.g. 'iso', 'rfc2822')."""
        ...
