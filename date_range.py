"""Closed, optionally open-ended ranges of calendar days."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Sequence

from calendar_adapter import CalendarAdapter


def _as_day(value: date, calendar: CalendarAdapter | None = None) -> date:
    if calendar is not None:
        return calendar.to_day(value)
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class DateRange:
    """Days from ``start`` to ``end``, both inclusive.

    A missing ``start`` means unbounded below, a missing ``end`` unbounded
    above. An inverted range (start after end) is allowed but contains
    nothing.
    """

    start: date | None = None
    end: date | None = None

    @classmethod
    def parse(cls, bounds: Sequence[str | None]) -> "DateRange":
        """Build a range from ``[start, end]`` ISO strings (either may be None)."""
        start, end = bounds
        return cls(
            date.fromisoformat(start) if start else None,
            date.fromisoformat(end) if end else None,
        )

    @property
    def is_bounded(self) -> bool:
        return self.start is not None and self.end is not None

    def is_inverted(self, calendar: CalendarAdapter | None = None) -> bool:
        return self.is_bounded and _as_day(self.start, calendar) > _as_day(self.end, calendar)

    def contains(self, day: date, calendar: CalendarAdapter | None = None) -> bool:
        """Return True if ``day`` falls inside the range, compared by day."""
        if self.is_inverted(calendar):
            return False
        day = _as_day(day, calendar)
        if self.start is not None and day < _as_day(self.start, calendar):
            return False
        if self.end is not None and day > _as_day(self.end, calendar):
            return False
        return True
