"""Calendar arithmetic used by the picker core, free of UI dependencies."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import IntEnum
from typing import Iterator, Protocol
from zoneinfo import ZoneInfo


class Weekday(IntEnum):
    """Day of the week, numbered Sunday=1 .. Saturday=7.

    The numbering is fixed; which day starts a displayed week is the
    calendar's ``first_weekday`` setting.
    """

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @classmethod
    def from_date(cls, d: date) -> "Weekday":
        return cls(d.isoweekday() % 7 + 1)

    @classmethod
    def parse(cls, name: str) -> "Weekday":
        """Look up a weekday by (case-insensitive) name, e.g. ``"monday"``."""
        return cls[name.strip().upper()]

    @property
    def is_weekend(self) -> bool:
        return self in (Weekday.SATURDAY, Weekday.SUNDAY)

    @property
    def python_weekday(self) -> int:
        """Monday=0 .. Sunday=6, as used by ``datetime`` and ``calendar``."""
        return (self.value + 5) % 7


class CalendarAdapter(Protocol):
    """Day/week/month arithmetic consumed by the grid, policy and layout.

    Implementations must be hashable: month grids are memoised per calendar.
    """

    def to_day(self, value: date) -> date: ...

    def today(self) -> date: ...

    def start_of_month(self, value: date) -> date: ...

    def week_interval(self, day: date) -> tuple[date, date]: ...

    def month_interval(self, day: date) -> tuple[date, date]: ...

    def add_months(self, value: date, n: int) -> date: ...

    def weekday_of(self, value: date) -> Weekday: ...

    def is_same_day(self, a: date, b: date) -> bool: ...

    def day_sequence(self, start: date, end: date) -> Iterator[date]: ...


@dataclass(frozen=True)
class GregorianCalendar:
    """Proleptic Gregorian calendar backed by the ``calendar`` module.

    ``timezone`` is the reference zone that aware datetimes are converted
    into before being truncated to a day. Naive datetimes are truncated as-is.
    Out-of-range results raise ``ValueError`` or ``OverflowError``.
    """

    first_weekday: Weekday = Weekday.SUNDAY
    timezone: ZoneInfo | None = None

    def to_day(self, value: date) -> date:
        if isinstance(value, datetime):
            if self.timezone is not None and value.tzinfo is not None:
                value = value.astimezone(self.timezone)
            return value.date()
        return value

    def today(self) -> date:
        return datetime.now(self.timezone).date()

    def start_of_month(self, value: date) -> date:
        return self.to_day(value).replace(day=1)

    def week_interval(self, day: date) -> tuple[date, date]:
        day = self.to_day(day)
        offset = (day.weekday() - self.first_weekday.python_weekday) % 7
        start = day - timedelta(days=offset)
        return start, start + timedelta(days=6)

    def month_interval(self, day: date) -> tuple[date, date]:
        day = self.to_day(day)
        last = calendar.monthrange(day.year, day.month)[1]
        return day.replace(day=1), day.replace(day=last)

    def add_months(self, value: date, n: int) -> date:
        value = self.to_day(value)
        year, month0 = divmod(value.year * 12 + value.month - 1 + n, 12)
        if not date.min.year <= year <= date.max.year:
            raise ValueError(f"year {year} is out of range")
        # Clamp so Jan 31 + 1 month lands on the last day of February
        last = calendar.monthrange(year, month0 + 1)[1]
        return date(year, month0 + 1, min(value.day, last))

    def weekday_of(self, value: date) -> Weekday:
        return Weekday.from_date(self.to_day(value))

    def is_same_day(self, a: date, b: date) -> bool:
        return self.to_day(a) == self.to_day(b)

    def day_sequence(self, start: date, end: date) -> Iterator[date]:
        """Yield every day from ``start`` to ``end`` inclusive."""
        day, end = self.to_day(start), self.to_day(end)
        one = timedelta(days=1)
        while day <= end:
            yield day
            if day == end:
                break
            day += one
