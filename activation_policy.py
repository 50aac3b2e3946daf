"""Decides which grid days are selectable."""

from __future__ import annotations

from datetime import date
from typing import Callable, Iterable

from calendar_adapter import CalendarAdapter, Weekday
from date_range import DateRange


class ActivationPolicy:
    """Active/disabled classification for days of a displayed month.

    Without ``active_ranges`` every day of the displayed month is active and
    the carve-outs are ignored. With ranges, a day is active only if it is
    in the displayed month, inside at least one range, not listed in
    ``disabled_dates`` and not on one of ``inactive_weekdays``.

    ``disabled_for_year`` supplies extra disabled dates (e.g. holidays) for
    a given year; it is called once per year as days of that year are seen.
    """

    def __init__(
        self,
        calendar: CalendarAdapter,
        active_ranges: Iterable[DateRange] | None = None,
        disabled_dates: Iterable[date] = (),
        inactive_weekdays: Iterable[Weekday] = (),
        weekends_inactive: bool = False,
        disabled_for_year: Callable[[int], Iterable[date]] | None = None,
    ) -> None:
        self.calendar = calendar
        self.disabled_for_year = disabled_for_year
        self._disabled_by_year: dict[int, frozenset[date]] = {}
        self.active_ranges: tuple[DateRange, ...] | None = (
            tuple(active_ranges) if active_ranges is not None else None
        )
        self.disabled_dates: frozenset[date] = frozenset(
            calendar.to_day(d) for d in disabled_dates
        )
        weekdays = set(inactive_weekdays)
        if weekends_inactive:
            weekdays |= {Weekday.SATURDAY, Weekday.SUNDAY}
        self.inactive_weekdays: frozenset[Weekday] = frozenset(weekdays)

    def _year_disabled(self, year: int) -> frozenset[date]:
        if self.disabled_for_year is None:
            return frozenset()
        if year not in self._disabled_by_year:
            self._disabled_by_year[year] = frozenset(
                self.calendar.to_day(d) for d in self.disabled_for_year(year))
        return self._disabled_by_year[year]

    def in_month(self, day: date, displayed_month: date) -> bool:
        try:
            first, last = self.calendar.month_interval(displayed_month)
        except (ValueError, OverflowError):
            return False
        return first <= self.calendar.to_day(day) <= last

    def is_active(self, day: date, displayed_month: date) -> bool:
        day = self.calendar.to_day(day)
        if self.active_ranges is None:
            return self.in_month(day, displayed_month)
        if day in self.disabled_dates or day in self._year_disabled(day.year):
            return False
        if self.calendar.weekday_of(day) in self.inactive_weekdays:
            return False
        return self.in_month(day, displayed_month) and any(
            r.contains(day, self.calendar) for r in self.active_ranges
        )

    def classify(self, grid: Iterable[date], displayed_month: date) -> list[tuple[date, bool]]:
        """Return ``(day, is_active)`` pairs in grid order."""
        return [(d, self.is_active(d, displayed_month)) for d in grid]
