"""Month grid calculations with no UI dependencies."""

import logging
from datetime import date
from functools import lru_cache

from calendar_adapter import CalendarAdapter, Weekday

logger = logging.getLogger(__name__)

DAYS_IN_WEEK = 7

DAY_ABBR = {
    Weekday.SUNDAY: "Sun",
    Weekday.MONDAY: "Mon",
    Weekday.TUESDAY: "Tue",
    Weekday.WEDNESDAY: "Wed",
    Weekday.THURSDAY: "Thu",
    Weekday.FRIDAY: "Fri",
    Weekday.SATURDAY: "Sat",
}


@lru_cache(maxsize=128)
def month_grid(month: date, calendar: CalendarAdapter) -> tuple[date, ...]:
    """Return every day shown for the month containing ``month``.

    The grid runs from the start of the week holding the 1st to the end of
    the week holding the last day, so its length is always a multiple of 7.
    Returns an empty tuple if the calendar cannot resolve the month.
    """
    try:
        first, last = calendar.month_interval(month)
        grid_start, _ = calendar.week_interval(first)
        _, grid_end = calendar.week_interval(last)
        return tuple(calendar.day_sequence(grid_start, grid_end))
    except (ValueError, OverflowError) as exc:
        logger.debug("No grid for month of %s: %s", month, exc)
        return ()


def grid_weeks(grid: tuple[date, ...]) -> list[tuple[date, ...]]:
    """Split a grid into rows of seven days."""
    return [grid[i:i + DAYS_IN_WEEK] for i in range(0, len(grid), DAYS_IN_WEEK)]


def iso_week_numbers(grid: tuple[date, ...]) -> list[str]:
    """Return the ISO week number for each row of the grid.

    Each row is labelled by its middle day, which keeps Sunday-first rows
    on the ISO week that owns most of their days.
    """
    return [str(row[3].isocalendar()[1]) for row in grid_weeks(grid)]


def weekday_label(day: date, calendar: CalendarAdapter) -> str:
    return DAY_ABBR[calendar.weekday_of(day)]


def day_of_year(d: date) -> int:
    """Return the 1-based day-of-year for the given date."""
    return d.timetuple().tm_yday
