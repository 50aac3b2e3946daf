"""Displayed-month state and render pass for a month date picker.

The layout owns the displayed month and the selection, builds the grid for
the month, classifies each day and hands the result to a renderer. It does
no drawing itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Iterable, NamedTuple, Protocol, Union

from activation_policy import ActivationPolicy
from calendar_adapter import CalendarAdapter, GregorianCalendar, Weekday
from calendar_logic import DAYS_IN_WEEK, month_grid
from date_range import DateRange
from range_selection import RangeSelection, SelectionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SingleDateMode:
    """Pick one date. ``on_select`` is called with each newly picked day."""

    selected: date | None = None
    on_select: Callable[[date], None] | None = None


@dataclass(frozen=True)
class RangeSelectionMode:
    """Pick a start and end date. ``on_change`` receives every new state."""

    on_change: Callable[[SelectionState], None] | None = None


SelectionMode = Union[SingleDateMode, RangeSelectionMode]


class DayCell(NamedTuple):
    day: date
    is_active: bool
    is_selected: bool
    is_today: bool


class Navigation(NamedTuple):
    previous: Callable[[], date]
    next: Callable[[], date]


class CalendarRenderer(Protocol):
    """Draws the pieces of one render pass, in call order."""

    def title(self, month: date, navigation: Navigation) -> Any: ...

    def header(self, day: date) -> Any: ...

    def active_cell(self, cell: DayCell) -> Any: ...

    def disabled_cell(self, cell: DayCell) -> Any: ...


class CalendarLayout:
    """Month picker controller.

    ``today`` is sampled once at construction; a long-lived layout keeps
    highlighting that day after midnight.
    """

    def __init__(
        self,
        mode: SelectionMode,
        calendar: CalendarAdapter | None = None,
        active_ranges: Iterable[DateRange] | None = None,
        disabled_dates: Iterable[date] = (),
        inactive_weekdays: Iterable[Weekday] = (),
        weekends_inactive: bool = False,
        disabled_for_year: Callable[[int], Iterable[date]] | None = None,
        display_month: date | None = None,
        today: date | None = None,
    ) -> None:
        if not isinstance(mode, (SingleDateMode, RangeSelectionMode)):
            raise TypeError(f"unsupported selection mode: {mode!r}")
        self.mode = mode
        self.calendar: CalendarAdapter = calendar or GregorianCalendar()
        self.policy = ActivationPolicy(
            self.calendar,
            active_ranges=active_ranges,
            disabled_dates=disabled_dates,
            inactive_weekdays=inactive_weekdays,
            weekends_inactive=weekends_inactive,
            disabled_for_year=disabled_for_year,
        )
        self.today = self.calendar.to_day(today) if today is not None else self.calendar.today()

        self._selected: date | None = None
        self._range: RangeSelection | None = None
        if isinstance(mode, SingleDateMode):
            if mode.selected is not None:
                self._selected = self.calendar.to_day(mode.selected)
            initial = display_month or self._selected or self.today
        else:
            self._range = RangeSelection()
            initial = display_month or self.today
        self.displayed_month = self.calendar.start_of_month(initial)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    @property
    def is_range_mode(self) -> bool:
        return self._range is not None

    @property
    def selected_date(self) -> date | None:
        return self._selected

    @property
    def selection(self) -> SelectionState | None:
        return self._range.state if self._range is not None else None

    def is_selected(self, day: date) -> bool:
        day = self.calendar.to_day(day)
        if self._range is not None:
            return self._range.contains(day)
        return self._selected is not None and self.calendar.is_same_day(day, self._selected)

    def is_active(self, day: date) -> bool:
        return self.policy.is_active(day, self.displayed_month)

    def pick(self, day: date) -> bool:
        """Select ``day``; returns False (and changes nothing) if it is disabled."""
        day = self.calendar.to_day(day)
        if not self.is_active(day):
            logger.debug("Ignoring pick of disabled day %s", day)
            return False
        if self._range is not None:
            state = self._range.pick(day)
            if self.mode.on_change is not None:
                self.mode.on_change(state)
        else:
            self._selected = day
            if self.mode.on_select is not None:
                self.mode.on_select(day)
        return True

    def clear_selection(self) -> None:
        """Reset a range selection to empty. Single-date mode keeps its date."""
        if self._range is None or self._range.state.is_empty:
            return
        self._range.clear()
        if self.mode.on_change is not None:
            self.mode.on_change(self._range.state)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def _shift(self, months: int) -> date:
        try:
            self.displayed_month = self.calendar.add_months(self.displayed_month, months)
        except (ValueError, OverflowError) as exc:
            logger.warning("Cannot move %+d month(s) from %s: %s",
                           months, self.displayed_month, exc)
        return self.displayed_month

    def previous(self) -> date:
        return self._shift(-1)

    def next(self) -> date:
        return self._shift(1)

    @property
    def navigation(self) -> Navigation:
        return Navigation(self.previous, self.next)

    # ------------------------------------------------------------------
    # Render pass
    # ------------------------------------------------------------------
    def days(self) -> tuple[date, ...]:
        return month_grid(self.displayed_month, self.calendar)

    def cells(self) -> list[DayCell]:
        return [
            DayCell(
                day=d,
                is_active=active,
                is_selected=self.is_selected(d),
                is_today=d == self.today,
            )
            for d, active in self.policy.classify(self.days(), self.displayed_month)
        ]

    def render(self, renderer: CalendarRenderer) -> None:
        """Feed title, weekday headers and every cell to ``renderer``."""
        renderer.title(self.displayed_month, self.navigation)
        cells = self.cells()
        for cell in cells[:DAYS_IN_WEEK]:
            renderer.header(cell.day)
        for cell in cells:
            if cell.is_active:
                renderer.active_cell(cell)
            else:
                renderer.disabled_cell(cell)
