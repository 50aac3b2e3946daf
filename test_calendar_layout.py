from datetime import date

import pytest

from calendar_adapter import GregorianCalendar, Weekday
from calendar_layout import (
    CalendarLayout,
    DayCell,
    Navigation,
    RangeSelectionMode,
    SingleDateMode,
)
from date_range import DateRange
from range_selection import SelectionState

TODAY = date(2024, 2, 14)


class RecordingRenderer:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def title(self, month: date, navigation: Navigation) -> None:
        self.calls.append(("title", month, navigation))

    def header(self, day: date) -> None:
        self.calls.append(("header", day))

    def active_cell(self, cell: DayCell) -> None:
        self.calls.append(("active", cell))

    def disabled_cell(self, cell: DayCell) -> None:
        self.calls.append(("disabled", cell))


def test_single_mode_starts_on_selected_month() -> None:
    layout = CalendarLayout(SingleDateMode(selected=date(2023, 11, 11)), today=TODAY)
    assert layout.displayed_month == date(2023, 11, 1)
    assert not layout.is_range_mode
    assert layout.selection is None


def test_range_mode_starts_on_today() -> None:
    layout = CalendarLayout(RangeSelectionMode(), today=TODAY)
    assert layout.displayed_month == date(2024, 2, 1)
    assert layout.selection == SelectionState()


def test_explicit_display_month_wins() -> None:
    layout = CalendarLayout(RangeSelectionMode(), display_month=date(2025, 7, 9), today=TODAY)
    assert layout.displayed_month == date(2025, 7, 1)


def test_unknown_mode_rejected() -> None:
    with pytest.raises(TypeError):
        CalendarLayout("range", today=TODAY)


def test_navigation_moves_one_month() -> None:
    layout = CalendarLayout(SingleDateMode(), today=date(2024, 1, 31))
    assert layout.next() == date(2024, 2, 1)
    assert layout.previous() == date(2024, 1, 1)
    assert layout.previous() == date(2023, 12, 1)


def test_navigation_past_supported_range_keeps_month() -> None:
    layout = CalendarLayout(SingleDateMode(), display_month=date(9999, 12, 1), today=TODAY)
    assert layout.next() == date(9999, 12, 1)
    assert layout.days() == ()


def test_cells_report_today_active_and_selection() -> None:
    layout = CalendarLayout(SingleDateMode(selected=date(2024, 2, 20)), today=TODAY)
    cells = {c.day: c for c in layout.cells()}
    assert len(cells) == 35
    assert cells[TODAY].is_today
    assert cells[date(2024, 2, 20)].is_selected
    assert not cells[date(2024, 2, 21)].is_selected
    assert not cells[date(2024, 1, 28)].is_active
    assert cells[date(2024, 2, 1)].is_active


def test_single_pick_updates_binding() -> None:
    picked: list[date] = []
    layout = CalendarLayout(SingleDateMode(on_select=picked.append), today=TODAY)
    assert layout.pick(date(2024, 2, 3))
    assert layout.selected_date == date(2024, 2, 3)
    assert picked == [date(2024, 2, 3)]


def test_pick_of_disabled_day_is_ignored() -> None:
    picked: list[date] = []
    layout = CalendarLayout(
        SingleDateMode(on_select=picked.append),
        active_ranges=[DateRange(date(2024, 2, 10), date(2024, 2, 20))],
        disabled_dates=[date(2024, 2, 15)],
        today=TODAY,
    )
    assert not layout.pick(date(2024, 2, 15))
    assert not layout.pick(date(2024, 2, 21))
    assert not layout.pick(date(2024, 1, 31))
    assert layout.selected_date is None
    assert picked == []


def test_range_mode_pick_sequence() -> None:
    states: list[SelectionState] = []
    layout = CalendarLayout(
        RangeSelectionMode(on_change=states.append), display_month=date(2024, 3, 1), today=TODAY)
    layout.pick(date(2024, 3, 5))
    layout.pick(date(2024, 3, 10))
    assert layout.selection == SelectionState(date(2024, 3, 5), date(2024, 3, 10))
    assert layout.is_selected(date(2024, 3, 7))
    layout.pick(date(2024, 3, 1))
    assert layout.selection == SelectionState(date(2024, 3, 1))
    assert not layout.is_selected(date(2024, 3, 7))
    assert len(states) == 3


def test_clear_selection_only_touches_range_mode() -> None:
    states: list[SelectionState] = []
    layout = CalendarLayout(RangeSelectionMode(on_change=states.append), today=TODAY)
    layout.clear_selection()
    assert states == []
    layout.pick(date(2024, 2, 3))
    layout.clear_selection()
    assert layout.selection.is_empty
    assert states[-1] == SelectionState()

    single = CalendarLayout(SingleDateMode(selected=TODAY), today=TODAY)
    single.clear_selection()
    assert single.selected_date == TODAY


def test_render_order_and_routing() -> None:
    layout = CalendarLayout(
        SingleDateMode(),
        calendar=GregorianCalendar(first_weekday=Weekday.MONDAY),
        active_ranges=[DateRange()],
        inactive_weekdays=[Weekday.SATURDAY, Weekday.SUNDAY],
        today=TODAY,
    )
    renderer = RecordingRenderer()
    layout.render(renderer)

    kind, month, navigation = renderer.calls[0]
    assert (kind, month) == ("title", date(2024, 2, 1))
    headers = [c[1] for c in renderer.calls[1:8]]
    assert [c[0] for c in renderer.calls[1:8]] == ["header"] * 7
    assert headers[0] == date(2024, 1, 29)

    cells = renderer.calls[8:]
    assert len(cells) == 35
    routed = {c[1].day: c[0] for c in cells}
    assert routed[date(2024, 2, 5)] == "active"
    assert routed[date(2024, 2, 10)] == "disabled"
    assert routed[date(2024, 1, 31)] == "disabled"

    assert navigation.next() == date(2024, 3, 1)
    assert layout.displayed_month == date(2024, 3, 1)
