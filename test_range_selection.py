from datetime import date

from range_selection import EMPTY, RangeSelection, SelectionState, advance
from date_range import DateRange


def test_first_pick_starts_selection() -> None:
    assert advance(EMPTY, date(2024, 3, 5)) == SelectionState(date(2024, 3, 5))


def test_later_pick_completes_range() -> None:
    state = advance(SelectionState(date(2024, 3, 5)), date(2024, 3, 10))
    assert state.is_complete
    assert state == SelectionState(date(2024, 3, 5), date(2024, 3, 10))


def test_same_day_pick_completes_single_day_range() -> None:
    state = advance(SelectionState(date(2024, 3, 5)), date(2024, 3, 5))
    assert state == SelectionState(date(2024, 3, 5), date(2024, 3, 5))


def test_earlier_pick_replaces_anchor() -> None:
    state = advance(SelectionState(date(2024, 3, 5)), date(2024, 3, 1))
    assert state == SelectionState(date(2024, 3, 1))
    assert state.is_partial


def test_pick_after_complete_starts_over() -> None:
    sel = RangeSelection()
    sel.pick(date(2024, 3, 5))
    assert sel.pick(date(2024, 3, 10)) == SelectionState(date(2024, 3, 5), date(2024, 3, 10))
    assert sel.pick(date(2024, 3, 1)) == SelectionState(date(2024, 3, 1))
    assert sel.pick(date(2024, 3, 20)) == SelectionState(date(2024, 3, 1), date(2024, 3, 20))
    assert sel.pick(date(2024, 3, 25)) == SelectionState(date(2024, 3, 25))


def test_membership() -> None:
    assert not EMPTY.contains(date(2024, 3, 5))
    partial = SelectionState(date(2024, 3, 5))
    assert partial.contains(date(2024, 3, 5))
    assert not partial.contains(date(2024, 3, 6))
    complete = SelectionState(date(2024, 3, 5), date(2024, 3, 10))
    assert complete.contains(date(2024, 3, 5))
    assert complete.contains(date(2024, 3, 7))
    assert complete.contains(date(2024, 3, 10))
    assert not complete.contains(date(2024, 3, 11))


def test_clear_and_as_date_range() -> None:
    sel = RangeSelection()
    sel.pick(date(2024, 3, 5))
    assert sel.state.as_date_range() is None
    sel.pick(date(2024, 3, 10))
    assert sel.state.as_date_range() == DateRange(date(2024, 3, 5), date(2024, 3, 10))
    sel.clear()
    assert sel.state.is_empty
