from datetime import date, datetime

import pytest

from date_range import DateRange


def test_contains_bounds_are_inclusive() -> None:
    r = DateRange(date(2024, 2, 10), date(2024, 2, 20))
    assert r.contains(date(2024, 2, 10))
    assert r.contains(date(2024, 2, 20))
    assert not r.contains(date(2024, 2, 9))
    assert not r.contains(date(2024, 2, 21))


def test_open_ended_ranges() -> None:
    assert DateRange().contains(date(1900, 1, 1))
    assert DateRange(start=date(2024, 1, 1)).contains(date(2999, 1, 1))
    assert not DateRange(start=date(2024, 1, 1)).contains(date(2023, 12, 31))
    assert DateRange(end=date(2024, 1, 1)).contains(date(1999, 1, 1))
    assert not DateRange(end=date(2024, 1, 1)).contains(date(2024, 1, 2))


def test_time_of_day_is_ignored() -> None:
    r = DateRange(datetime(2024, 2, 10, 18, 0), datetime(2024, 2, 20, 6, 0))
    assert r.contains(datetime(2024, 2, 10, 1, 0))
    assert r.contains(datetime(2024, 2, 20, 23, 59))


def test_inverted_range_contains_nothing() -> None:
    r = DateRange(date(2024, 2, 20), date(2024, 2, 10))
    assert r.is_inverted()
    assert not r.contains(date(2024, 2, 15))
    assert not r.contains(date(2024, 2, 10))


@pytest.mark.parametrize("day", [date(2024, 2, 5), date(2024, 2, 12), date(2024, 2, 25)])
def test_widening_never_drops_a_contained_day(day: date) -> None:
    narrow = DateRange(date(2024, 2, 5), date(2024, 2, 25))
    wide = DateRange(date(2024, 1, 1), date(2024, 3, 31))
    assert narrow.contains(day)
    assert wide.contains(day)
    assert DateRange(None, narrow.end).contains(day)
    assert DateRange(narrow.start, None).contains(day)


def test_parse_iso_bounds() -> None:
    assert DateRange.parse(["2024-02-10", None]) == DateRange(date(2024, 2, 10), None)
    assert DateRange.parse([None, "2024-02-20"]) == DateRange(None, date(2024, 2, 20))
    with pytest.raises(ValueError):
        DateRange.parse(["2024-13-01", None])
