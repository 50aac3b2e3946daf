"""Public holidays that a host can feed to the picker as disabled dates."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Callable, Iterable, NamedTuple


def _easter(year: int) -> date:
    """Compute Easter Sunday (Anonymous Gregorian algorithm)."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    el = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * el) // 451
    month, day = divmod(h + el - 7 * m + 114, 31)
    return date(year, month, day + 1)


class Holiday(NamedTuple):
    key: str
    name: str
    country: str
    dates: Callable[[int], list[date]]


def _on(month: int, day: int) -> Callable[[int], list[date]]:
    return lambda year: [date(year, month, day)]


def _after_easter(offset: int) -> Callable[[int], list[date]]:
    return lambda year: [_easter(year) + timedelta(days=offset)]


HOLIDAYS: list[Holiday] = [
    Holiday("ch_new_year", "New Year's Day", "CH", _on(1, 1)),
    Holiday("ch_good_friday", "Good Friday", "CH", _after_easter(-2)),
    Holiday("ch_easter_monday", "Easter Monday", "CH", _after_easter(1)),
    Holiday("ch_ascension", "Ascension Day", "CH", _after_easter(39)),
    Holiday("ch_whit_monday", "Whit Monday", "CH", _after_easter(49)),
    Holiday("ch_national_day", "Swiss National Day", "CH", _on(8, 1)),
    Holiday("ch_christmas", "Christmas Day", "CH", _on(12, 25)),
    Holiday("de_new_year", "New Year's Day", "DE", _on(1, 1)),
    Holiday("de_good_friday", "Good Friday", "DE", _after_easter(-2)),
    Holiday("de_easter_monday", "Easter Monday", "DE", _after_easter(1)),
    Holiday("de_labour_day", "Labour Day", "DE", _on(5, 1)),
    Holiday("de_unity_day", "German Unity Day", "DE", _on(10, 3)),
    Holiday("de_christmas", "Christmas Day", "DE", _on(12, 25)),
    Holiday("de_boxing_day", "Second Day of Christmas", "DE", _on(12, 26)),
    Holiday("us_new_year", "New Year's Day", "US", _on(1, 1)),
    Holiday("us_independence_day", "Independence Day", "US", _on(7, 4)),
    Holiday("us_christmas", "Christmas Day", "US", _on(12, 25)),
]

_BY_KEY = {h.key: h for h in HOLIDAYS}


def holidays_by_country(country: str) -> list[tuple[str, str]]:
    """Return [(key, name), ...] for the given country code."""
    return [(h.key, h.name) for h in HOLIDAYS if h.country == country]


def holiday_dates(years: Iterable[int], enabled_keys: Iterable[str]) -> list[date]:
    """Return the sorted, de-duplicated dates of the enabled holidays.

    Unknown keys are skipped.
    """
    found: set[date] = set()
    holidays = [_BY_KEY[k] for k in enabled_keys if k in _BY_KEY]
    for year in years:
        for holiday in holidays:
            found.update(holiday.dates(year))
    return sorted(found)
