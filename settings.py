"""JSON-based configuration for the date picker (read-only)."""

from __future__ import annotations

import json
import logging
import os
from datetime import date
from typing import Callable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from calendar_adapter import GregorianCalendar, Weekday
from calendar_layout import CalendarLayout, RangeSelectionMode, SingleDateMode
from date_range import DateRange
from public_holidays import holiday_dates
from range_selection import SelectionState

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".date-picker-settings.json")

_DEFAULTS = {
    "first_weekday": Weekday.SUNDAY,
    "timezone": None,
    "range_mode": False,
    "active_ranges": None,
    "disabled_dates": [],
    "inactive_weekdays": [],
    "weekends_inactive": False,
    "holidays": [],
    "colors": {"accent": "#0078D4", "selection": "#B3D7F2", "disabled": "#BBBBBB"},
}


def _parse_list(values: list, parse, what: str) -> list:
    parsed = []
    for value in values:
        try:
            parsed.append(parse(value))
        except (KeyError, ValueError, TypeError, AttributeError):
            logger.warning("Ignoring invalid %s entry: %r", what, value)
    return parsed


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing or bad keys."""
    settings = dict(_DEFAULTS)
    for key in ("disabled_dates", "inactive_weekdays", "holidays"):
        settings[key] = list(_DEFAULTS[key])
    settings["colors"] = dict(_DEFAULTS["colors"])
    try:
        with open(path or _SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Could not read settings: %s", exc)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Settings file does not hold an object; using defaults")
        return settings

    if isinstance(stored.get("first_weekday"), str):
        found = _parse_list([stored["first_weekday"]], Weekday.parse, "first_weekday")
        if found:
            settings["first_weekday"] = found[0]
    if isinstance(stored.get("timezone"), str):
        try:
            settings["timezone"] = ZoneInfo(stored["timezone"])
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown timezone %r", stored["timezone"])
    for key in ("range_mode", "weekends_inactive"):
        if isinstance(stored.get(key), bool):
            settings[key] = stored[key]
    if isinstance(stored.get("active_ranges"), list):
        settings["active_ranges"] = _parse_list(
            stored["active_ranges"], DateRange.parse, "active_ranges")
        if stored["active_ranges"] and not settings["active_ranges"]:
            logger.warning("No valid active_ranges configured; every day will be disabled")
    if isinstance(stored.get("disabled_dates"), list):
        settings["disabled_dates"] = _parse_list(
            stored["disabled_dates"], date.fromisoformat, "disabled_dates")
    if isinstance(stored.get("inactive_weekdays"), list):
        settings["inactive_weekdays"] = _parse_list(
            stored["inactive_weekdays"], Weekday.parse, "inactive_weekdays")
    if isinstance(stored.get("holidays"), list):
        settings["holidays"] = [k for k in stored["holidays"] if isinstance(k, str)]
    if isinstance(stored.get("colors"), dict):
        settings["colors"].update(
            {k: v for k, v in stored["colors"].items() if isinstance(v, str)})
    return settings


def build_layout(
    settings: dict,
    on_select: Callable[[date], None] | None = None,
    on_change: Callable[[SelectionState], None] | None = None,
    today: date | None = None,
) -> CalendarLayout:
    """Create a layout configured from ``settings``.

    Enabled holidays are disabled in whichever year is displayed.
    """
    calendar = GregorianCalendar(settings["first_weekday"], settings["timezone"])
    today = today or calendar.today()
    holiday_keys = list(settings["holidays"])
    disabled_for_year = None
    if holiday_keys:
        disabled_for_year = lambda year: holiday_dates([year], holiday_keys)  # noqa: E731

    if settings["range_mode"]:
        mode = RangeSelectionMode(on_change=on_change)
    else:
        mode = SingleDateMode(selected=today, on_select=on_select)
    return CalendarLayout(
        mode,
        calendar=calendar,
        active_ranges=settings["active_ranges"],
        disabled_dates=settings["disabled_dates"],
        inactive_weekdays=settings["inactive_weekdays"],
        weekends_inactive=settings["weekends_inactive"],
        disabled_for_year=disabled_for_year,
        today=today,
    )
