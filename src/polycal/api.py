"""
polycal.api
-----------
Module-level functions over the calendar registry.  Calendars are looked up
by name; DEFAULT_CALENDAR is used when none is given.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from .core.engine import CalendarRegistry
from .core.types import DayInfo
from .engines.calendar import Calendar
from .formatter.date_format import DateFormat

DEFAULT_CALENDAR = "gregorian"

FormatArg = Union[str, DateFormat, None]

logger = logging.getLogger(__name__)
_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def get_calendar(name: str) -> Calendar:
    return _reg().get(name)

def register_calendar(name: str, calendar: Calendar, *, overwrite: bool = False) -> None:
    _reg().register(name, calendar, overwrite=overwrite)

def calendar_info(name: str) -> dict:
    cal = _reg().get(name)
    out = {
        "name": name,
        "epoch_offset": cal.epoch_offset,
        "era": cal.era.full_form,
        "prior_era": cal.prior_era.full_form,
        "has_months": cal.has_months(),
        "has_weeks": cal.has_weeks(),
    }
    if cal.has_months():
        out["months"] = [m.full_form for m in cal.months()]
    if cal.has_weeks():
        out["weekdays"] = [w.full_form for w in cal.week.weekdays]
        out["week_offset"] = cal.week.offset
    return out

# ============================================================
# Day-level API
# ============================================================

def day_info(day: int, *, calendar: str = DEFAULT_CALENDAR) -> DayInfo:
    cal = _reg().get(calendar)
    year_day = cal.day_to_year_day(day)
    info = {
        "calendar": calendar,
        "day": day,
        "year": year_day.year,
        "day_of_year": year_day.day_of_year,
        "era": year_day.era.short_form,
    }
    if cal.has_months():
        date = cal.day_to_date(day)
        info.update(
            month_of_year=date.month_of_year,
            day_of_month=date.day_of_month,
            month_name=date.month.full_form,
        )
    if cal.has_weeks():
        info.update(
            day_of_week=cal.day_to_day_of_week(day),
            weekday_name=cal.day_to_weekday(day).full_form,
        )
    return DayInfo(**info)

def format_day(day: int, *, calendar: str = DEFAULT_CALENDAR, fmt: FormatArg = None) -> str:
    return _reg().get(calendar).format(day, fmt)

def parse_date(text: str, *, calendar: str = DEFAULT_CALENDAR, fmt: FormatArg = None) -> int:
    return _reg().get(calendar).parse(text, fmt)

def convert(
    text: str,
    *,
    source: str,
    target: str,
    in_format: FormatArg = None,
    out_format: FormatArg = None,
) -> str:
    """Parses a date in one calendar and formats the same epoch day in another."""
    day = parse_date(text, calendar=source, fmt=in_format)
    logger.debug("convert %r: %s -> day %d -> %s", text, source, day, target)
    return format_day(day, calendar=target, fmt=out_format)

def days_in_year(year: int, *, calendar: str = DEFAULT_CALENDAR) -> int:
    return _reg().get(calendar).days_in_year(year)

def days_in_month(year: int, month_of_year: int, *, calendar: str = DEFAULT_CALENDAR) -> int:
    return _reg().get(calendar).days_in_month(year, month_of_year)
