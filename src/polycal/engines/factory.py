"""
polycal.engines.factory
-----------------------
Assembles immutable Calendar objects from plain definition data.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple, Union

from ..core.errors import CalendarError
from ..core.types import BoundedMonth, Era, FixedLength, Month, SimpleMonth, Weekday, YearDelta
from .calendar import AFTER_EPOCH, BEFORE_EPOCH, Calendar
from .cycles import MonthCycle, YearCycle
from .week import Week

Length = Union[int, YearDelta]
MonthEntry = Union[BoundedMonth, Tuple[Month, Length]]


def bounded(month: Month, length: Length) -> BoundedMonth:
    """A month with a fixed length, or a length that depends on the year."""
    return BoundedMonth.of(month, length)


def _build_week(
    week: Optional[Week],
    weekdays: Optional[Sequence[Weekday]],
    week_offset: int,
) -> Optional[Week]:
    if week is not None and weekdays is not None:
        raise CalendarError("Give either week or weekdays, not both.")
    if weekdays is not None:
        return Week.of(weekdays, week_offset)
    return week


def _build_month(entry: MonthEntry) -> BoundedMonth:
    if isinstance(entry, BoundedMonth):
        return entry
    if isinstance(entry, tuple) and len(entry) == 2 and isinstance(entry[0], (SimpleMonth, BoundedMonth)):
        return bounded(entry[0], entry[1])
    raise CalendarError(f"Expected a BoundedMonth or a (month, length) pair, got {entry!r}.")


def basic_calendar(
    *,
    months: Iterable[MonthEntry],
    epoch_offset: int = 0,
    era: Era = AFTER_EPOCH,
    prior_era: Era = BEFORE_EPOCH,
    week: Optional[Week] = None,
    weekdays: Optional[Sequence[Weekday]] = None,
    week_offset: int = 0,
    name: Optional[str] = None,
) -> Calendar:
    """
    A calendar with a cycle of months and an optional week.  Day 1 of year 1
    is month 1, day 1, at epoch day `epoch_offset`.

    `months` holds BoundedMonth values or (month, length) pairs, where length
    is a day count or a function of the year.
    """
    cycle = MonthCycle(tuple(_build_month(m) for m in months))
    return Calendar(
        cycle=cycle,
        epoch_offset=epoch_offset,
        era=era,
        prior_era=prior_era,
        week=_build_week(week, weekdays, week_offset),
        name=name,
    )


def trivial_calendar(
    *,
    year_length: Length = 365,
    epoch_offset: int = 0,
    era: Era = AFTER_EPOCH,
    prior_era: Era = BEFORE_EPOCH,
    week: Optional[Week] = None,
    weekdays: Optional[Sequence[Weekday]] = None,
    week_offset: int = 0,
    name: Optional[str] = None,
) -> Calendar:
    """
    A calendar with years and days but no months.  Useful as the epoch
    calendar for a family of calendars, or as a coarse time scale.
    """
    if isinstance(year_length, bool):
        raise CalendarError(f"Year length must be an int or a function of the year, got {year_length!r}.")
    if isinstance(year_length, int) and year_length < 1:
        raise CalendarError(f"Year length must be at least 1, got {year_length}.")
    fn = FixedLength(year_length) if isinstance(year_length, int) else year_length
    return Calendar(
        cycle=YearCycle(fn),
        epoch_offset=epoch_offset,
        era=era,
        prior_era=prior_era,
        week=_build_week(week, weekdays, week_offset),
        name=name,
    )
