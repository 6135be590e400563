"""
polycal.engines.specs
---------------------
Standard month and weekday names, the Gregorian leap rule, and the
built-in calendars collected for the registry.
"""

from __future__ import annotations

from typing import Dict

from ..core.types import Era, SimpleMonth, Weekday
from .calendar import Calendar
from .factory import basic_calendar, trivial_calendar
from .week import Week


# ============================================================
# STANDARD NAMES
# ============================================================

JANUARY = SimpleMonth("January", "Jan", "Jan", "J")
FEBRUARY = SimpleMonth("February", "Feb", "Feb", "F")
MARCH = SimpleMonth("March", "Mar", "Mar", "M")
APRIL = SimpleMonth("April", "Apr", "Apr", "A")
MAY = SimpleMonth("May", "May", "May", "M")
JUNE = SimpleMonth("June", "Jun", "Jun", "J")
JULY = SimpleMonth("July", "Jul", "Jul", "J")
AUGUST = SimpleMonth("August", "Aug", "Aug", "A")
SEPTEMBER = SimpleMonth("September", "Sep", "Sep", "S")
OCTOBER = SimpleMonth("October", "Oct", "Oct", "O")
NOVEMBER = SimpleMonth("November", "Nov", "Nov", "N")
DECEMBER = SimpleMonth("December", "Dec", "Dec", "D")

STANDARD_MONTHS = (
    JANUARY, FEBRUARY, MARCH, APRIL, MAY, JUNE,
    JULY, AUGUST, SEPTEMBER, OCTOBER, NOVEMBER, DECEMBER,
)

SUNDAY = Weekday("Sunday", "Sun", "Su", "S")
MONDAY = Weekday("Monday", "Mon", "M", "M")
TUESDAY = Weekday("Tuesday", "Tue", "Tu", "T")
WEDNESDAY = Weekday("Wednesday", "Wed", "W", "W")
THURSDAY = Weekday("Thursday", "Thu", "Th", "T")
FRIDAY = Weekday("Friday", "Fri", "F", "F")
SATURDAY = Weekday("Saturday", "Sat", "Sa", "S")

STANDARD_WEEKDAYS = (SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY)

# Offset 1 puts epoch day 0 on a Monday, as 1 January 1 AD was.
STANDARD_WEEK = Week(STANDARD_WEEKDAYS, 1)


# ============================================================
# LEAP RULES
# ============================================================

def is_leap_year(year: int) -> bool:
    """The 400/100/4 rule, for a year count that includes year 0."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def february_days(year: int) -> int:
    return 29 if is_leap_year(year) else 28


# ============================================================
# CALENDARS
# ============================================================

GREGORIAN = basic_calendar(
    name="gregorian",
    era=Era("AD", "Anno Domini"),
    prior_era=Era("BC", "Before Christ"),
    months=[
        (JANUARY, 31),
        (FEBRUARY, february_days),
        (MARCH, 31),
        (APRIL, 30),
        (MAY, 31),
        (JUNE, 30),
        (JULY, 31),
        (AUGUST, 31),
        (SEPTEMBER, 30),
        (OCTOBER, 31),
        (NOVEMBER, 30),
        (DECEMBER, 31),
    ],
    week=STANDARD_WEEK,
)

# The Armorican setting: two reckonings over the same months and week.  Year
# 1 of the Founding falls in year 979 of the Modern Era.
_ARMORICAN_MONTHS = tuple(zip(STANDARD_MONTHS, (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 31, 31)))

ARMORICAN_ME = basic_calendar(
    name="armorican-me",
    era=Era("ME", "Modern Era"),
    prior_era=Era("BME", "Before Modern Era"),
    epoch_offset=-978 * 366,
    months=_ARMORICAN_MONTHS,
    week=STANDARD_WEEK,
)

ARMORICAN_AF = basic_calendar(
    name="armorican-af",
    era=Era("AF", "After Founding"),
    prior_era=Era("BF", "Before Founding"),
    months=_ARMORICAN_MONTHS,
    week=STANDARD_WEEK,
)

# Bare epoch calendar: 365-day years on the shared day 0.
EPOCH = trivial_calendar(name="epoch", year_length=365, week=STANDARD_WEEK)

ALL_CALENDARS: Dict[str, Calendar] = {
    "gregorian": GREGORIAN,
    "armorican-me": ARMORICAN_ME,
    "armorican-af": ARMORICAN_AF,
    "epoch": EPOCH,
}
