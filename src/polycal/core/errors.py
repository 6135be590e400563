"""
polycal.core.errors
-------------------
The single error kind raised for calendar data, formats and parsing.
"""


class CalendarError(Exception):
    """Raised for invalid calendar data, bad format strings and unparseable dates."""


def no_monthly_cycle() -> CalendarError:
    return CalendarError("Calendar lacks a monthly cycle.")


def no_weekly_cycle() -> CalendarError:
    return CalendarError("Calendar lacks a weekly cycle.")
