"""polycal public API.

Keep this surface small: users should mostly interact with functions and
types re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    DEFAULT_CALENDAR,
    list_calendars,
    get_calendar,
    register_calendar,
    calendar_info,
    day_info,
    format_day,
    parse_date,
    convert,
    days_in_year,
    days_in_month,
)
from .core.errors import CalendarError
from .core.types import (
    BoundedMonth,
    Date,
    DayInfo,
    Era,
    Form,
    SimpleMonth,
    Weekday,
    YearDay,
)
from .engines.calendar import AFTER_EPOCH, BEFORE_EPOCH, Calendar
from .engines.factory import basic_calendar, bounded, trivial_calendar
from .engines.week import Week
from .formatter.date_format import ERA_YD, ERA_YMD, DateFormat

__all__ = [
    "DEFAULT_CALENDAR",
    "list_calendars",
    "get_calendar",
    "register_calendar",
    "calendar_info",
    "day_info",
    "format_day",
    "parse_date",
    "convert",
    "days_in_year",
    "days_in_month",
    "CalendarError",
    "BoundedMonth",
    "Date",
    "DayInfo",
    "Era",
    "Form",
    "SimpleMonth",
    "Weekday",
    "YearDay",
    "AFTER_EPOCH",
    "BEFORE_EPOCH",
    "Calendar",
    "basic_calendar",
    "bounded",
    "trivial_calendar",
    "Week",
    "ERA_YD",
    "ERA_YMD",
    "DateFormat",
]
