"""Date format compiler and engine."""

from .date_format import DateFormat, ERA_YD, ERA_YMD, as_format
from .fields import (
    DateField,
    DayOfMonth,
    DayOfYear,
    EraName,
    MonthName,
    MonthNumber,
    Text,
    WeekdayName,
    YearNumber,
)

__all__ = [
    "DateFormat",
    "ERA_YD",
    "ERA_YMD",
    "as_format",
    "DateField",
    "DayOfMonth",
    "DayOfYear",
    "EraName",
    "MonthName",
    "MonthNumber",
    "Text",
    "WeekdayName",
    "YearNumber",
]
