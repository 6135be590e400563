"""
polycal.formatter.fields
------------------------
The compiled field types of a DateFormat.  A format string compiles to a
tuple of these; formatting and parsing dispatch on the concrete type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.types import Form


@dataclass(frozen=True)
class DayOfMonth:
    digits: int


@dataclass(frozen=True)
class DayOfYear:
    digits: int


@dataclass(frozen=True)
class EraName:
    form: Form


@dataclass(frozen=True)
class MonthName:
    form: Form


@dataclass(frozen=True)
class MonthNumber:
    digits: int


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class WeekdayName:
    form: Form


@dataclass(frozen=True)
class YearNumber:
    digits: int


DateField = Union[
    DayOfMonth,
    DayOfYear,
    EraName,
    MonthName,
    MonthNumber,
    Text,
    WeekdayName,
    YearNumber,
]
