"""
polycal.core.types
------------------
Value types shared by every calendar: name forms, eras, weekdays, months,
and the YearDay/Date records that tie a position to its calendar.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional, Union

from .errors import CalendarError

if TYPE_CHECKING:
    from ..engines.calendar import Calendar

# Number of days as a function of a year number.  Length functions are
# written as if there were a year 0; Calendar applies the shift.
YearDelta = Callable[[int], int]


class Form(Enum):
    """Ways to present an era, month, or weekday name."""
    TINY = "tiny"
    UNAMBIGUOUS = "unambiguous"
    SHORT = "short"
    FULL = "full"

    @classmethod
    def from_count(cls, count: int) -> "Form":
        """Form for a run of `count` identical conversion characters."""
        if count == 1:
            return cls.TINY
        if count == 2:
            return cls.UNAMBIGUOUS
        if count == 3:
            return cls.SHORT
        return cls.FULL


class CalendarName:
    """Mixin for values with full/short/unambiguous/tiny name forms."""

    def get_form(self, form: Form) -> str:
        return getattr(self, f"{form.value}_form")


@dataclass(frozen=True)
class Era(CalendarName):
    """
    An era or prior era.  The unambiguous and tiny forms are the short form.
    """
    short_form: str
    full_form: str

    @property
    def unambiguous_form(self) -> str:
        return self.short_form

    @property
    def tiny_form(self) -> str:
        return self.short_form

    def __str__(self) -> str:
        return f"Era({self.short_form},{self.full_form})"


@dataclass(frozen=True)
class Weekday(CalendarName):
    full_form: str
    short_form: str
    unambiguous_form: str
    tiny_form: str

    def __str__(self) -> str:
        return f"Weekday({self.full_form})"


@dataclass(frozen=True)
class FixedLength:
    """A YearDelta that ignores the year."""
    days: int

    def __call__(self, year: int) -> int:
        return self.days


@dataclass(frozen=True)
class SimpleMonth(CalendarName):
    """A month name, with no notion of length."""
    full_form: str
    short_form: str
    unambiguous_form: str
    tiny_form: str

    def __str__(self) -> str:
        return f"Month({self.full_form})"


@dataclass(frozen=True)
class BoundedMonth(CalendarName):
    """A month name plus a function giving its length in a given year."""
    full_form: str
    short_form: str
    unambiguous_form: str
    tiny_form: str
    days_in_month: YearDelta

    @classmethod
    def of(cls, month: "Month", length: Union[int, YearDelta]) -> "BoundedMonth":
        if isinstance(length, bool) or not (isinstance(length, int) or callable(length)):
            raise CalendarError(
                f"Month length for {month.full_form!r} must be an int or a function of the year, "
                f"got {length!r}."
            )
        if isinstance(length, int) and length < 1:
            raise CalendarError(f"Month length for {month.full_form!r} must be at least 1, got {length}.")
        fn = FixedLength(length) if isinstance(length, int) else length
        return cls(month.full_form, month.short_form, month.unambiguous_form, month.tiny_form, fn)

    def __str__(self) -> str:
        return f"BoundedMonth({self.full_form})"


Month = Union[SimpleMonth, BoundedMonth]


@dataclass(frozen=True)
class YearDay:
    """
    A (year, day-of-year) pair relative to a specific calendar.  Not validated
    on construction; use Calendar.validate.
    """
    calendar: "Calendar"
    year: int
    day_of_year: int

    @property
    def day(self) -> int:
        return self.calendar.year_day_to_day(self)

    @property
    def era(self) -> Era:
        return self.calendar.era if self.year > 0 else self.calendar.prior_era

    def __str__(self) -> str:
        return f"{self.calendar}:{self.year}/{self.day_of_year}"


@dataclass(frozen=True)
class Date:
    """
    A (year, month-of-year, day-of-month) triple in a calendar with months.
    Not validated on construction; use Calendar.validate.
    """
    calendar: "Calendar"
    year: int
    month_of_year: int
    day_of_month: int

    @property
    def day(self) -> int:
        return self.calendar.date_to_day(self)

    @property
    def day_of_week(self) -> int:
        return self.calendar.day_to_day_of_week(self.day)

    @property
    def day_of_year(self) -> int:
        return self.year_day.day_of_year

    @property
    def days_in_month(self) -> int:
        return self.calendar.days_in_month(self.year, self.month_of_year)

    @property
    def era(self) -> Era:
        return self.calendar.era if self.year > 0 else self.calendar.prior_era

    @property
    def month(self) -> Month:
        return self.calendar.month(self.month_of_year)

    @property
    def weekday(self) -> Weekday:
        return self.calendar.day_to_weekday(self.day)

    @property
    def year_day(self) -> YearDay:
        return self.calendar.day_to_year_day(self.day)

    def __str__(self) -> str:
        return f"{self.calendar}:{self.year}-{self.month_of_year}-{self.day_of_month}"


@dataclass(frozen=True)
class DayInfo:
    calendar: str
    day: int
    year: int
    day_of_year: int
    era: str
    month_of_year: Optional[int] = None
    day_of_month: Optional[int] = None
    month_name: Optional[str] = None
    day_of_week: Optional[int] = None
    weekday_name: Optional[str] = None
