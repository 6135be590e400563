"""
polycal.formatter.date_format
-----------------------------
Formats and parses dates according to a format string.  The syntax is
similar to, but not the same as, the usual strftime-style mini-languages.

Numeric conversions:

    d   day of month
    D   day of year
    m   month of year
    y   year of era

A run of N identical numeric conversions gives the minimum width of the
field: "yyyy" is a four-digit year, zero-padded on the left.  Wider values
are written at full width.  The year of era is always written as a positive
number; include an era ("E") if both positive and negative years are in use.

Name conversions:

    E   era or prior era name
    M   month name
    W   weekday name

For names, the run length selects the form: 1 TINY, 2 UNAMBIGUOUS, 3 SHORT,
4 or more FULL.

Literal text goes in single quotes, e.g. "'Year:' yyyy". Spaces, hyphens and
slashes may appear unquoted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple, Union

from ..core.errors import CalendarError
from ..core.types import CalendarName, Form
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

if TYPE_CHECKING:
    from ..engines.calendar import Calendar

DAY_OF_MONTH = "d"
DAY_OF_YEAR = "D"
ERA = "E"
MONTH_NAME = "M"
MONTH = "m"
WEEKDAY = "W"
YEAR = "y"
QUOTE = "'"
PASS_THROUGH = (" ", "-", "/")

_DIGITS = re.compile(r"[0-9]+")
_LEADING_DIGITS = re.compile(r"[0-9]*")


@dataclass(frozen=True)
class DateFormat:
    """A compiled date format.  Compile once, use with any compatible calendar."""
    pattern: str
    fields: Tuple[DateField, ...] = field(init=False, repr=False, compare=False)
    needs_months: bool = field(init=False, repr=False, compare=False)
    needs_weeks: bool = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        fields, needs_months, needs_weeks = _compile(self.pattern)
        object.__setattr__(self, "fields", tuple(fields))
        object.__setattr__(self, "needs_months", needs_months)
        object.__setattr__(self, "needs_weeks", needs_weeks)

    def is_compatible_with(self, cal: "Calendar") -> bool:
        return (not self.needs_months or cal.has_months()) and (
            not self.needs_weeks or cal.has_weeks()
        )

    def format(self, cal: "Calendar", day: int) -> str:
        """Formats an epoch day as a date string for the given calendar."""
        return _format_day(self, cal, day)

    def parse(self, cal: "Calendar", text: str) -> int:
        """
        Parses `text` against the format and calendar and returns the epoch
        day.  Names must match the exact form the format asks for, ignoring
        case.  Numeric fields must have exactly the format's number of digits,
        unless that number is 1, in which case all available digits are
        consumed.
        """
        return _parse_date(self, cal, text)

    def __str__(self) -> str:
        return self.pattern


def _format_day(fmt: DateFormat, cal: "Calendar", day: int) -> str:
    _check_compatible(fmt, cal)
    year_day = cal.day_to_year_day(day)
    date = cal.day_to_date(day) if cal.has_months() else None
    weekday = cal.day_to_weekday(day) if cal.has_weeks() else None

    out: List[str] = []
    for fld in fmt.fields:
        if isinstance(fld, DayOfMonth):
            out.append(_zero_pad(date.day_of_month, fld.digits))
        elif isinstance(fld, DayOfYear):
            out.append(_zero_pad(year_day.day_of_year, fld.digits))
        elif isinstance(fld, EraName):
            era = cal.era if year_day.year > 0 else cal.prior_era
            out.append(era.get_form(fld.form))
        elif isinstance(fld, MonthName):
            out.append(date.month.get_form(fld.form))
        elif isinstance(fld, MonthNumber):
            out.append(_zero_pad(date.month_of_year, fld.digits))
        elif isinstance(fld, Text):
            out.append(fld.text)
        elif isinstance(fld, WeekdayName):
            out.append(weekday.get_form(fld.form))
        elif isinstance(fld, YearNumber):
            out.append(_zero_pad(year_day.year, fld.digits))
        else:
            raise TypeError(f"Unknown date field type: {type(fld)}")
    return "".join(out)


def _parse_date(fmt: DateFormat, cal: "Calendar", text: str) -> int:
    _check_compatible(fmt, cal)
    return _DateParser(fmt, cal, text).parse()


def as_format(fmt: Union[str, DateFormat]) -> DateFormat:
    """Accepts either a compiled format or a format string."""
    if isinstance(fmt, DateFormat):
        return fmt
    return _compiled(fmt)


@lru_cache(maxsize=128)
def _compiled(pattern: str) -> DateFormat:
    return DateFormat(pattern)


def _check_compatible(fmt: DateFormat, cal: "Calendar") -> None:
    if not fmt.is_compatible_with(cal):
        raise CalendarError(f'Calendar "{cal}" is not compatible with date format "{fmt.pattern}".')


def _zero_pad(number: int, width: int) -> str:
    return str(abs(number)).rjust(width, "0")


# ============================================================
# Format compilation
# ============================================================

def _compile(pattern: str) -> Tuple[List[DateField], bool, bool]:
    scanner = _FormatScanner(pattern)
    fields: List[DateField] = []
    needs_months = False
    needs_weeks = False

    while not scanner.at_end():
        ch = scanner.peek()
        if ch == QUOTE:
            fields.append(Text(scanner.get_text()))
        elif ch in PASS_THROUGH:
            fields.append(Text(scanner.next()))
        elif ch == DAY_OF_MONTH:
            needs_months = True
            fields.append(DayOfMonth(scanner.get_count()))
        elif ch == DAY_OF_YEAR:
            fields.append(DayOfYear(scanner.get_count()))
        elif ch == ERA:
            fields.append(EraName(Form.from_count(scanner.get_count())))
        elif ch == MONTH_NAME:
            needs_months = True
            fields.append(MonthName(Form.from_count(scanner.get_count())))
        elif ch == MONTH:
            needs_months = True
            fields.append(MonthNumber(scanner.get_count()))
        elif ch == WEEKDAY:
            needs_weeks = True
            fields.append(WeekdayName(Form.from_count(scanner.get_count())))
        elif ch == YEAR:
            fields.append(YearNumber(scanner.get_count()))
        else:
            raise CalendarError(f'Unknown conversion character: "{ch}".')

    return fields, needs_months, needs_weeks


class _FormatScanner:
    def __init__(self, source: str):
        self.source = source
        self.i = 0
        self.n = len(source)

    def at_end(self) -> bool:
        return self.i >= self.n

    def peek(self) -> str:
        return self.source[self.i]

    def next(self) -> str:
        ch = self.peek()
        self.i += 1
        return ch

    def get_count(self) -> int:
        """Consumes a run of identical characters and returns its length."""
        ch = self.peek()
        count = 0
        while not self.at_end() and self.peek() == ch:
            count += 1
            self.i += 1
        return count

    def get_text(self) -> str:
        """Consumes a quoted literal and returns its contents."""
        start = self.i + 1
        self.i += 1
        while not self.at_end() and self.peek() != QUOTE:
            self.i += 1

        if self.at_end():
            raise CalendarError(f'Invalid format, missing close quote in "{self.source}".')

        text = self.source[start:self.i]
        self.i += 1
        return text


# ============================================================
# Date parsing
# ============================================================

class _DateParser:
    """Transient state for parsing one date string."""

    def __init__(self, fmt: DateFormat, cal: "Calendar", text: str):
        self.fmt = fmt
        self.cal = cal
        self.text = text.upper()
        self.n = len(self.text)
        self.i = 0

        self.is_prior_era = False
        self.year: Optional[int] = None
        self.month_of_year: Optional[int] = None
        self.day_of_month: Optional[int] = None
        self.day_of_year: Optional[int] = None

    def parse(self) -> int:
        for fld in self.fmt.fields:
            self._parse_field(fld)
        return self._compute_epoch_day()

    def _parse_field(self, fld: DateField) -> None:
        if self._at_end():
            raise self._expected(type(fld).__name__, "")

        if isinstance(fld, DayOfMonth):
            self.day_of_month = self._next_int(DAY_OF_MONTH, fld.digits)
        elif isinstance(fld, DayOfYear):
            self.day_of_year = self._next_int(DAY_OF_YEAR, fld.digits)
        elif isinstance(fld, EraName):
            era = self.cal.era.get_form(fld.form).upper()
            prior = self.cal.prior_era.get_form(fld.form).upper()
            rest = self._rest()
            if rest.startswith(era):
                self._skip(era)
            elif rest.startswith(prior):
                self._skip(prior)
                self.is_prior_era = True
            else:
                raise self._expected("era", rest)
        elif isinstance(fld, MonthName):
            self.month_of_year = self._find_name("month", self.cal.months(), fld.form) + 1
        elif isinstance(fld, MonthNumber):
            self.month_of_year = self._next_int(MONTH, fld.digits)
        elif isinstance(fld, Text):
            literal = fld.text.upper()
            if self._rest().startswith(literal):
                self._skip(literal)
            else:
                raise self._expected(f'"{fld.text}"', self._rest())
        elif isinstance(fld, WeekdayName):
            # The weekday follows from the date; it is consumed, not checked.
            self._find_name("weekday", self.cal.week.weekdays, fld.form)
        elif isinstance(fld, YearNumber):
            self.year = self._next_int(YEAR, fld.digits)
        else:
            raise TypeError(f"Unknown date field type: {type(fld)}")

    def _compute_epoch_day(self) -> int:
        if self.year is None:
            raise self._insufficient()

        year = -self.year if self.is_prior_era else self.year

        if self.day_of_year is not None:
            year_day = self.cal.year_day(year, self.day_of_year)
            self.cal.validate(year_day)
            return self.cal.year_day_to_day(year_day)

        if self.month_of_year is not None and self.day_of_month is not None:
            date = self.cal.date(year, self.month_of_year, self.day_of_month)
            self.cal.validate(date)
            return self.cal.date_to_day(date)

        raise self._insufficient()

    # ---------------------------------------------------------
    # Scanning
    # ---------------------------------------------------------

    def _at_end(self) -> bool:
        return self.i >= self.n

    def _rest(self) -> str:
        return self.text[self.i:]

    def _skip(self, token: str) -> None:
        if not self._rest().startswith(token):
            raise self._expected(f'"{token}"', self._rest())
        self.i += len(token)

    def _next_int(self, conv: str, width: int) -> int:
        if width > self.n - self.i:
            raise self._expected(f'field "{conv * width}"', self._rest())

        count = width
        if width == 1:
            count = _LEADING_DIGITS.match(self.text, self.i).end() - self.i

        token = self.text[self.i:self.i + count]
        self.i += count
        if not _DIGITS.fullmatch(token):
            raise self._expected(f'field "{conv * width}"', token)
        return int(token)

    def _find_name(self, what: str, names: Sequence[CalendarName], form: Form) -> int:
        rest = self._rest()
        for ndx, name in enumerate(names):
            token = name.get_form(form).upper()
            if rest.startswith(token):
                self._skip(token)
                return ndx
        raise self._expected(what, rest)

    # ---------------------------------------------------------
    # Errors
    # ---------------------------------------------------------

    @staticmethod
    def _expected(what: str, got: str) -> CalendarError:
        return CalendarError(f'Expected {what}, got: "{got}".')

    @staticmethod
    def _insufficient() -> CalendarError:
        return CalendarError("Insufficient information to compute the epoch day.")


# Default formats for calendars with and without months.
ERA_YMD = DateFormat("E-y-m-d")
ERA_YD = DateFormat("E-y-D")
