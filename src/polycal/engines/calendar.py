"""
polycal.engines.calendar
------------------------
The conversion engine shared by every calendar.  Time is measured in epoch
days; day 0 of a calendar with epoch_offset 0 is year 1, day 1.  The year
before year 1 is year -1.

A calendar binds an epoch offset, an era pair, an optional weekly cycle, and
one structural variant: a MonthCycle (then dates have months) or a YearCycle
(year/day-of-year only).  To convert between calendars, define them on the
same epoch day 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ..core.errors import CalendarError, no_monthly_cycle, no_weekly_cycle
from ..core.types import BoundedMonth, Date, Era, Weekday, YearDay, YearDelta
from ..formatter.date_format import ERA_YD, ERA_YMD, DateFormat, as_format
from .cycles import Cycle, MonthCycle, YearCycle
from .week import Week

AFTER_EPOCH = Era("AE", "After Epoch")
BEFORE_EPOCH = Era("BE", "Before Epoch")


def length_year(year: int) -> int:
    """
    The year number handed to length functions.  Those are written as if
    there were a year 0, so year -1 maps to 0, -2 to -1, and so on.
    """
    if year > 0:
        return year
    if year < 0:
        return year + 1
    raise CalendarError("Year 0 is undefined.")


@dataclass(frozen=True, eq=False)
class Calendar:
    """
    An immutable calendar.  Equality is identity: a YearDay or Date belongs
    to the calendar instance that made it.
    """
    cycle: Cycle
    epoch_offset: int = 0
    era: Era = AFTER_EPOCH
    prior_era: Era = BEFORE_EPOCH
    week: Optional[Week] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.cycle, (MonthCycle, YearCycle)):
            raise TypeError(f"Unknown calendar cycle type: {type(self.cycle)}")
        if not isinstance(self.era, Era) or not isinstance(self.prior_era, Era):
            raise CalendarError("Calendar eras must be Era values.")
        if self.week is not None and not isinstance(self.week, Week):
            raise CalendarError(f"Expected a Week, got {self.week!r}.")

    # ---------------------------------------------------------
    # Metadata
    # ---------------------------------------------------------

    def has_months(self) -> bool:
        return isinstance(self.cycle, MonthCycle)

    def has_weeks(self) -> bool:
        return self.week is not None

    @property
    def year_length(self) -> YearDelta:
        """
        The raw year-length function of a calendar without months.  It assumes
        a year 0 exists; prefer days_in_year().
        """
        if isinstance(self.cycle, YearCycle):
            return self.cycle.year_length
        raise CalendarError("Calendar has a monthly cycle; use days_in_year().")

    def days_in_year(self, year: int) -> int:
        return self.cycle.days_in_year(length_year(year))

    # ---------------------------------------------------------
    # Year/day-of-year
    # ---------------------------------------------------------

    def year_day(self, year: int, day_of_year: int) -> YearDay:
        """Makes a YearDay without validating it."""
        return YearDay(self, year, day_of_year)

    def day_to_year_day(self, epoch_day: int) -> YearDay:
        day = epoch_day - self.epoch_offset

        if day >= 0:
            year = 1
            days_in_year = self._scan_days_in_year(year)
            while day >= days_in_year:
                day -= days_in_year
                year += 1
                days_in_year = self._scan_days_in_year(year)
            return YearDay(self, year, day + 1)

        day = -day
        year = -1
        days_in_year = self._scan_days_in_year(year)
        while day > days_in_year:
            day -= days_in_year
            year -= 1
            days_in_year = self._scan_days_in_year(year)
        return YearDay(self, year, days_in_year - day + 1)

    def _scan_days_in_year(self, year: int) -> int:
        days = self.days_in_year(year)
        if days < 1:
            raise CalendarError(f"Year {year} has {days} days; every year needs at least one.")
        return days

    def year_day_to_day(self, year_day: YearDay) -> int:
        self.validate(year_day)

        if year_day.year > 0:
            day = year_day.day_of_year - 1
            for y in range(1, year_day.year):
                day += self.days_in_year(y)
            return day + self.epoch_offset

        day = self.days_in_year(year_day.year) - year_day.day_of_year + 1
        for y in range(year_day.year + 1, 0):
            day += self.days_in_year(y)
        return -day + self.epoch_offset

    def validate(self, value: Union[YearDay, Date]) -> None:
        """Raises CalendarError unless the YearDay or Date is valid here."""
        if isinstance(value, YearDay):
            self._validate_year_day(value)
        elif isinstance(value, Date):
            self._validate_date(value)
        else:
            raise TypeError(f"Cannot validate {type(value)}; expected YearDay or Date")

    def _validate_year_day(self, year_day: YearDay) -> None:
        self._check_owner(year_day)

        if year_day.year == 0:
            raise CalendarError(f'Year is 0 in date: "{year_day}".')

        if not 1 <= year_day.day_of_year <= self.days_in_year(year_day.year):
            raise CalendarError(
                f'Day of year out of range for year {year_day.year} in date: "{year_day}".'
            )

    def _validate_date(self, date: Date) -> None:
        cycle = self._month_cycle()
        self._check_owner(date)

        if date.year == 0:
            raise CalendarError(f'Year is 0 in date: "{date}".')

        count = len(cycle.months)
        if not 1 <= date.month_of_year <= count:
            raise CalendarError(f"Month is out of range (1,...,{count}) in date: \"{date}\".")

        days = self.days_in_month(date.year, date.month_of_year)
        if not 1 <= date.day_of_month <= days:
            raise CalendarError(f"Day is out of range (1,...,{days}) in date: \"{date}\".")

    def _check_owner(self, value: Union[YearDay, Date]) -> None:
        if value.calendar is not self:
            raise CalendarError(f'Calendar mismatch, expected "{self}", got "{value.calendar}".')

    # ---------------------------------------------------------
    # Months
    # ---------------------------------------------------------

    def _month_cycle(self) -> MonthCycle:
        if isinstance(self.cycle, MonthCycle):
            return self.cycle
        raise no_monthly_cycle()

    def months(self) -> Tuple[BoundedMonth, ...]:
        return self._month_cycle().months

    def months_in_year(self) -> int:
        return len(self._month_cycle().months)

    def month(self, month_of_year: int) -> BoundedMonth:
        months = self._month_cycle().months
        if not 1 <= month_of_year <= len(months):
            raise CalendarError(f"Month is out of range (1,...,{len(months)}): {month_of_year}.")
        return months[month_of_year - 1]

    def days_in_month(self, year: int, month_of_year: int) -> int:
        cycle = self._month_cycle()
        if not 1 <= month_of_year <= len(cycle.months):
            raise CalendarError(f"Month is out of range (1,...,{len(cycle.months)}): {month_of_year}.")
        return cycle.days_in_month(length_year(year), month_of_year)

    def date(self, year: int, month_of_year: int, day_of_month: int) -> Date:
        """Makes a Date without validating it."""
        self._month_cycle()
        return Date(self, year, month_of_year, day_of_month)

    def date_to_day(self, date: Date) -> int:
        self.validate(date)
        year = date.year

        day = date.day_of_month - 1
        for m in range(1, date.month_of_year):
            day += self.days_in_month(year, m)

        if year > 0:
            for y in range(1, year):
                day += self.days_in_year(y)
        else:
            for y in range(-1, year - 1, -1):
                day -= self.days_in_year(y)

        return day + self.epoch_offset

    def day_to_date(self, epoch_day: int) -> Date:
        cycle = self._month_cycle()
        year_day = self.day_to_year_day(epoch_day)
        year = year_day.year
        day_of_year = year_day.day_of_year

        for month_of_year in range(1, len(cycle.months) + 1):
            days = self.days_in_month(year, month_of_year)
            if day_of_year <= days:
                return Date(self, year, month_of_year, day_of_year)
            day_of_year -= days

        # Only reachable if the months don't add up to days_in_year().
        raise CalendarError(f"Day of year {year_day.day_of_year} does not fall in any month of year {year}.")

    # ---------------------------------------------------------
    # Weeks
    # ---------------------------------------------------------

    def _week(self) -> Week:
        if self.week is None:
            raise no_weekly_cycle()
        return self.week

    def days_in_week(self) -> int:
        return self._week().days_in_week

    def day_to_weekday(self, epoch_day: int) -> Weekday:
        return self._week().day_to_weekday(epoch_day)

    def day_to_day_of_week(self, epoch_day: int) -> int:
        """1-based position of the epoch day's weekday in the week."""
        return self._week().day_to_index(epoch_day) + 1

    # ---------------------------------------------------------
    # Formatting and parsing
    # ---------------------------------------------------------

    def default_format(self) -> DateFormat:
        return ERA_YMD if self.has_months() else ERA_YD

    def format(self, value: Union[int, Date, YearDay], fmt: Union[str, DateFormat, None] = None) -> str:
        """Formats an epoch day, Date or YearDay; Date/YearDay are validated."""
        if isinstance(value, Date):
            day = self.date_to_day(value)
        elif isinstance(value, YearDay):
            day = self.year_day_to_day(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            day = value
        else:
            raise TypeError(f"Cannot format {type(value)}; expected int, Date or YearDay")

        fmt = self.default_format() if fmt is None else as_format(fmt)
        return fmt.format(self, day)

    def parse(self, text: str, fmt: Union[str, DateFormat, None] = None) -> int:
        fmt = self.default_format() if fmt is None else as_format(fmt)
        return fmt.parse(self, text)

    # ---------------------------------------------------------

    def __str__(self) -> str:
        if self.name:
            return self.name
        if isinstance(self.cycle, MonthCycle):
            return f"BasicCalendar[{self.era},{self.prior_era},{len(self.cycle.months)}]"
        return f"TrivialCalendar[{self.era},{self.prior_era}]"

    def __repr__(self) -> str:
        return f"Calendar({self})"
