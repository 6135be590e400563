"""
polycal.engines.cycles
----------------------
The structural variants of a calendar: a cycle of months whose lengths vary
by year, or a bare year-length function.  Both receive years that have
already been shifted by `length_year`, i.e. year 0 exists from their point of
view.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from ..core.errors import CalendarError
from ..core.types import BoundedMonth, YearDelta


@dataclass(frozen=True)
class MonthCycle:
    """An ordered, non-empty cycle of months, shared by every year."""
    months: Tuple[BoundedMonth, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "months", tuple(self.months))
        if not self.months:
            raise CalendarError("A calendar with months needs at least one month.")
        for m in self.months:
            if not isinstance(m, BoundedMonth):
                raise CalendarError(f"Expected a BoundedMonth, got {m!r}.")

    def days_in_year(self, year: int) -> int:
        return sum(m.days_in_month(year) for m in self.months)

    def days_in_month(self, year: int, month_of_year: int) -> int:
        return self.months[month_of_year - 1].days_in_month(year)


@dataclass(frozen=True)
class YearCycle:
    """Years of varying length with no months."""
    year_length: YearDelta

    def __post_init__(self) -> None:
        if not callable(self.year_length):
            raise CalendarError(f"Year length must be a function of the year, got {self.year_length!r}.")

    def days_in_year(self, year: int) -> int:
        return self.year_length(year)


Cycle = Union[MonthCycle, YearCycle]
