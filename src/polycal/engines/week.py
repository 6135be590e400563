"""
polycal.engines.week
--------------------
A weekly cycle of N weekdays aligned to epoch day 0 by an offset.  The cycle
runs unbroken in both directions; there are no intercalary days.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from ..core.errors import CalendarError
from ..core.types import Weekday


@dataclass(frozen=True)
class Week:
    weekdays: Tuple[Weekday, ...]
    offset: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "weekdays", tuple(self.weekdays))
        if not self.weekdays:
            raise CalendarError("A week must have at least one weekday.")
        for wd in self.weekdays:
            if not isinstance(wd, Weekday):
                raise CalendarError(f"Expected a Weekday, got {wd!r}.")

    @classmethod
    def of(cls, weekdays: Sequence[Weekday], offset: int = 0) -> "Week":
        return cls(tuple(weekdays), offset)

    @property
    def days_in_week(self) -> int:
        return len(self.weekdays)

    def day_to_index(self, day: int) -> int:
        """0-based position in the cycle for an epoch day."""
        # non-negative for negative days too
        return (day + self.offset) % len(self.weekdays)

    def day_to_weekday(self, day: int) -> Weekday:
        return self.weekdays[self.day_to_index(day)]

    def index_of(self, weekday: Weekday) -> int:
        """0-based index of the weekday, or -1 if it isn't in the week."""
        try:
            return self.weekdays.index(weekday)
        except ValueError:
            return -1
