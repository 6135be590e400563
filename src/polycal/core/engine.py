"""
polycal.core.engine
-------------------
Named calendar registry.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List

if TYPE_CHECKING:
    from ..engines.calendar import Calendar

logger = logging.getLogger(__name__)


@dataclass
class CalendarRegistry:
    _calendars: Dict[str, "Calendar"]

    def get(self, name: str) -> "Calendar":
        if name not in self._calendars:
            raise KeyError(f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}")
        return self._calendars[name]

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, name: str, calendar: "Calendar", *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        logger.debug("Registering calendar %r: %s", name, calendar)
        self._calendars[name] = calendar
