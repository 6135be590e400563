"""
polycal.bootstrap
-----------------
Builds the default calendar registry.
"""

from __future__ import annotations
import logging

from polycal.core.engine import CalendarRegistry
from polycal.engines.specs import ALL_CALENDARS

logger = logging.getLogger(__name__)


def build_registry() -> CalendarRegistry:
    calendars = dict(ALL_CALENDARS)
    logger.debug("Bootstrapping calendar registry: %s", sorted(calendars))
    return CalendarRegistry(calendars)
