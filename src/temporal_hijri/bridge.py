"""
temporal_hijri.bridge
---------------------
Coordinate bridge between Gregorian dates and Hijri coordinates.

Two field-reading conventions meet here:
  - inbound, the engine receives `local_fields(d)`: wall-clock fields, never
    shifted by a timezone conversion;
  - outbound, the engine's result is read with `anchored_fields`: its UTC
    components, so the host timezone can never introduce a one-day skew.
"""

from __future__ import annotations

import logging
from datetime import date

from .core.engine import CalendarEngine
from .core.errors import OutOfRangeError
from .core.time import anchored_fields, local_fields
from .core.types import HijriDate

log = logging.getLogger(__name__)


class CoordinateBridge:
    def __init__(self, engine: CalendarEngine):
        self.engine = engine
        self.calendar_id = f"hijri-{engine.id}"

    def to_hijri(self, d: date) -> HijriDate:
        h = self.engine.to_hijri(local_fields(d))
        if h is None:
            log.debug("%s: no Hijri coordinate for %s", self.calendar_id, d)
            raise OutOfRangeError(
                self.calendar_id, d,
                f"Date {d.isoformat()} is out of range for the {self.calendar_id} calendar",
            )
        return h

    def from_hijri(self, year: int, month: int, day: int) -> date:
        g = self.engine.to_gregorian(year, month, day)
        if g is None:
            log.debug("%s: no Gregorian date for %d/%d/%d", self.calendar_id, year, month, day)
            raise OutOfRangeError(
                self.calendar_id, HijriDate(year, month, day),
                f"Hijri date {year}/{month}/{day} is out of range for the {self.calendar_id} calendar",
            )
        return anchored_fields(g)

    def month_length(self, year: int, month: int) -> int:
        n = self.engine.days_in_month(year, month)
        if n is None:
            raise OutOfRangeError(
                self.calendar_id, (year, month),
                f"Hijri month {year}/{month} is out of range for the {self.calendar_id} calendar",
            )
        return n

    def __repr__(self) -> str:
        return f"CoordinateBridge({self.engine!r})"
