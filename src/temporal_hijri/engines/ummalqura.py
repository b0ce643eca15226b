"""
temporal_hijri.engines.ummalqura
--------------------------------
Umm al-Qura calendar: the official calendar of Saudi Arabia, published by
KACST as pre-calculated month tables rather than computed on the fly.

Table data comes from `hijridate`, which covers 1343-01-01 AH
(1924-08-01) to 1500-12-30 AH (2077-11-16). The engine reads the wall-clock
fields of its input and returns None outside that window.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from hijridate import Gregorian, Hijri

from ..core.time import utc_midnight
from ..core.types import HijriDate

log = logging.getLogger(__name__)


class UmmAlQuraEngine:
    id = "uaq"

    def to_hijri(self, local: datetime) -> Optional[HijriDate]:
        try:
            h = Gregorian(local.year, local.month, local.day).to_hijri()
        except OverflowError:
            log.debug("uaq: %s outside table range", local.date())
            return None
        return HijriDate(h.year, h.month, h.day)

    def to_gregorian(self, year: int, month: int, day: int) -> Optional[datetime]:
        try:
            g = Hijri(year, month, day).to_gregorian()
        except (OverflowError, ValueError):
            log.debug("uaq: %d/%d/%d not in table", year, month, day)
            return None
        return utc_midnight(g)

    def days_in_month(self, year: int, month: int) -> Optional[int]:
        try:
            return Hijri(year, month, 1).month_length()
        except (OverflowError, ValueError):
            return None

    def __repr__(self) -> str:
        return "UmmAlQuraEngine()"
