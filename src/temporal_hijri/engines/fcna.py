"""
temporal_hijri.engines.fcna
---------------------------
Fiqh Council of North America (FCNA/ISNA) calendar.

A month begins on the day after the astronomical new moon if the conjunction
occurs before 12:00 UTC, otherwise two days after. No sighting is involved, so
the calendar extends without bound in both directions.

Month labels are tied to Meeus lunation numbers through a fixed offset:
lunation k=0 (new moon of 2000-01-06 18:14 UTC) opens Shawwal 1420, so the
linear Hijri month n = 12*(year-1) + (month-1) equals k + 17037.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import date, datetime
from functools import lru_cache
from typing import Dict, Optional

from ..core.time import from_jdn, to_jdn, utc_midnight
from ..core.types import HijriDate, MONTHS_PER_YEAR
from .astro.deltat import DeltaTModel, EspenakMeeusDeltaT
from .astro.newmoon import JDE_K0, SYNODIC_MONTH, jde_true_new_moon

log = logging.getLogger(__name__)

LUNATION_OFFSET = 17037
JD_J2000 = 2451545.0


@dataclass(frozen=True)
class FcnaParams:
    noon_cutoff_hours: float = 12.0
    delta_t: DeltaTModel = field(default_factory=EspenakMeeusDeltaT)


class FcnaEngine:
    """Astronomical engine; reads its input fields as UTC."""
    id = "fcna"

    def __init__(self, params: Optional[FcnaParams] = None):
        self.params = params or FcnaParams()
        # Per-instance memo; month starts are pure functions of k.
        self._month_start = lru_cache(maxsize=4096)(self._compute_month_start)

    def info(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "noon_cutoff_hours": self.params.noon_cutoff_hours,
            "delta_t": self.params.delta_t.info(),
        }

    # ---------------------------------------------------------
    # Lunation boundaries
    # ---------------------------------------------------------

    def conjunction_jd_utc(self, k: int) -> float:
        jde = jde_true_new_moon(k)
        year = 2000.0 + (jde - JD_J2000) / 365.25
        dt = self.params.delta_t.delta_t_seconds(year)
        return jde - dt / 86400.0

    def _compute_month_start(self, k: int) -> int:
        """JDN of the first day of the month opened by lunation k."""
        jd = self.conjunction_jd_utc(k)
        jdn = math.floor(jd + 0.5)
        hours = (jd + 0.5 - jdn) * 24.0
        return jdn + (1 if hours < self.params.noon_cutoff_hours else 2)

    def month_start(self, k: int) -> int:
        return self._month_start(k)

    def _lunation_for_jdn(self, jdn: int) -> int:
        k = math.floor((jdn - JDE_K0) / SYNODIC_MONTH)
        while self.month_start(k) > jdn:
            k -= 1
        while self.month_start(k + 1) <= jdn:
            k += 1
        return k

    # ---------------------------------------------------------
    # CalendarEngine protocol
    # ---------------------------------------------------------

    def to_hijri(self, local: datetime) -> Optional[HijriDate]:
        # Fields are anchored to UTC: the instant is midnight UTC of the same
        # civil date, which keeps the result within one day of wall-clock.
        jdn = to_jdn(date(local.year, local.month, local.day))
        k = self._lunation_for_jdn(jdn)
        n = k + LUNATION_OFFSET
        year, month0 = divmod(n, MONTHS_PER_YEAR)
        return HijriDate(year + 1, month0 + 1, jdn - self.month_start(k) + 1)

    def to_gregorian(self, year: int, month: int, day: int) -> Optional[datetime]:
        length = self.days_in_month(year, month)
        if length is None or not 1 <= day <= length:
            return None
        k = MONTHS_PER_YEAR * (year - 1) + (month - 1) - LUNATION_OFFSET
        try:
            return utc_midnight(from_jdn(self.month_start(k) + day - 1))
        except (ValueError, OverflowError):
            log.debug("fcna: %d/%d/%d beyond datetime.date range", year, month, day)
            return None

    def days_in_month(self, year: int, month: int) -> Optional[int]:
        if not 1 <= month <= MONTHS_PER_YEAR:
            return None
        k = MONTHS_PER_YEAR * (year - 1) + (month - 1) - LUNATION_OFFSET
        return self.month_start(k + 1) - self.month_start(k)

    def __repr__(self) -> str:
        return f"FcnaEngine({self.params!r})"
