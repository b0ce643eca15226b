"""
temporal_hijri.engines.tabular
------------------------------
Arithmetic (tabular) Islamic calendar: 30-year cycle with 11 leap years
(2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29), civil epoch 1 Muharram 1 AH =
Julian 622-07-16 (JDN 1948440). Odd months have 30 days, even months 29,
and the last month gains a day in leap years.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.time import from_jdn, to_jdn, utc_midnight
from ..core.types import HijriDate, MONTHS_PER_YEAR

EPOCH_JDN = 1948440


def is_leap_year(year: int) -> bool:
    return (14 + 11 * year) % 30 < 11


def month_length(year: int, month: int) -> int:
    if month == MONTHS_PER_YEAR and is_leap_year(year):
        return 30
    return 30 if month % 2 == 1 else 29


def hijri_to_jdn(year: int, month: int, day: int) -> int:
    return (
        EPOCH_JDN - 1
        + (year - 1) * 354
        + (3 + 11 * year) // 30
        + 29 * (month - 1)
        + month // 2
        + day
    )


def jdn_to_hijri(jdn: int) -> HijriDate:
    year = (30 * (jdn - EPOCH_JDN) + 10646) // 10631
    prior_days = jdn - hijri_to_jdn(year, 1, 1)
    month = (11 * prior_days + 330) // 325
    day = jdn - hijri_to_jdn(year, month, 1) + 1
    return HijriDate(year, month, day)


class TabularEngine:
    """Unbounded arithmetic engine; reads wall-clock fields."""
    id = "tabular"

    def to_hijri(self, local: datetime) -> Optional[HijriDate]:
        return jdn_to_hijri(to_jdn(local))

    def to_gregorian(self, year: int, month: int, day: int) -> Optional[datetime]:
        if not 1 <= month <= MONTHS_PER_YEAR or not 1 <= day <= month_length(year, month):
            return None
        try:
            return utc_midnight(from_jdn(hijri_to_jdn(year, month, day)))
        except (ValueError, OverflowError):
            return None

    def days_in_month(self, year: int, month: int) -> Optional[int]:
        if not 1 <= month <= MONTHS_PER_YEAR:
            return None
        return month_length(year, month)

    def __repr__(self) -> str:
        return "TabularEngine()"
