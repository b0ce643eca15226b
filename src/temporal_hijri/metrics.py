"""
temporal_hijri.metrics
----------------------
Scalar descriptors of a Gregorian date in Hijri terms. Every function first
obtains the Hijri coordinate through the bridge.
"""

from __future__ import annotations

import math
from datetime import date

from .bridge import CoordinateBridge
from .core.types import DAYS_PER_WEEK, MONTHS_PER_YEAR


def year(bridge: CoordinateBridge, d: date) -> int:
    return bridge.to_hijri(d).year


def month(bridge: CoordinateBridge, d: date) -> int:
    return bridge.to_hijri(d).month


def day(bridge: CoordinateBridge, d: date) -> int:
    return bridge.to_hijri(d).day


def month_code(bridge: CoordinateBridge, d: date) -> str:
    # Hijri years have no intercalary month: the code is the padded number.
    return bridge.to_hijri(d).month_code


def days_in_month(bridge: CoordinateBridge, d: date) -> int:
    h = bridge.to_hijri(d)
    return bridge.month_length(h.year, h.month)


def year_length(bridge: CoordinateBridge, hijri_year: int) -> int:
    return sum(bridge.month_length(hijri_year, m) for m in range(1, MONTHS_PER_YEAR + 1))


def days_in_year(bridge: CoordinateBridge, d: date) -> int:
    """354 in a common year, 355 when Dhu al-Hijjah carries the extra day."""
    return year_length(bridge, bridge.to_hijri(d).year)


def in_leap_year(bridge: CoordinateBridge, d: date) -> bool:
    return days_in_year(bridge, d) == 355


def months_in_year(bridge: CoordinateBridge, d: date) -> int:
    return MONTHS_PER_YEAR


def days_in_week(bridge: CoordinateBridge, d: date) -> int:
    return DAYS_PER_WEEK


def day_of_week(bridge: CoordinateBridge, d: date) -> int:
    """ISO weekday, 1 = Monday .. 7 = Sunday. Weekdays do not depend on the calendar."""
    return d.isoweekday()


def day_of_year(bridge: CoordinateBridge, d: date) -> int:
    h = bridge.to_hijri(d)
    return h.day + sum(bridge.month_length(h.year, m) for m in range(1, h.month))


def week_of_year(bridge: CoordinateBridge, d: date) -> int:
    """
    ceil(day_of_year / 7).

    There is no standard week numbering for the Hijri calendar; this value
    gives a consistent ordering within a year and nothing more.
    """
    return math.ceil(day_of_year(bridge, d) / DAYS_PER_WEEK)
