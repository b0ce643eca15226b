"""
temporal_hijri.arithmetic
-------------------------
Duration addition and date differencing across the two calendars.

Year and month steps are taken in Hijri space, because Hijri months are 29 or
30 days long in no fixed pattern: one month after 1 Ramadan is 1 Shawwal, not
a fixed day count later. Day and week steps are taken in Gregorian space,
where "N days" is always exactly N days.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Mapping, Union

from .bridge import CoordinateBridge
from .core.errors import OutOfRangeError
from .core.types import DAYS_PER_WEEK, MONTHS_PER_YEAR, DateUnit, Duration, HijriDate, Overflow

log = logging.getLogger(__name__)

OVERFLOW_POLICIES = ("constrain", "reject")

_UNIT_ALIASES = {
    "year": "years", "years": "years",
    "month": "months", "months": "months",
    "week": "weeks", "weeks": "weeks",
    "day": "days", "days": "days",
    "auto": "days",
}


def check_overflow(overflow: str) -> Overflow:
    if overflow not in OVERFLOW_POLICIES:
        raise ValueError(f"overflow must be one of {OVERFLOW_POLICIES}, got {overflow!r}")
    return overflow  # type: ignore[return-value]


def normalize_unit(unit: str) -> str:
    try:
        return _UNIT_ALIASES[unit]
    except KeyError:
        raise ValueError(f"Unknown largest unit {unit!r}. Available: {sorted(_UNIT_ALIASES)}") from None


def balance_months(year: int, month: int) -> tuple[int, int]:
    """Fold month overflow (of any magnitude) into the year; month ends in 1..12."""
    while month > MONTHS_PER_YEAR:
        month -= MONTHS_PER_YEAR
        year += 1
    while month < 1:
        month += MONTHS_PER_YEAR
        year -= 1
    return year, month


def date_add(
    bridge: CoordinateBridge,
    d: date,
    duration: Union[Duration, Mapping[str, int]],
    overflow: Overflow = "constrain",
) -> date:
    overflow = check_overflow(overflow)
    duration = Duration.coerce(duration)

    h = bridge.to_hijri(d)
    y, m = balance_months(h.year + duration.years, h.month + duration.months)

    # Clamp day to the valid range for the target month.
    max_day = bridge.month_length(y, m)
    day = min(h.day, max_day)
    if day != h.day and overflow == "reject":
        raise OutOfRangeError(
            bridge.calendar_id, HijriDate(y, m, h.day),
            f"Day {h.day} does not exist in Hijri month {y}/{m} of the {bridge.calendar_id} calendar",
        )

    intermediate = bridge.from_hijri(y, m, day)
    day_delta = duration.days + duration.weeks * DAYS_PER_WEEK
    log.debug("%s: %s + %s -> %d/%d/%d (+%d days)", bridge.calendar_id, h, duration, y, m, day, day_delta)
    if not day_delta:
        return intermediate
    try:
        return intermediate + timedelta(days=day_delta)
    except OverflowError:
        raise OutOfRangeError(
            bridge.calendar_id, intermediate,
            f"{intermediate.isoformat()} + {day_delta} days is out of range for the {bridge.calendar_id} calendar",
        ) from None


def _hijri_difference(bridge: CoordinateBridge, one: date, two: date) -> tuple[int, int, int]:
    h1 = bridge.to_hijri(one)
    h2 = bridge.to_hijri(two)

    years = h2.year - h1.year
    months = h2.month - h1.month
    days = h2.day - h1.day

    # Borrow from months: the borrowed period is the month before `two`'s month.
    if days < 0:
        months -= 1
        borrow_y, borrow_m = balance_months(h2.year, h2.month - 1)
        days += bridge.month_length(borrow_y, borrow_m)

    if months < 0:
        years -= 1
        months += MONTHS_PER_YEAR

    return years, months, days


def date_until(
    bridge: CoordinateBridge,
    one: date,
    two: date,
    largest_unit: DateUnit = "days",
) -> Duration:
    unit = normalize_unit(largest_unit)

    if unit == "days":
        return Duration(days=(two - one).days)

    if unit == "weeks":
        total = (two - one).days
        weeks = int(total / DAYS_PER_WEEK)
        return Duration(weeks=weeks, days=total - weeks * DAYS_PER_WEEK)

    # Borrowing only works forwards; a reversed pair is measured the other way round.
    if two < one:
        return -date_until(bridge, two, one, unit)

    years, months, days = _hijri_difference(bridge, one, two)
    if unit == "years":
        return Duration(years=years, months=months, days=days)
    return Duration(months=years * MONTHS_PER_YEAR + months, days=days)
