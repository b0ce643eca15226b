from __future__ import annotations

from datetime import date
from functools import lru_cache
from typing import Any, Dict, List, Mapping, Union

from .calendar import HijriCalendar
from .core.types import DateUnit, Duration, HijriDate, Overflow
from .engines.factory import available_calendars, make_calendar

DEFAULT_CALENDAR = "hijri-uaq"


@lru_cache(maxsize=None)
def calendar_from_id(calendar_id: str = DEFAULT_CALENDAR) -> HijriCalendar:
    """Shared calendar instance for an id. Calendars are immutable, so sharing is safe."""
    return make_calendar(calendar_id)


def list_calendars() -> List[str]:
    return available_calendars()


def to_hijri(d: date, *, calendar: str = DEFAULT_CALENDAR) -> HijriDate:
    return calendar_from_id(calendar).hijri_date(d)


def to_gregorian(year: int, month: int, day: int, *, calendar: str = DEFAULT_CALENDAR) -> date:
    return calendar_from_id(calendar).date_from_fields(
        {"year": year, "month": month, "day": day}, overflow="reject"
    )


def day_info(d: date, *, calendar: str = DEFAULT_CALENDAR) -> Dict[str, Any]:
    return calendar_from_id(calendar).fields(d)


def add(
    d: date,
    duration: Union[Duration, Mapping[str, int]],
    *,
    calendar: str = DEFAULT_CALENDAR,
    overflow: Overflow = "constrain",
) -> date:
    return calendar_from_id(calendar).date_add(d, duration, overflow)


def until(
    one: date,
    two: date,
    *,
    calendar: str = DEFAULT_CALENDAR,
    largest_unit: DateUnit = "days",
) -> Duration:
    return calendar_from_id(calendar).date_until(one, two, largest_unit)


def month_days(year: int, month: int, *, calendar: str = DEFAULT_CALENDAR) -> List[date]:
    """Gregorian dates of every day of a Hijri month."""
    cal = calendar_from_id(calendar)
    first = cal.bridge.from_hijri(year, month, 1)
    length = cal.bridge.month_length(year, month)
    return [date.fromordinal(first.toordinal() + i) for i in range(length)]
