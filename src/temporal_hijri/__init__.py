"""temporal_hijri public API.

Keep this surface small: users should mostly interact with the calendar
factories and functions re-exported here.
"""

from .api import (
    add,
    calendar_from_id,
    day_info,
    list_calendars,
    month_days,
    to_gregorian,
    to_hijri,
    until,
)
from .calendar import HijriCalendar
from .core.engine import CalendarEngine
from .core.errors import OutOfRangeError, TemporalHijriError
from .core.types import Duration, HijriDate, PlainMonthDay, PlainYearMonth
from .engines.factory import fcna_calendar, tabular_calendar, uaq_calendar

__all__ = [
    "add",
    "calendar_from_id",
    "day_info",
    "list_calendars",
    "month_days",
    "to_gregorian",
    "to_hijri",
    "until",
    "HijriCalendar",
    "CalendarEngine",
    "OutOfRangeError",
    "TemporalHijriError",
    "Duration",
    "HijriDate",
    "PlainMonthDay",
    "PlainYearMonth",
    "fcna_calendar",
    "tabular_calendar",
    "uaq_calendar",
]
