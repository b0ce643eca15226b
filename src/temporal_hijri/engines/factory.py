"""
temporal_hijri.engines.factory
------------------------------
Named calendars as thin factory functions over HijriCalendar.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, List, Optional

from ..calendar import HijriCalendar
from .fcna import FcnaEngine, FcnaParams
from .tabular import TabularEngine
from .ummalqura import UmmAlQuraEngine


def uaq_calendar() -> HijriCalendar:
    """Umm al-Qura (Saudi Arabia), table-driven. Calendar id "hijri-uaq"."""
    return HijriCalendar(UmmAlQuraEngine())


def fcna_calendar(params: Optional[FcnaParams] = None) -> HijriCalendar:
    """FCNA/ISNA (North America), astronomical. Calendar id "hijri-fcna"."""
    return HijriCalendar(FcnaEngine(params))


def tabular_calendar() -> HijriCalendar:
    """Arithmetic civil calendar. Calendar id "hijri-tabular"."""
    return HijriCalendar(TabularEngine())


CALENDAR_FACTORIES: "MappingProxyType[str, Callable[[], HijriCalendar]]" = MappingProxyType({
    "hijri-uaq": uaq_calendar,
    "hijri-fcna": fcna_calendar,
    "hijri-tabular": tabular_calendar,
})


def available_calendars() -> List[str]:
    return sorted(CALENDAR_FACTORIES)


def make_calendar(calendar_id: str) -> HijriCalendar:
    """Build a calendar from its id; the "hijri-" prefix may be omitted."""
    key = calendar_id if calendar_id.startswith("hijri-") else f"hijri-{calendar_id}"
    if key not in CALENDAR_FACTORIES:
        raise KeyError(f"Unknown calendar '{calendar_id}'. Available: {available_calendars()}")
    return CALENDAR_FACTORIES[key]()
