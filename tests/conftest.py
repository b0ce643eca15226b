from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import List, Optional

import pytest

from temporal_hijri import HijriCalendar, tabular_calendar
from temporal_hijri.core.types import HijriDate
from temporal_hijri.engines import tabular


class BoundedEngine:
    """
    Tabular arithmetic restricted to [min_year, max_year], recording what it
    is handed. Results are returned in a non-UTC offset so that only a UTC
    reading recovers the right civil date.
    """
    id = "bounded"

    def __init__(self, min_year: int = 1400, max_year: int = 1500):
        self.min_year = min_year
        self.max_year = max_year
        self.seen: List[datetime] = []

    def _in_range(self, year: int) -> bool:
        return self.min_year <= year <= self.max_year

    def to_hijri(self, local: datetime) -> Optional[HijriDate]:
        self.seen.append(local)
        h = tabular.TabularEngine().to_hijri(local)
        return h if h is not None and self._in_range(h.year) else None

    def to_gregorian(self, year: int, month: int, day: int) -> Optional[datetime]:
        if not self._in_range(year):
            return None
        g = tabular.TabularEngine().to_gregorian(year, month, day)
        if g is None:
            return None
        return g.astimezone(timezone(timedelta(hours=-5)))

    def days_in_month(self, year: int, month: int) -> Optional[int]:
        if not self._in_range(year):
            return None
        return tabular.TabularEngine().days_in_month(year, month)


@pytest.fixture
def bounded_engine() -> BoundedEngine:
    return BoundedEngine()


@pytest.fixture
def bounded(bounded_engine) -> HijriCalendar:
    return HijriCalendar(bounded_engine)


@pytest.fixture
def tab() -> HijriCalendar:
    return tabular_calendar()


@pytest.fixture
def hdate(tab):
    """Gregorian date of a tabular Hijri coordinate."""
    def _make(year: int, month: int, day: int):
        return tab.date_from_fields({"year": year, "month": month, "day": day}, overflow="reject")
    return _make
