"""
temporal_hijri.calendar
-----------------------
HijriCalendar implements the calendar-plugin protocol of a date/time value
library whose dates live in ISO (Gregorian) coordinates. Every method receives
a `datetime.date` and answers in Hijri terms; the conversion itself is
delegated to the injected CalendarEngine.

One class serves every Hijri variant; the variants differ only in the engine
they are constructed with (see `temporal_hijri.engines.factory`).
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Mapping, Union

from . import arithmetic, metrics
from .bridge import CoordinateBridge
from .core.engine import CalendarEngine
from .core.types import (
    REFERENCE_YEAR,
    DateUnit,
    Duration,
    HijriDate,
    Overflow,
    PlainMonthDay,
    PlainYearMonth,
)


def _require(fields: Mapping[str, Any], *names: str) -> None:
    missing = [n for n in names if fields.get(n) is None]
    if missing:
        raise TypeError(f"Missing required fields: {', '.join(missing)}")


class HijriCalendar:
    def __init__(self, engine: CalendarEngine):
        self.engine = engine
        self.bridge = CoordinateBridge(engine)
        self.id = self.bridge.calendar_id

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"HijriCalendar({self.engine!r})"

    def hijri_date(self, d: date) -> HijriDate:
        return self.bridge.to_hijri(d)

    # ---------------------------------------------------------
    # Field accessors
    # ---------------------------------------------------------

    def year(self, d: date) -> int:
        return metrics.year(self.bridge, d)

    def month(self, d: date) -> int:
        return metrics.month(self.bridge, d)

    def month_code(self, d: date) -> str:
        return metrics.month_code(self.bridge, d)

    def day(self, d: date) -> int:
        return metrics.day(self.bridge, d)

    # ---------------------------------------------------------
    # Month and year metrics
    # ---------------------------------------------------------

    def days_in_month(self, d: date) -> int:
        return metrics.days_in_month(self.bridge, d)

    def days_in_year(self, d: date) -> int:
        return metrics.days_in_year(self.bridge, d)

    def months_in_year(self, d: date) -> int:
        return metrics.months_in_year(self.bridge, d)

    def in_leap_year(self, d: date) -> bool:
        return metrics.in_leap_year(self.bridge, d)

    def day_of_week(self, d: date) -> int:
        return metrics.day_of_week(self.bridge, d)

    def day_of_year(self, d: date) -> int:
        return metrics.day_of_year(self.bridge, d)

    def week_of_year(self, d: date) -> int:
        return metrics.week_of_year(self.bridge, d)

    def days_in_week(self, d: date) -> int:
        return metrics.days_in_week(self.bridge, d)

    def fields(self, d: date) -> Dict[str, Any]:
        """Every descriptor of `d` at once."""
        h = self.hijri_date(d)
        return {
            "calendar": self.id,
            "iso": d.isoformat(),
            "year": h.year,
            "month": h.month,
            "month_code": h.month_code,
            "day": h.day,
            "day_of_week": self.day_of_week(d),
            "day_of_year": self.day_of_year(d),
            "week_of_year": self.week_of_year(d),
            "days_in_week": self.days_in_week(d),
            "days_in_month": self.days_in_month(d),
            "days_in_year": self.days_in_year(d),
            "months_in_year": self.months_in_year(d),
            "in_leap_year": self.in_leap_year(d),
        }

    # ---------------------------------------------------------
    # Construction from fields
    # ---------------------------------------------------------

    def date_from_fields(self, fields: Mapping[str, Any], overflow: Overflow = "constrain") -> date:
        _require(fields, "year", "month", "day")
        # Fields name an exact coordinate; the overflow policy does not repair it.
        arithmetic.check_overflow(overflow)
        return self.bridge.from_hijri(int(fields["year"]), int(fields["month"]), int(fields["day"]))

    def year_month_from_fields(
        self, fields: Mapping[str, Any], overflow: Overflow = "constrain"
    ) -> PlainYearMonth:
        _require(fields, "year", "month")
        arithmetic.check_overflow(overflow)
        iso = self.bridge.from_hijri(int(fields["year"]), int(fields["month"]), 1)
        return PlainYearMonth(iso.year, iso.month)

    def month_day_from_fields(
        self, fields: Mapping[str, Any], overflow: Overflow = "constrain"
    ) -> PlainMonthDay:
        # A reference year is needed to resolve a Hijri month/day to an ISO date.
        _require(fields, "month", "day")
        year = fields.get("year")
        iso = self.date_from_fields(
            {"year": REFERENCE_YEAR if year is None else year, "month": fields["month"], "day": fields["day"]},
            overflow,
        )
        return PlainMonthDay(iso.month, iso.day)

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def date_add(
        self,
        d: date,
        duration: Union[Duration, Mapping[str, int]],
        overflow: Overflow = "constrain",
    ) -> date:
        return arithmetic.date_add(self.bridge, d, duration, overflow)

    def date_until(self, one: date, two: date, largest_unit: DateUnit = "days") -> Duration:
        return arithmetic.date_until(self.bridge, one, two, largest_unit)

    def merge_fields(self, fields: Mapping[str, Any], additional_fields: Mapping[str, Any]) -> Dict[str, Any]:
        return {**fields, **additional_fields}
