from __future__ import annotations
from datetime import date, datetime, timezone


def local_fields(d: date) -> datetime:
    """
    Naive midnight datetime carrying the wall-clock fields of `d`.

    Engines that read wall-clock fields see exactly d.year/d.month/d.day; no
    timezone conversion is ever applied on the way in.
    """
    return datetime(d.year, d.month, d.day)


def anchored_fields(dt: datetime) -> date:
    """
    Calendar date of an engine result, read from its UTC components.

    Naive values are taken to already be in UTC.
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return date(dt.year, dt.month, dt.day)


def utc_midnight(d: date) -> datetime:
    """UTC-anchored midnight of a civil date (the inverse of anchored_fields)."""
    return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn


def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)
