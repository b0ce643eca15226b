from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Literal, Mapping, Union

Overflow = Literal["constrain", "reject"]
DateUnit = Literal[
    "year", "years", "month", "months", "week", "weeks", "day", "days", "auto"
]

MONTHS_PER_YEAR = 12
DAYS_PER_WEEK = 7

# Reference year used to resolve a Hijri month/day when no year is supplied.
# 1444 AH spans 2022-07-30 .. 2023-07-18.
REFERENCE_YEAR = 1444


@dataclass(frozen=True, order=True)
class HijriDate:
    year: int
    month: int  # 1..12
    day: int    # 1..30

    @property
    def month_code(self) -> str:
        return f"M{self.month:02d}"

    def __iter__(self):
        return iter((self.year, self.month, self.day))

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


def _integral(name: str, value: Any) -> int:
    n = int(value)
    if n != value:
        raise ValueError(f"Duration field {name!r} must be an integer, got {value!r}")
    return n


@dataclass(frozen=True)
class Duration:
    """Calendar duration. Components may be negative; they are not normalized."""
    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0

    @classmethod
    def coerce(cls, value: Union["Duration", Mapping[str, Any]]) -> "Duration":
        if isinstance(value, Duration):
            return value
        known = {f.name for f in fields(cls)}
        unknown = set(value) - known
        if unknown:
            raise TypeError(f"Unknown duration fields {sorted(unknown)}. Expected: {sorted(known)}")
        return cls(**{k: _integral(k, v) for k, v in value.items()})

    @property
    def sign(self) -> int:
        for v in (self.years, self.months, self.weeks, self.days):
            if v:
                return 1 if v > 0 else -1
        return 0

    @property
    def blank(self) -> bool:
        return self.sign == 0

    def __neg__(self) -> "Duration":
        return Duration(-self.years, -self.months, -self.weeks, -self.days)


@dataclass(frozen=True)
class PlainYearMonth:
    """ISO year/month."""
    year: int
    month: int


@dataclass(frozen=True)
class PlainMonthDay:
    """ISO month/day."""
    month: int
    day: int
