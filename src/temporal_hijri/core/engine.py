from __future__ import annotations
from datetime import datetime
from typing import Optional, Protocol, runtime_checkable

from .types import HijriDate


@runtime_checkable
class CalendarEngine(Protocol):
    """
    Conversion engine for one Hijri variant.

    Every method returns None when the requested coordinate lies outside the
    engine's supported domain (or is not a valid coordinate at all).
    Implementations must be stateless or backed by read-only data.
    """
    id: str

    def to_hijri(self, local: datetime) -> Optional[HijriDate]:
        """Gregorian -> Hijri. `local` is a naive datetime carrying wall-clock fields."""
        ...

    def to_gregorian(self, year: int, month: int, day: int) -> Optional[datetime]:
        """Hijri -> Gregorian, as an aware datetime whose UTC fields hold the date."""
        ...

    def days_in_month(self, year: int, month: int) -> Optional[int]:
        """Length of a Hijri month (29 or 30)."""
        ...
