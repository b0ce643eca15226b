from __future__ import annotations
from typing import Any


class TemporalHijriError(Exception):
    """Base error."""


class OutOfRangeError(TemporalHijriError, ValueError):
    """Raised when a date or Hijri coordinate has no counterpart in a calendar."""

    def __init__(self, calendar_id: str, value: Any, message: str | None = None):
        self.calendar_id = calendar_id
        self.value = value
        if message is None:
            message = f"{value} is out of range for the {calendar_id} calendar"
        super().__init__(message)
