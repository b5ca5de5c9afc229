"""Errors raised by the Advent Calendar progress engine."""
from __future__ import annotations

from typing import Any

from homeassistant.exceptions import HomeAssistantError

from .const import TOTAL_DAYS


class AdventCalendarError(HomeAssistantError):
    """Base class for Advent Calendar errors."""


class StorageUnavailable(AdventCalendarError):
    """The persistent store rejected a read or a write."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Storage unavailable for {key}: {reason}")
        self.key = key
        self.reason = reason


class InvalidDay(AdventCalendarError):
    """A day number outside the calendar was supplied."""

    def __init__(self, day: Any) -> None:
        super().__init__(f"Invalid day {day!r}: expected an integer between 1 and {TOTAL_DAYS}")
        self.day = day


class DayLocked(AdventCalendarError):
    """The requested day has not unlocked yet."""

    def __init__(self, day: int) -> None:
        super().__init__(f"Day {day} is still locked")
        self.day = day


class InvalidAvatar(AdventCalendarError):
    """An avatar outside the available set was supplied."""

    def __init__(self, avatar: Any) -> None:
        super().__init__(f"Unknown avatar: {avatar!r}")
        self.avatar = avatar


def is_valid_day(day: Any) -> bool:
    """Return True for integers inside the calendar range."""
    return isinstance(day, int) and not isinstance(day, bool) and 1 <= day <= TOTAL_DAYS


def ensure_valid_day(day: Any) -> int:
    """Return the day unchanged or raise InvalidDay."""
    if not is_valid_day(day):
        raise InvalidDay(day)
    return day
