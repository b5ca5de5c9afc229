"""Data models for the Advent Calendar integration."""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any

from .const import TOTAL_DAYS
from .exceptions import is_valid_day


@dataclass(frozen=True)
class CalendarItem:
    """One numbered door of the calendar and the date it unlocks."""
    day: int
    unlock_date: date
    title: str = ""


@dataclass
class BadgeRecord:
    day: int
    title: str
    emoji: str
    earned_at: float  # timestamp of the first award

    def as_dict(self) -> dict[str, Any]:
        return vars(self).copy()

    @classmethod
    def from_dict(cls, data: Any) -> BadgeRecord | None:
        """Build a record from stored data, None when the entry is malformed."""
        if not isinstance(data, dict):
            return None
        try:
            record = cls(**data)
        except TypeError:
            return None
        if not is_valid_day(record.day):
            return None
        if not isinstance(record.title, str) or not isinstance(record.emoji, str):
            return None
        if isinstance(record.earned_at, bool) or not isinstance(record.earned_at, (int, float)):
            return None
        return record


@dataclass
class StreakState:
    current_streak: int = 0
    longest_streak: int = 0
    last_completed_unlock_date: str | None = None  # YYYY-MM-DD format


@dataclass(frozen=True)
class StreakUpdate:
    new_streak: int


@dataclass(frozen=True)
class CompletionResult:
    """Outcome of the first completion of a day.

    ``new_streak`` and ``badge`` are None when that step could not be persisted.
    """
    day: int
    new_streak: int | None
    badge: BadgeRecord | None


def build_calendar(start_date: date, total_days: int = TOTAL_DAYS) -> list[CalendarItem]:
    """Return calendar items unlocking on consecutive days from start_date."""
    return [
        CalendarItem(day=offset + 1, unlock_date=start_date + timedelta(days=offset), title=f"Day {offset + 1}")
        for offset in range(total_days)
    ]


def validate_calendar(items: Iterable[CalendarItem]) -> list[CalendarItem]:
    """Check days are unique and in range and unlock dates strictly increase with day."""
    ordered = sorted(items, key=lambda item: item.day)
    seen: set[int] = set()
    for item in ordered:
        if not is_valid_day(item.day):
            raise ValueError(f"Calendar day out of range: {item.day!r}")
        if item.day in seen:
            raise ValueError(f"Duplicate calendar day: {item.day}")
        seen.add(item.day)
    for previous, current in zip(ordered, ordered[1:]):
        if current.unlock_date <= previous.unlock_date:
            raise ValueError(
                f"Unlock date of day {current.day} must be after day {previous.day}"
            )
    return ordered
