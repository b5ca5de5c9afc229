"""Gating rules deciding which calendar days can be opened.

All comparisons are made on calendar dates in the caller's local time zone.
No UTC normalization is applied: a day unlocks at local midnight of whatever
zone produced ``today``.
"""
from __future__ import annotations

from datetime import date, datetime

from .const import PREVIEW_DAY, TILE_LOCKED, TILE_OPENED, TILE_TODAY
from .exceptions import ensure_valid_day


def as_date(value: date | datetime) -> date:
    """Strip the time of day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def is_unlocked(day: int, unlock_date: date | datetime, today: date | datetime) -> bool:
    """Return True when the day can be opened. The preview day is always open."""
    if ensure_valid_day(day) == PREVIEW_DAY:
        return True
    return as_date(today) >= as_date(unlock_date)


def is_today(unlock_date: date | datetime, today: date | datetime) -> bool:
    return as_date(unlock_date) == as_date(today)


def tile_state(
    day: int,
    unlock_date: date | datetime,
    today: date | datetime,
    completed: bool,
) -> str:
    """
    Classify a day for display.

    Locked wins over everything, then completed days show as opened. Every other
    unlocked day shows as today, whether it unlocks today or is a past day still
    waiting to be finished.
    """
    if not is_unlocked(day, unlock_date, today):
        return TILE_LOCKED
    if completed:
        return TILE_OPENED
    return TILE_TODAY
