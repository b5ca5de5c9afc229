"""Consecutive-day streak tracking."""
from __future__ import annotations

from datetime import date, datetime
import logging

from homeassistant.util import dt as dt_util

from .const import KEY_STREAK
from .models import StreakState, StreakUpdate
from .storage import JsonRecord, PersistentStore
from .unlock import as_date

_LOGGER = logging.getLogger(__name__)


class StreakTracker:
    """Derive current and longest streaks from the unlock dates of completed days.

    Streaks follow the calendar's own day boundaries: finishing day 5 late at night
    extends a streak ending on day 4 no matter what the clock says at that moment.
    """

    def __init__(self, store: PersistentStore, key: str = KEY_STREAK) -> None:
        self._record = JsonRecord(store, key)

    @property
    def state(self) -> StreakState:
        return self._load()

    def _load(self, strict: bool = False) -> StreakState:
        payload = self._record.read(strict)
        if payload is None:
            return StreakState()
        if not isinstance(payload, dict):
            _LOGGER.warning("Expected a streak record under %s, got %s", self._record.key, type(payload).__name__)
            return StreakState()
        current = _counter(payload.get("current_streak"))
        longest = max(_counter(payload.get("longest_streak")), current)
        last = payload.get("last_completed_unlock_date")
        if _parse_date(last) is None:
            last = None
        return StreakState(current_streak=current, longest_streak=longest, last_completed_unlock_date=last)

    @property
    def current_streak(self) -> int:
        return self.state.current_streak

    @property
    def longest_streak(self) -> int:
        return self.state.longest_streak

    @property
    def last_completed_unlock_date(self) -> date | None:
        return _parse_date(self.state.last_completed_unlock_date)

    def update(self, unlock_date: date | datetime) -> StreakUpdate:
        """Record the first completion of the day unlocking on unlock_date."""
        unlock_date = as_date(unlock_date)
        state = self._load(strict=True)
        previous = _parse_date(state.last_completed_unlock_date)

        if previous is None:
            # First completion
            state.current_streak = 1
        else:
            days_diff = (unlock_date - previous).days
            if days_diff == 1:
                state.current_streak += 1
            elif days_diff == 0:
                # Same calendar date - keep the streak as is
                pass
            else:
                # Gap or out of order completion - restart
                state.current_streak = 1

        state.longest_streak = max(state.longest_streak, state.current_streak)
        state.last_completed_unlock_date = unlock_date.isoformat()
        self._record.write(vars(state))

        _LOGGER.debug(
            "Streak updated for %s: current %d, longest %d",
            unlock_date, state.current_streak, state.longest_streak,
        )
        return StreakUpdate(new_streak=state.current_streak)


def _counter(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(0, value)


def _parse_date(value: object) -> date | None:
    if not isinstance(value, str):
        return None
    try:
        return dt_util.parse_date(value)
    except ValueError:
        return None
