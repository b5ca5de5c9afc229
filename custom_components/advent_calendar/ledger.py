"""Durable sets of opened and completed calendar days."""
from __future__ import annotations

import logging

from .const import KEY_COMPLETED, KEY_OPENED
from .exceptions import ensure_valid_day, is_valid_day
from .storage import JsonRecord, PersistentStore

_LOGGER = logging.getLogger(__name__)


class DayLedger:
    """A set of day numbers that only ever grows."""

    def __init__(self, store: PersistentStore, key: str) -> None:
        self._record = JsonRecord(store, key)

    def _read(self, strict: bool = False) -> set[int]:
        payload = self._record.read(strict)
        if payload is None:
            return set()
        if not isinstance(payload, list):
            _LOGGER.warning("Expected a list of days under %s, got %s", self._record.key, type(payload).__name__)
            return set()
        days = {entry for entry in payload if is_valid_day(entry)}
        if len(days) != len(payload):
            _LOGGER.debug("Dropped invalid or duplicate entries under %s", self._record.key)
        return days

    def _mark(self, day: int) -> bool:
        """Add day to the set. Returns True only when it was not there before."""
        ensure_valid_day(day)
        # Re-read so a writer sharing the store is merged, not overwritten
        days = self._read(strict=True)
        if day in days:
            return False
        days.add(day)
        self._record.write(sorted(days))
        return True

    def _contains(self, day: int) -> bool:
        return ensure_valid_day(day) in self._read()

    @property
    def days(self) -> list[int]:
        return sorted(self._read())

    def __len__(self) -> int:
        return len(self._read())


class OpenedLedger(DayLedger):
    """Days the user has viewed at least once."""

    def __init__(self, store: PersistentStore, key: str = KEY_OPENED) -> None:
        super().__init__(store, key)

    def mark_opened(self, day: int) -> bool:
        opened = self._mark(day)
        if opened:
            _LOGGER.debug("Day %d opened for the first time", day)
        return opened

    def is_opened(self, day: int) -> bool:
        return self._contains(day)

    @property
    def opened_count(self) -> int:
        return len(self)


class CompletedLedger(DayLedger):
    """Days whose interactive check the user has finished.

    Completing a day does not mark it opened; callers open a day before completing it.
    """

    def __init__(self, store: PersistentStore, key: str = KEY_COMPLETED) -> None:
        super().__init__(store, key)

    def mark_completed(self, day: int) -> bool:
        completed = self._mark(day)
        if completed:
            _LOGGER.debug("Day %d completed", day)
        return completed

    def is_completed(self, day: int) -> bool:
        return self._contains(day)

    @property
    def completed_count(self) -> int:
        return len(self)
