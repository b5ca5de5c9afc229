"""Badge ledger: one achievement per completed day."""
from __future__ import annotations

from collections.abc import Sequence
import logging

from homeassistant.util import dt as dt_util

from .const import BADGE_EMOJIS, KEY_BADGES
from .exceptions import ensure_valid_day
from .models import BadgeRecord
from .storage import JsonRecord, PersistentStore

_LOGGER = logging.getLogger(__name__)


def badge_emoji(day: int, palette: Sequence[str] = BADGE_EMOJIS) -> str:
    """Pick the badge emoji for a day, wrapping around shorter palettes."""
    return palette[(ensure_valid_day(day) - 1) % len(palette)]


def badge_title(day: int) -> str:
    return f"Day {day} Complete!"


class BadgeLedger:
    """Append-only badge records keyed by day."""

    def __init__(self, store: PersistentStore, key: str = KEY_BADGES) -> None:
        self._record = JsonRecord(store, key)

    def _read(self, strict: bool = False) -> dict[int, BadgeRecord]:
        payload = self._record.read(strict)
        if payload is None:
            return {}
        if not isinstance(payload, list):
            _LOGGER.warning("Expected a list of badges under %s, got %s", self._record.key, type(payload).__name__)
            return {}
        records: dict[int, BadgeRecord] = {}
        for entry in payload:
            record = BadgeRecord.from_dict(entry)
            if record is None:
                _LOGGER.debug("Skipping malformed badge entry: %s", entry)
                continue
            # The earliest record for a day is the one that counts
            records.setdefault(record.day, record)
        return records

    def award(self, day: int, title: str, emoji: str) -> BadgeRecord:
        """Award the badge for day, or return the existing one untouched."""
        ensure_valid_day(day)
        records = self._read(strict=True)
        if day in records:
            return records[day]
        record = BadgeRecord(day=day, title=title, emoji=emoji, earned_at=dt_util.utcnow().timestamp())
        records[day] = record
        self._record.write([records[d].as_dict() for d in sorted(records)])
        _LOGGER.info("Badge earned for day %d: %s %s", day, emoji, title)
        return record

    def has_badge(self, day: int) -> bool:
        return ensure_valid_day(day) in self._read()

    def get_badge(self, day: int) -> BadgeRecord | None:
        return self._read().get(ensure_valid_day(day))

    @property
    def all_badges(self) -> list[BadgeRecord]:
        records = self._read()
        return [records[day] for day in sorted(records)]

    @property
    def total_badges(self) -> int:
        return len(self._read())
