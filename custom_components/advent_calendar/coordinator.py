"""Data coordinator for the Advent Calendar integration."""
from __future__ import annotations

from collections.abc import Iterable
from datetime import date
import logging
from typing import Any

from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.entity import Entity
from homeassistant.util import dt as dt_util

from .avatar import AvatarPreference
from .badges import BadgeLedger, badge_emoji, badge_title
from .const import EVENT_DAY_COMPLETED, TOTAL_DAYS
from .exceptions import DayLocked, InvalidDay, StorageUnavailable, ensure_valid_day
from .ledger import CompletedLedger, OpenedLedger
from .models import BadgeRecord, CalendarItem, CompletionResult, validate_calendar
from .progress import completion_percentage, milestone_description, progress_title, streak_message, workshop_stage
from .storage import AdventCalendarStore
from .streak import StreakTracker
from .unlock import is_unlocked, tile_state

_LOGGER = logging.getLogger(__name__)


class AdventCalendarCoordinator:
    """Owns the progress records of one calendar and sequences updates between them."""

    def __init__(self, hass: HomeAssistant, items: Iterable[CalendarItem]) -> None:
        """Initialize the coordinator."""
        self.hass = hass
        self.items: dict[int, CalendarItem] = {item.day: item for item in validate_calendar(items)}
        self.store = AdventCalendarStore(hass)
        self.opened = OpenedLedger(self.store)
        self.completed = CompletedLedger(self.store)
        self.streak = StreakTracker(self.store)
        self.badges = BadgeLedger(self.store)
        self.avatar = AvatarPreference(self.store)
        self._entities: list[Entity] = []

    async def async_init(self) -> None:
        """Load persisted progress."""
        await self.store.async_load()
        _LOGGER.debug(
            "Advent calendar loaded: %d opened, %d completed",
            self.opened.opened_count, self.completed.completed_count,
        )

    async def async_shutdown(self) -> None:
        """Flush pending writes."""
        await self.store.async_flush()

    # ---- calendar ----
    def today(self) -> date:
        """Current calendar date in Home Assistant's local time zone."""
        return dt_util.now().date()

    def get_item(self, day: int) -> CalendarItem:
        ensure_valid_day(day)
        if day not in self.items:
            raise InvalidDay(day)
        return self.items[day]

    def is_unlocked(self, day: int, today: date | None = None) -> bool:
        item = self.get_item(day)
        return is_unlocked(item.day, item.unlock_date, today or self.today())

    def day_state(self, day: int, today: date | None = None) -> str:
        item = self.get_item(day)
        return tile_state(item.day, item.unlock_date, today or self.today(), self.completed.is_completed(day))

    def day_states(self, today: date | None = None) -> dict[int, str]:
        today = today or self.today()
        completed = set(self.completed.days)
        return {
            day: tile_state(day, item.unlock_date, today, day in completed)
            for day, item in self.items.items()
        }

    # ---- progress ----
    def open_day(self, day: int, today: date | None = None) -> bool:
        """Mark an unlocked day as opened. Returns True the first time."""
        if not self.is_unlocked(day, today):
            raise DayLocked(day)
        opened = self.opened.mark_opened(day)
        if opened:
            self._update_entities()
        return opened

    def complete_day(self, day: int, today: date | None = None) -> CompletionResult | None:
        """
        Record that the interactive check of a day was finished.

        The streak is only updated on the first completion; None is returned when the
        day had already been completed. A failure to persist the streak or the badge
        does not stop the other step and shows up as None in the result. A badge that
        failed to save is awarded on the next completion of the same day.
        """
        item = self.get_item(day)
        if not self.is_unlocked(day, today):
            raise DayLocked(day)

        self.opened.mark_opened(day)
        if not self.completed.mark_completed(day):
            _LOGGER.debug("Day %d was already completed", day)
            if not self.badges.has_badge(day):
                self.badges.award(day, badge_title(day), badge_emoji(day))
                self._update_entities()
            return None

        new_streak: int | None = None
        try:
            new_streak = self.streak.update(item.unlock_date).new_streak
        except StorageUnavailable as err:
            _LOGGER.error("Streak for day %d was not saved: %s", day, err)

        badge: BadgeRecord | None = None
        try:
            badge = self.badges.award(day, badge_title(day), badge_emoji(day))
        except StorageUnavailable as err:
            _LOGGER.error("Badge for day %d was not saved: %s", day, err)

        _LOGGER.info("Day %d completed (streak: %s)", day, new_streak)
        self.hass.bus.async_fire(
            EVENT_DAY_COMPLETED,
            {
                "day": day,
                "title": item.title,
                "new_streak": new_streak,
                "badge_emoji": badge.emoji if badge else None,
                "badge_title": badge.title if badge else None,
                "message": streak_message(new_streak),
                "milestone": milestone_description(day),
            },
        )
        self._update_entities()
        return CompletionResult(day=day, new_streak=new_streak, badge=badge)

    def select_avatar(self, avatar: str) -> None:
        self.avatar.set(avatar)
        self._update_entities()

    def summary(self) -> dict[str, Any]:
        """Progress numbers for sensors and diagnostics."""
        completed = self.completed.completed_count
        streak = self.streak.state
        title = progress_title(completed)
        stage = workshop_stage(completed)
        return {
            "opened_count": self.opened.opened_count,
            "completed_count": completed,
            "total_days": TOTAL_DAYS,
            "percentage": completion_percentage(completed),
            "total_badges": self.badges.total_badges,
            "current_streak": streak.current_streak,
            "longest_streak": streak.longest_streak,
            "last_completed_unlock_date": streak.last_completed_unlock_date,
            "progress_title": title.title,
            "progress_emoji": title.emoji,
            "workshop_stage": stage.name,
            "avatar": self.avatar.get(),
        }

    # ---- entities ----
    @callback
    def async_register_entity(self, entity: Entity) -> None:
        if entity not in self._entities:
            self._entities.append(entity)

    @callback
    def async_unregister_entity(self, entity: Entity) -> None:
        if entity in self._entities:
            self._entities.remove(entity)

    @callback
    def _update_entities(self) -> None:
        """Push fresh state to every entity that has been added to Home Assistant."""
        for entity in self._entities:
            if entity.hass is None:
                continue
            try:
                entity.async_write_ha_state()
            except Exception as ex:
                _LOGGER.warning("Failed to update entity %s: %s", entity.entity_id, ex)
