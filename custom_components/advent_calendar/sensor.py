"""Sensor entities for the Advent Calendar integration."""
from __future__ import annotations

from homeassistant.components.sensor import SensorEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN, TILE_LOCKED, TOTAL_DAYS
from .coordinator import AdventCalendarCoordinator
from .progress import completion_percentage, next_stage, progress_title, workshop_stage
from .unlock import is_today


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry, add_entities: AddEntitiesCallback):
    coordinator: AdventCalendarCoordinator = hass.data[DOMAIN][entry.entry_id]

    entities = [
        AdventCompletedDaysSensor(coordinator),
        AdventBadgesSensor(coordinator),
        AdventCurrentStreakSensor(coordinator),
        AdventLongestStreakSensor(coordinator),
        AdventWorkshopSensor(coordinator),
        AdventCalendarDaysSensor(coordinator),
    ]
    add_entities(entities, True)


class AdventCalendarSensor(SensorEntity):
    """Base for sensors refreshed by the coordinator after progress changes."""

    def __init__(self, coord: AdventCalendarCoordinator, key: str, name: str):
        self._coord = coord
        self._attr_unique_id = f"{DOMAIN}_{key}"
        self._attr_name = f"Advent Calendar {name}"

    async def async_added_to_hass(self) -> None:
        self._coord.async_register_entity(self)
        self.async_on_remove(lambda: self._coord.async_unregister_entity(self))

    @property
    def available(self) -> bool:
        """Check if progress storage is loaded."""
        return self._coord.store.loaded


class AdventCompletedDaysSensor(AdventCalendarSensor):
    _attr_icon = "mdi:calendar-check"
    _attr_native_unit_of_measurement = "days"

    def __init__(self, coord: AdventCalendarCoordinator):
        super().__init__(coord, "completed_days", "Completed Days")

    @property
    def native_value(self):
        return self._coord.completed.completed_count

    @property
    def extra_state_attributes(self):
        completed = self._coord.completed.days
        title = progress_title(len(completed))
        return {
            "completed_days": completed,
            "opened_days": self._coord.opened.days,
            "total_days": TOTAL_DAYS,
            "percentage": completion_percentage(len(completed)),
            "progress_title": title.title,
            "progress_emoji": title.emoji,
            "progress_description": title.description,
        }


class AdventBadgesSensor(AdventCalendarSensor):
    _attr_icon = "mdi:trophy"

    def __init__(self, coord: AdventCalendarCoordinator):
        super().__init__(coord, "badges", "Badges")

    @property
    def native_value(self):
        return self._coord.badges.total_badges

    @property
    def extra_state_attributes(self):
        return {
            "badges": [badge.as_dict() for badge in self._coord.badges.all_badges],
            "avatar": self._coord.avatar.get(),
        }


class AdventCurrentStreakSensor(AdventCalendarSensor):
    _attr_icon = "mdi:fire"
    _attr_native_unit_of_measurement = "days"

    def __init__(self, coord: AdventCalendarCoordinator):
        super().__init__(coord, "current_streak", "Current Streak")

    @property
    def native_value(self):
        return self._coord.streak.current_streak

    @property
    def extra_state_attributes(self):
        state = self._coord.streak.state
        return {
            "longest_streak": state.longest_streak,
            "last_completed_unlock_date": state.last_completed_unlock_date,
        }


class AdventLongestStreakSensor(AdventCalendarSensor):
    _attr_icon = "mdi:fire-circle"
    _attr_native_unit_of_measurement = "days"

    def __init__(self, coord: AdventCalendarCoordinator):
        super().__init__(coord, "longest_streak", "Longest Streak")

    @property
    def native_value(self):
        return self._coord.streak.longest_streak


class AdventWorkshopSensor(AdventCalendarSensor):
    """Santa's workshop stage reached with the completed days."""
    _attr_icon = "mdi:home-group"

    def __init__(self, coord: AdventCalendarCoordinator):
        super().__init__(coord, "workshop_stage", "Workshop Stage")

    @property
    def native_value(self):
        return workshop_stage(self._coord.completed.completed_count).name

    @property
    def extra_state_attributes(self):
        completed = self._coord.completed.completed_count
        stage = workshop_stage(completed)
        upcoming = next_stage(completed)
        return {
            "stage_id": stage.id,
            "emoji": stage.emoji,
            "description": stage.description,
            "next_stage": upcoming.name if upcoming else None,
            "days_to_next_stage": upcoming.min_days - completed if upcoming else 0,
        }


class AdventCalendarDaysSensor(AdventCalendarSensor):
    """Number of unlocked days, with the display state of every day as attributes."""
    _attr_icon = "mdi:calendar-star"

    def __init__(self, coord: AdventCalendarCoordinator):
        super().__init__(coord, "unlocked_days", "Unlocked Days")

    @property
    def native_value(self):
        states = self._coord.day_states()
        return sum(1 for state in states.values() if state != TILE_LOCKED)

    @property
    def extra_state_attributes(self):
        today = self._coord.today()
        return {
            "today": today.isoformat(),
            "todays_day": next(
                (day for day, item in self._coord.items.items() if is_today(item.unlock_date, today)), None
            ),
            "days": {
                str(day): {
                    "state": state,
                    "unlock_date": self._coord.items[day].unlock_date.isoformat(),
                }
                for day, state in self._coord.day_states(today).items()
            },
        }
