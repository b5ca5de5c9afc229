"""Avatar selection for the Advent Calendar integration."""
from __future__ import annotations

from homeassistant.components.select import SelectEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import AVAILABLE_AVATARS, DOMAIN
from .coordinator import AdventCalendarCoordinator


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry, add_entities: AddEntitiesCallback):
    coordinator: AdventCalendarCoordinator = hass.data[DOMAIN][entry.entry_id]
    add_entities([AdventAvatarSelect(coordinator)], True)


class AdventAvatarSelect(SelectEntity):
    _attr_icon = "mdi:account-star"

    def __init__(self, coord: AdventCalendarCoordinator):
        self._coord = coord
        self._attr_unique_id = f"{DOMAIN}_avatar"
        self._attr_name = "Advent Calendar Avatar"
        self._attr_options = list(AVAILABLE_AVATARS)

    async def async_added_to_hass(self) -> None:
        self._coord.async_register_entity(self)
        self.async_on_remove(lambda: self._coord.async_unregister_entity(self))

    @property
    def current_option(self) -> str | None:
        return self._coord.avatar.get()

    @property
    def extra_state_attributes(self):
        return {"avatar_name": self._coord.avatar.name}

    async def async_select_option(self, option: str) -> None:
        self._coord.select_avatar(option)
        self.async_write_ha_state()

    @property
    def available(self) -> bool:
        return self._coord.store.loaded
