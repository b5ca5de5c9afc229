"""Diagnostics support for the Advent Calendar integration."""
from __future__ import annotations

from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from .const import CONF_START_DATE, DOMAIN
from .coordinator import AdventCalendarCoordinator


async def async_get_config_entry_diagnostics(
    hass: HomeAssistant, entry: ConfigEntry
) -> dict[str, Any]:
    """Return diagnostics for a config entry."""
    coordinator: AdventCalendarCoordinator = hass.data[DOMAIN][entry.entry_id]

    if not coordinator.store.loaded:
        return {"error": "Progress storage not loaded"}

    items = list(coordinator.items.values())
    return {
        "integration_version": "1.0.0",
        "config_data": {
            "start_date": entry.options.get(CONF_START_DATE, entry.data.get(CONF_START_DATE)),
            "calendar_days": len(items),
            "first_unlock": items[0].unlock_date.isoformat() if items else None,
            "last_unlock": items[-1].unlock_date.isoformat() if items else None,
        },
        "summary": coordinator.summary(),
        "opened_days": coordinator.opened.days,
        "completed_days": coordinator.completed.days,
        "badges": [badge.as_dict() for badge in coordinator.badges.all_badges],
        "day_states": coordinator.day_states(),
        "entity_registry": {
            "registered_entities_count": len(coordinator._entities),
        },
        "storage_status": {
            "loaded": coordinator.store.loaded,
            "storage_version": coordinator.store.version,
            "storage_key": coordinator.store.key,
        },
    }
