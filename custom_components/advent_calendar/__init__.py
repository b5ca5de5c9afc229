"""The Advent Calendar integration."""
from __future__ import annotations

import asyncio
import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, ServiceCall
from homeassistant.exceptions import ConfigEntryNotReady, HomeAssistantError
import homeassistant.helpers.config_validation as cv
from homeassistant.helpers.typing import ConfigType
from homeassistant.util import dt as dt_util
import voluptuous as vol

from .const import (
    ATTR_AVATAR,
    ATTR_DAY,
    AVAILABLE_AVATARS,
    CONF_START_DATE,
    DOMAIN,
    PLATFORMS,
    SERVICE_COMPLETE_DAY,
    SERVICE_OPEN_DAY,
    SERVICE_SELECT_AVATAR,
    TOTAL_DAYS,
)
from .coordinator import AdventCalendarCoordinator
from .exceptions import AdventCalendarError
from .models import build_calendar

_LOGGER = logging.getLogger(__name__)

DAY_SCHEMA = vol.Schema({
    vol.Required(ATTR_DAY): vol.All(vol.Coerce(int), vol.Range(min=1, max=TOTAL_DAYS)),
})

SELECT_AVATAR_SCHEMA = vol.Schema({
    vol.Required(ATTR_AVATAR): vol.All(cv.string, vol.In(list(AVAILABLE_AVATARS))),
})


async def async_setup(hass: HomeAssistant, config: ConfigType) -> bool:
    """Set up the Advent Calendar component."""
    return True


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up Advent Calendar from a config entry."""
    start_value = entry.options.get(CONF_START_DATE, entry.data.get(CONF_START_DATE))
    try:
        start_date = dt_util.parse_date(str(start_value))
    except ValueError:
        start_date = None
    if start_date is None:
        _LOGGER.error("Invalid advent calendar start date: %s", start_value)
        return False

    try:
        coordinator = AdventCalendarCoordinator(hass, build_calendar(start_date))
        await coordinator.async_init()
    except (asyncio.TimeoutError, OSError) as ex:
        raise ConfigEntryNotReady(f"Failed to load advent calendar progress: {ex}") from ex
    except Exception as ex:
        _LOGGER.exception("Unexpected error setting up Advent Calendar")
        raise ConfigEntryNotReady(f"Setup failed: {ex}") from ex

    hass.data.setdefault(DOMAIN, {})[entry.entry_id] = coordinator

    try:
        await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    except Exception as ex:
        _LOGGER.exception("Failed to set up platforms")
        raise ConfigEntryNotReady(f"Failed to set up platforms: {ex}") from ex

    entry.async_on_unload(entry.add_update_listener(_async_update_listener))

    # ---- Services ----
    async def _open_day(call: ServiceCall) -> None:
        """Open day service handler."""
        try:
            day = int(call.data[ATTR_DAY])
            if coordinator.open_day(day):
                _LOGGER.info("Opened day %d", day)
            else:
                _LOGGER.debug("Day %d was already opened", day)
        except KeyError as ex:
            _LOGGER.error("Missing required parameter in open_day service: %s", ex)
            raise HomeAssistantError(f"Missing required parameter: {ex}") from ex
        except AdventCalendarError as ex:
            _LOGGER.error("open_day rejected: %s", ex)
            raise
        except (ValueError, TypeError) as ex:
            _LOGGER.error("Invalid parameter value in open_day service: %s", ex)
            raise HomeAssistantError(f"Invalid parameter: {ex}") from ex
        except Exception as ex:
            _LOGGER.exception("Unexpected error in open_day service")
            raise HomeAssistantError(f"Service failed: {ex}") from ex

    async def _complete_day(call: ServiceCall) -> None:
        """Complete day service handler."""
        try:
            day = int(call.data[ATTR_DAY])
            result = coordinator.complete_day(day)
            if result is None:
                _LOGGER.info("Day %d was already completed, nothing to award", day)
            elif result.new_streak is None or result.badge is None:
                raise HomeAssistantError(f"Day {day} completed but progress could not be fully saved")
            else:
                _LOGGER.info("Completed day %d, streak is now %d", day, result.new_streak)
        except KeyError as ex:
            _LOGGER.error("Missing required parameter in complete_day service: %s", ex)
            raise HomeAssistantError(f"Missing required parameter: {ex}") from ex
        except HomeAssistantError as ex:
            _LOGGER.error("complete_day failed: %s", ex)
            raise
        except (ValueError, TypeError) as ex:
            _LOGGER.error("Invalid parameter value in complete_day service: %s", ex)
            raise HomeAssistantError(f"Invalid parameter: {ex}") from ex
        except Exception as ex:
            _LOGGER.exception("Unexpected error in complete_day service")
            raise HomeAssistantError(f"Service failed: {ex}") from ex

    async def _select_avatar(call: ServiceCall) -> None:
        """Select avatar service handler."""
        try:
            coordinator.select_avatar(call.data[ATTR_AVATAR])
        except KeyError as ex:
            _LOGGER.error("Missing required parameter in select_avatar service: %s", ex)
            raise HomeAssistantError(f"Missing required parameter: {ex}") from ex
        except AdventCalendarError as ex:
            _LOGGER.error("select_avatar rejected: %s", ex)
            raise
        except Exception as ex:
            _LOGGER.exception("Unexpected error in select_avatar service")
            raise HomeAssistantError(f"Service failed: {ex}") from ex

    hass.services.async_register(DOMAIN, SERVICE_OPEN_DAY, _open_day, schema=DAY_SCHEMA)
    hass.services.async_register(DOMAIN, SERVICE_COMPLETE_DAY, _complete_day, schema=DAY_SCHEMA)
    hass.services.async_register(DOMAIN, SERVICE_SELECT_AVATAR, _select_avatar, schema=SELECT_AVATAR_SCHEMA)

    return True


async def _async_update_listener(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Rebuild the calendar when the start date changes."""
    await hass.config_entries.async_reload(entry.entry_id)


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if unload_ok:
        coordinator: AdventCalendarCoordinator | None = hass.data[DOMAIN].pop(entry.entry_id, None)
        if coordinator is not None:
            await coordinator.async_shutdown()
        # Unregister services if this is the last instance
        if not hass.data[DOMAIN]:
            hass.services.async_remove(DOMAIN, SERVICE_OPEN_DAY)
            hass.services.async_remove(DOMAIN, SERVICE_COMPLETE_DAY)
            hass.services.async_remove(DOMAIN, SERVICE_SELECT_AVATAR)
    return unload_ok
