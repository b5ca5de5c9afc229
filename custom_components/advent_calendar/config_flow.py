"""Config flow for the Advent Calendar integration."""
from __future__ import annotations

from typing import Any

from homeassistant import config_entries
from homeassistant.core import callback
from homeassistant.util import dt as dt_util
import voluptuous as vol

from .const import CONF_START_DATE, CONF_TITLE, DEFAULT_TITLE, DOMAIN


def default_start_date() -> str:
    """December 1st of the current year."""
    return f"{dt_util.now().year}-12-01"


def _valid_date(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        return dt_util.parse_date(value.strip()) is not None
    except ValueError:
        return False


class AdventCalendarConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    VERSION = 1

    async def async_step_user(self, user_input: dict[str, Any] | None = None):
        # Progress is stored once per installation
        if self._async_current_entries():
            return self.async_abort(reason="single_instance_allowed")

        errors = {}
        if user_input is not None:
            if _valid_date(user_input.get(CONF_START_DATE)):
                data = {**user_input, CONF_START_DATE: user_input[CONF_START_DATE].strip()}
                return self.async_create_entry(title=data.get(CONF_TITLE, DEFAULT_TITLE), data=data)
            errors[CONF_START_DATE] = "invalid_date"

        data_schema = vol.Schema({
            vol.Required(CONF_TITLE, default=DEFAULT_TITLE): str,
            vol.Required(CONF_START_DATE, default=default_start_date()): str,
        })
        return self.async_show_form(step_id="user", data_schema=data_schema, errors=errors)

    @staticmethod
    @callback
    def async_get_options_flow(config_entry):
        return AdventCalendarOptionsFlow(config_entry)


class AdventCalendarOptionsFlow(config_entries.OptionsFlow):
    def __init__(self, entry):
        self.entry = entry

    async def async_step_init(self, user_input=None):
        errors = {}
        if user_input is not None:
            if _valid_date(user_input.get(CONF_START_DATE)):
                return self.async_create_entry(
                    title="", data={CONF_START_DATE: user_input[CONF_START_DATE].strip()}
                )
            errors[CONF_START_DATE] = "invalid_date"

        current = self.entry.options.get(CONF_START_DATE, self.entry.data.get(CONF_START_DATE, default_start_date()))
        data_schema = vol.Schema({
            vol.Required(CONF_START_DATE, default=current): str,
        })
        return self.async_show_form(step_id="init", data_schema=data_schema, errors=errors)
