"""Pytest configuration for Advent Calendar tests."""
from __future__ import annotations

from datetime import date
from unittest.mock import AsyncMock, Mock, patch

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
import pytest

from custom_components.advent_calendar.const import CONF_START_DATE, CONF_TITLE, DOMAIN
from custom_components.advent_calendar.exceptions import StorageUnavailable
from custom_components.advent_calendar.models import build_calendar

DEC_1 = date(2025, 12, 1)


class MemoryStore:
    """Dict backed store with switches to simulate an unavailable backend."""

    version = 1
    key = "advent_calendar_progress"

    def __init__(self, data: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(data or {})
        self.fail_reads = False
        self.fail_writes = False
        self.writes: list[tuple[str, str]] = []
        self.loaded = True
        self.async_load = AsyncMock()
        self.async_flush = AsyncMock()

    def get(self, key: str) -> str | None:
        if self.fail_reads:
            raise StorageUnavailable(key, "reads disabled")
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageUnavailable(key, "quota exceeded")
        self.data[key] = value
        self.writes.append((key, value))


@pytest.fixture
def memory_store():
    """Return an empty in-memory store."""
    return MemoryStore()


@pytest.fixture
def calendar_items():
    """Return a calendar unlocking December 1st to 24th 2025."""
    return build_calendar(DEC_1)


@pytest.fixture
def mock_hass():
    """Return a mock Home Assistant instance."""
    hass = Mock(spec=HomeAssistant)
    hass.data = {}
    hass.bus = Mock()
    hass.bus.async_fire = Mock()
    hass.config_entries = Mock()
    hass.services = Mock()

    hass.config_entries.async_forward_entry_setups = AsyncMock(return_value=True)
    hass.config_entries.async_unload_platforms = AsyncMock(return_value=True)
    hass.config_entries.async_reload = AsyncMock(return_value=True)
    hass.services.async_register = Mock()
    hass.services.async_remove = Mock()
    return hass


@pytest.fixture
def mock_config_entry():
    """Return a mock config entry."""
    entry = Mock(spec=ConfigEntry)
    entry.entry_id = "test_entry"
    entry.data = {CONF_TITLE: "Advent Calendar", CONF_START_DATE: "2025-12-01"}
    entry.options = {}
    entry.async_on_unload = Mock()
    entry.add_update_listener = Mock()
    return entry


@pytest.fixture
def coordinator(mock_hass, memory_store, calendar_items):
    """Return a coordinator backed by the in-memory store."""
    from custom_components.advent_calendar.coordinator import AdventCalendarCoordinator

    with patch('custom_components.advent_calendar.coordinator.AdventCalendarStore', return_value=memory_store):
        coord = AdventCalendarCoordinator(mock_hass, calendar_items)
    mock_hass.data.setdefault(DOMAIN, {})["test_entry"] = coord
    return coord
