"""Storage utilities for the Advent Calendar integration."""
from __future__ import annotations

import logging
from typing import Any, Protocol

from homeassistant.core import HomeAssistant
from homeassistant.helpers.json import json_dumps
from homeassistant.helpers.storage import Store
from homeassistant.util.json import json_loads

from .const import SAVE_DELAY, STORAGE_KEY, STORAGE_VERSION
from .exceptions import StorageUnavailable

_LOGGER = logging.getLogger(__name__)


class PersistentStore(Protocol):
    """Synchronous key/value string store shared by the progress records."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class AdventCalendarStore:
    """Synchronous view over a Home Assistant Store.

    The backing file is read once by async_load. Afterwards reads and writes hit
    the in-memory mapping and writes are flushed to disk with a short delay.
    """

    def __init__(self, hass: HomeAssistant):
        self._store: Store[dict[str, str]] = Store(hass, STORAGE_VERSION, STORAGE_KEY)
        self._data: dict[str, str] | None = None

    @property
    def loaded(self) -> bool:
        return self._data is not None

    @property
    def version(self) -> int:
        return self._store.version

    @property
    def key(self) -> str:
        return self._store.key

    async def async_load(self) -> None:
        data = await self._store.async_load() or {}
        if not isinstance(data, dict):
            _LOGGER.warning("Ignoring malformed advent calendar storage of type %s", type(data).__name__)
            data = {}
        self._data = dict(data)

    def get(self, key: str) -> str | None:
        if self._data is None:
            raise StorageUnavailable(key, "storage not loaded")
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self._data is None:
            raise StorageUnavailable(key, "storage not loaded")
        self._data[key] = value
        self._store.async_delay_save(self._data_to_save, SAVE_DELAY)

    async def async_flush(self) -> None:
        """Write pending changes immediately."""
        if self._data is None:
            return
        await self._store.async_save(self._data_to_save())

    def _data_to_save(self) -> dict[str, str]:
        return dict(self._data or {})


class JsonRecord:
    """A single JSON encoded value stored under one key."""

    def __init__(self, store: PersistentStore, key: str) -> None:
        self._store = store
        self.key = key
        self._last: Any = None

    def read(self, strict: bool = False) -> Any:
        """
        Return the decoded payload.

        Absent and malformed values read as None. When the store itself fails, the
        last payload that was read or written successfully is returned instead,
        unless strict is set, in which case StorageUnavailable propagates. Reads
        that feed a write must be strict so a stale value is never written back.
        """
        try:
            raw = self._store.get(self.key)
        except StorageUnavailable as err:
            if strict:
                raise
            _LOGGER.warning("Could not read %s, using last known value: %s", self.key, err)
            return self._last
        if raw is None:
            payload = None
        else:
            try:
                payload = json_loads(raw)
            except (ValueError, TypeError):
                _LOGGER.warning("Discarding malformed value stored under %s", self.key)
                payload = None
        self._last = payload
        return payload

    def write(self, payload: Any) -> None:
        """Encode and store payload. Raises StorageUnavailable if the store refuses it."""
        self._store.set(self.key, json_dumps(payload))
        self._last = payload
