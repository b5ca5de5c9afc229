"""The user's chosen avatar."""
from __future__ import annotations

import logging

from .const import AVAILABLE_AVATARS, DEFAULT_AVATAR, KEY_AVATAR
from .exceptions import InvalidAvatar
from .storage import JsonRecord, PersistentStore

_LOGGER = logging.getLogger(__name__)


class AvatarPreference:
    def __init__(self, store: PersistentStore, key: str = KEY_AVATAR, default: str = DEFAULT_AVATAR) -> None:
        if default not in AVAILABLE_AVATARS:
            raise InvalidAvatar(default)
        self._record = JsonRecord(store, key)
        self._default = default

    def get(self) -> str:
        """Return the stored avatar, falling back to the default for unknown values."""
        avatar = self._record.read()
        if isinstance(avatar, str) and avatar in AVAILABLE_AVATARS:
            return avatar
        if avatar is not None:
            _LOGGER.warning("Ignoring unknown stored avatar %r", avatar)
        return self._default

    def set(self, avatar: str) -> None:
        if not isinstance(avatar, str) or avatar not in AVAILABLE_AVATARS:
            raise InvalidAvatar(avatar)
        self._record.write(avatar)
        _LOGGER.info("Avatar changed to %s (%s)", avatar, AVAILABLE_AVATARS[avatar])

    @property
    def name(self) -> str:
        return AVAILABLE_AVATARS[self.get()]
