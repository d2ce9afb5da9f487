"""User configuration store.

Hides where configuration lives and how it is serialized. One instance is
constructed at process start with an injected storage backend; the
in-memory copy changes only through save().
"""

import json
import logging

from pydantic import ValidationError

from ..errors import SettingsError, StorageError
from ..storage import KeyValueStore
from .models import DEFAULT_SETTINGS, AppSettings

logger = logging.getLogger(__name__)

SETTINGS_KEY = "agi_settings"


class SettingsStore:
    """Loads and saves AppSettings under a fixed storage key."""

    def __init__(self, storage: KeyValueStore, key: str = SETTINGS_KEY) -> None:
        self._storage = storage
        self._key = key
        self._current = self.load()

    @property
    def current(self) -> AppSettings:
        """Configuration currently in effect."""
        return self._current

    def load(self) -> AppSettings:
        """Read configuration from storage.

        Never raises: a missing record, an unreadable backend, malformed JSON
        or a record that fails validation all yield the defaults, and the
        failure is logged for diagnostics only.
        """
        try:
            raw = self._storage.get(self._key)
        except StorageError as e:
            logger.warning("Failed to read settings, using defaults: %s", e)
            return DEFAULT_SETTINGS

        if raw is None:
            logger.debug("No stored settings under %r, using defaults", self._key)
            return DEFAULT_SETTINGS

        try:
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            return AppSettings.model_validate(data)
        except (ValueError, RecursionError, ValidationError) as e:
            # json.JSONDecodeError is a ValueError; deep nesting raises RecursionError
            logger.warning("Failed to load settings, using defaults: %s", e)
            return DEFAULT_SETTINGS

    def save(self, settings: AppSettings) -> None:
        """Persist settings and make them current.

        Storage is written first; the in-memory copy is replaced only after
        the write succeeded, so on failure neither has changed.

        Raises:
            SettingsError: If the storage backend rejects the write
        """
        payload = settings.model_dump_json()
        try:
            self._storage.set(self._key, payload)
        except StorageError as e:
            raise SettingsError(f"Failed to save settings: {e}") from e
        self._current = settings
        logger.info("Settings saved (model=%s)", settings.model or "provider default")

    def update(self, **changes) -> AppSettings:
        """Validate field changes against the current settings and save them.

        Raises:
            pydantic.ValidationError: If a changed field is invalid
            SettingsError: If the storage backend rejects the write
        """
        data = self._current.model_dump()
        data.update(changes)
        settings = AppSettings.model_validate(data)
        self.save(settings)
        return settings

    def reset(self) -> AppSettings:
        """Save and return the default configuration."""
        self.save(DEFAULT_SETTINGS)
        return DEFAULT_SETTINGS
