"""
Preference Store

Reads and writes the user settings record in persistent key-value storage.
"""

import json
import logging

from pydantic import ValidationError as SchemaValidationError

from ...domain.entities.user_settings import UserSettings, default_settings
from ...domain.ports.key_value_storage import KeyValueStoragePort


SETTINGS_KEY = "userSettings"


class PreferenceStore:
    """
    Settings service injected into the lookup flow.

    The record is always written whole; there is no partial merge, so
    callers derive the new record from the current one before writing.
    """

    def __init__(self, storage: KeyValueStoragePort, key: str = SETTINGS_KEY):
        self.storage = storage
        self.key = key
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def read(self) -> UserSettings:
        """Return stored settings, or the defaults if none are usable."""
        saved = self.storage.get(self.key)
        if saved is None:
            return default_settings()

        try:
            return UserSettings.model_validate(json.loads(saved))
        except (json.JSONDecodeError, SchemaValidationError) as e:
            self.logger.warning(f"Stored settings under '{self.key}' are unreadable, using defaults: {e}")
            return default_settings()

    def write(self, settings: UserSettings) -> None:
        self.storage.set(self.key, settings.model_dump_json())
        self.logger.debug(f"Saved settings: {settings.model_dump()}")
