"""
Key-Value Storage

Persistent store for the user settings record: one JSON document on disk
mapping keys to string values.
"""

from pathlib import Path
from typing import Optional, Dict, Union
import json
import logging
import os
import tempfile
import threading

from ...domain.ports.key_value_storage import KeyValueStoragePort


logger = logging.getLogger(__name__)


class JsonFileStorage(KeyValueStoragePort):
    """
    Key-value storage kept in a JSON file.

    Writes go to a temporary file that replaces the original, so a crash
    never leaves a half-written document.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self.logger.warning(f"Could not read {self.path}, starting empty: {e}")
            return {}
        if not isinstance(data, dict):
            self.logger.warning(f"{self.path} does not hold a JSON object, starting empty")
            return {}
        return data

    def _save(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".tmp_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._load()
            data[key] = value
            self._save(data)

    def delete(self, key: str) -> None:
        with self._lock:
            data = self._load()
            if data.pop(key, None) is not None:
                self._save(data)


class InMemoryStorage(KeyValueStoragePort):
    """Process-local storage for tests."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


def create_storage(storage_type: str, settings_path: str) -> KeyValueStoragePort:
    if storage_type == "file":
        return JsonFileStorage(settings_path)
    elif storage_type == "memory":
        return InMemoryStorage()
    raise ValueError(f"Unknown storage type: {storage_type}")
