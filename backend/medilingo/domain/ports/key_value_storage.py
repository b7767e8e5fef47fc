"""
Key-Value Storage Port

Abstract interface for the persistent store holding user preferences.
"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStoragePort(ABC):
    """Persistent string store addressed by key."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass
