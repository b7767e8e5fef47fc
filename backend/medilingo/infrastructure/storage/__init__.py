"""
Storage Adapters

Implementations of KeyValueStoragePort.
"""

from .file_storage import JsonFileStorage, InMemoryStorage, create_storage

__all__ = ["JsonFileStorage", "InMemoryStorage", "create_storage"]
