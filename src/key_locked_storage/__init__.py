"""key_locked_storage — serialized read-modify-write transactions per key.

Every mutation of a key runs under an exclusive lock on that key: the
current value is loaded, handed to the caller, and written back (or
deleted) only if it changed.  Callers of different keys never wait on
each other.
"""

from key_locked_storage.config import StorageConfigSchema, StorageFactory
from key_locked_storage.exceptions import (
    EncodingError,
    InvalidKeyError,
    KeyLockedStorageError,
    StorageConfigError,
    StoreError,
)
from key_locked_storage.stores import InMemoryStorage, KeyLockedStorage, SQLStorage
from key_locked_storage.values import LockedList, LockedValue, Snapshot

__all__ = [
    "EncodingError",
    "InMemoryStorage",
    "InvalidKeyError",
    "KeyLockedStorage",
    "KeyLockedStorageError",
    "LockedList",
    "LockedValue",
    "SQLStorage",
    "Snapshot",
    "StorageConfigError",
    "StorageConfigSchema",
    "StorageFactory",
    "StoreError",
]
