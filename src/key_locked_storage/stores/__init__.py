"""Storage backends for key-locked values."""

from key_locked_storage.stores.base import MAX_KEY_LENGTH, KeyLockedStorage
from key_locked_storage.stores.memory import InMemoryStorage
from key_locked_storage.stores.sql import DEFAULT_TABLE_NAME, SQLStorage, build_table

__all__ = [
    "DEFAULT_TABLE_NAME",
    "MAX_KEY_LENGTH",
    "InMemoryStorage",
    "KeyLockedStorage",
    "SQLStorage",
    "build_table",
]
