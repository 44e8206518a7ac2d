"""InMemoryStorage — zero-config, dict-backed storage for development and testing."""

from __future__ import annotations

from typing import Any, TypeVar

from key_locked_storage._internal.codec import decode, encode
from key_locked_storage.stores.base import KeyLockedStorage, Transaction

R = TypeVar("R")


class InMemoryStorage(KeyLockedStorage):
    """In-memory storage using a plain dict.  Data is lost on process exit.

    Values are kept as encoded JSON so they behave exactly as they would
    in :class:`~key_locked_storage.stores.sql.SQLStorage`: callers never
    share objects with the store, and unserializable values fail on write.

    No locking is performed.  A single instance must not be used from
    several threads at once without external synchronization.
    """

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def _execute(self, key: str, transaction: Transaction[R]) -> R:
        snapshot, result = transaction(self._read(key))

        if snapshot.changed:
            if snapshot.deletes:
                self._data.pop(key, None)
            else:
                self._data[key] = encode(snapshot.value)

        return result

    def _read(self, key: str) -> Any:
        encoded = self._data.get(key)
        return decode(encoded) if encoded is not None else None
