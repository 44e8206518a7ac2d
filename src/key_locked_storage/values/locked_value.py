"""LockedValue — mutation buffer for a single value."""

from __future__ import annotations

import copy
from typing import Any, Generic, TypeVar

from key_locked_storage._internal.codec import encode
from key_locked_storage.values.snapshot import Snapshot

T = TypeVar("T")


class LockedValue(Generic[T]):
    """Wraps the current value of a locked key for one processor call.

    ``set`` recomputes ``changed`` by comparing the JSON encoding of the new
    value with that of the value loaded from the store, so writing back an
    identical document persists nothing. ``True`` and ``1.0`` are not
    identical to ``1``.
    When the key was absent (the handle was seeded by an initializer) there
    is no stored value to compare against and any ``set`` counts as a change.

    Parameters:
        value:  Stored value, or the initializer's result for a new key.
        stored: ``False`` when *value* came from an initializer.
    """

    def __init__(self, value: T, *, stored: bool = True) -> None:
        self._original: T = copy.deepcopy(value)
        self._value: T = value
        self._stored = stored
        self._encoded = encode(value) if stored else None
        self._changed = False
        self._remove = False

    @property
    def changed(self) -> bool:
        return self._changed

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        self._changed = not self._stored or encode(value) != self._encoded

    def remove(self) -> None:
        """Delete the key when the processor returns."""
        self._changed = True
        self._remove = True

    def rollback(self) -> None:
        """Discard every mutation made during this invocation."""
        self._changed = False
        self._remove = False
        self._value = copy.deepcopy(self._original)

    def snapshot(self) -> Snapshot:
        return Snapshot(self._changed, self._remove, self._value)

    @classmethod
    def from_storage(cls, value: Any, *, stored: bool = True) -> LockedValue[Any]:
        return cls(value, stored=stored)
