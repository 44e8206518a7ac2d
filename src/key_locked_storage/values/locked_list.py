"""LockedList — mutation buffer for an ordered list."""

from __future__ import annotations

import copy
from typing import Any, Generic, TypeVar

from key_locked_storage.values.snapshot import Snapshot

T = TypeVar("T")


def _check_count(count: int) -> None:
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")


class LockedList(Generic[T]):
    """Wraps the current list of a locked key for one processor call.

    Unlike :class:`LockedValue` there is no equality check: every mutating
    call marks the list as changed, even when the result equals the
    original (e.g. popping from an empty list).
    """

    def __init__(self, values: list[T] | None = None) -> None:
        self._original: list[T] = copy.deepcopy(values) if values else []
        self._values: list[T] = list(values) if values else []
        self._changed = False
        self._remove = False

    @property
    def changed(self) -> bool:
        return self._changed

    def __len__(self) -> int:
        return len(self._values)

    def get_values(self) -> list[T]:
        return list(self._values)

    def set(self, values: list[T]) -> None:
        self._changed = True
        self._values = list(values)

    def push(self, *values: T) -> None:
        """Add one or more elements to the end of the list."""
        self._changed = True
        self._values = [*self._values, *values]

    def pop(self, count: int = 1) -> list[T]:
        """Remove and return up to *count* elements from the end of the list."""
        _check_count(count)
        self._changed = True
        split = max(len(self._values) - count, 0)
        popped = self._values[split:]
        self._values = self._values[:split]
        return popped

    def unshift(self, *values: T) -> None:
        """Add one or more elements to the beginning of the list."""
        self._changed = True
        self._values = [*values, *self._values]

    def shift(self, count: int = 1) -> list[T]:
        """Remove and return up to *count* elements from the beginning of the list."""
        _check_count(count)
        self._changed = True
        shifted = self._values[:count]
        self._values = self._values[count:]
        return shifted

    def remove(self) -> None:
        self._changed = True
        self._remove = True

    def rollback(self) -> None:
        self._changed = False
        self._remove = False
        self._values = copy.deepcopy(self._original)

    def snapshot(self) -> Snapshot:
        return Snapshot(self._changed, self._remove, list(self._values))

    @classmethod
    def from_storage(cls, value: Any) -> LockedList[Any]:
        """Build a handle; anything but a non-empty list or tuple starts empty."""
        if isinstance(value, (list, tuple)) and value:
            return cls(list(value))
        return cls()
