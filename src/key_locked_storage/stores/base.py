"""KeyLockedStorage — the contract every backend satisfies."""

from __future__ import annotations

import builtins
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, TypeVar

from key_locked_storage.exceptions import InvalidKeyError
from key_locked_storage.values import LockedList, LockedValue, Snapshot

R = TypeVar("R")
V = TypeVar("V")

MAX_KEY_LENGTH = 120

Transaction = Callable[[Any], tuple[Snapshot, R]]


def check_key(key: str) -> None:
    """Reject keys the backing table cannot hold.  Length is counted in UTF-8 bytes."""
    try:
        length = len(key.encode("utf-8"))
    except UnicodeEncodeError as exc:
        raise InvalidKeyError(key, "Key must be valid UTF-8") from exc
    if length == 0:
        raise InvalidKeyError(key, "Key must not be empty")
    if length > MAX_KEY_LENGTH:
        raise InvalidKeyError(
            key,
            f"Key length {length} exceeds maximum length of {MAX_KEY_LENGTH} bytes",
        )


def _drop_if_empty(items: LockedList[Any]) -> None:
    if not len(items):
        items.remove()


class KeyLockedStorage(ABC):
    """Abstract base for all storage backends.

    Every mutating entry point is a read-modify-write transaction on one
    key: the backend locks the key, loads its value, hands it to the
    caller's function and persists the outcome before releasing the lock.
    Callers of the same key are serialized; different keys are independent.
    An exception raised by the caller's function rolls the transaction back
    and propagates unchanged.

    Subclasses implement two primitives:

    * :meth:`_execute`: run a transaction under the key lock.
    * :meth:`_read`: read the current value without locking.
    """

    @abstractmethod
    def _execute(self, key: str, transaction: Transaction[R]) -> R:
        """Lock *key*, call ``transaction(current)`` and persist its snapshot.

        ``current`` is the decoded stored value, or ``None`` if the key is
        absent.  The transaction returns ``(snapshot, result)``; the backend
        writes or deletes according to the snapshot and returns ``result``.
        """
        ...

    @abstractmethod
    def _read(self, key: str) -> Any:
        """Return the stored value, or ``None`` if not found.  Takes no lock."""
        ...

    def close(self) -> None:
        """Release backend resources.  The default has none to release."""

    # ── transactional entry points ───────────────────────────

    def run(self, key: str, callback: Callable[[Any], V]) -> V:
        """Replace the value of *key* with ``callback(current)``.

        ``current`` is ``None`` for an absent key.  The returned value is
        always persisted; returning ``None`` deletes the key.
        """
        check_key(key)

        def transaction(current: Any) -> tuple[Snapshot, V]:
            result = callback(current)
            return Snapshot.replace(result), result

        return self._execute(key, transaction)

    def value(
        self,
        key: str,
        initializer: Callable[[], Any],
        processor: Callable[[LockedValue[Any]], R],
    ) -> R:
        """Run *processor* on a :class:`LockedValue` holding the value of *key*.

        The handle is seeded with ``initializer()`` when the key is absent.
        The value is persisted only if the handle reports a change.
        """
        check_key(key)

        def transaction(current: Any) -> tuple[Snapshot, R]:
            if current is None:
                handle = LockedValue.from_storage(initializer(), stored=False)
            else:
                handle = LockedValue.from_storage(current)
            result = processor(handle)
            return handle.snapshot(), result

        return self._execute(key, transaction)

    def list(
        self,
        key: str,
        initializer: Callable[[], list[Any]],
        processor: Callable[[LockedList[Any]], R],
    ) -> R:
        """Run *processor* on a :class:`LockedList` holding the list at *key*.

        The handle is seeded with ``initializer()`` when the key is absent;
        a value that is not a non-empty list starts as an empty list.
        """
        check_key(key)

        def transaction(current: Any) -> tuple[Snapshot, R]:
            handle = LockedList.from_storage(initializer() if current is None else current)
            result = processor(handle)
            return handle.snapshot(), result

        return self._execute(key, transaction)

    def get(self, key: str, delete: bool = False) -> Any:
        """Return the value of *key*, or ``None`` if not found.

        With ``delete=True`` the key is read and removed in one locked
        transaction; otherwise no lock is taken.
        """
        check_key(key)
        if not delete:
            return self._read(key)
        return self._execute(key, lambda current: (Snapshot.delete(), current))

    # ── list helpers ─────────────────────────────────────────

    def push(self, key: str, *values: Any) -> builtins.list[Any]:
        """Append *values* to the list at *key* and return the whole list."""

        def processor(items: LockedList[Any]) -> list[Any]:
            items.push(*values)
            _drop_if_empty(items)
            return items.get_values()

        return self.list(key, list, processor)

    def unshift(self, key: str, *values: Any) -> builtins.list[Any]:
        """Prepend *values* to the list at *key* and return the whole list."""

        def processor(items: LockedList[Any]) -> list[Any]:
            items.unshift(*values)
            _drop_if_empty(items)
            return items.get_values()

        return self.list(key, list, processor)

    def pop(self, key: str, count: int = 1) -> builtins.list[Any]:
        """Remove and return up to *count* elements from the end of the list.

        The key is deleted once the list is empty.
        """
        return self._take(key, list, count, from_head=False, refill=False)

    def shift(self, key: str, count: int = 1) -> builtins.list[Any]:
        """Remove and return up to *count* elements from the start of the list."""
        return self._take(key, list, count, from_head=True, refill=False)

    def pop_or_init(
        self,
        key: str,
        initializer: Callable[[], builtins.list[Any]],
        count: int = 1,
    ) -> builtins.list[Any]:
        """Like :meth:`pop`, but an absent or empty list is first seeded from *initializer*."""
        return self._take(key, initializer, count, from_head=False, refill=True)

    def shift_or_init(
        self,
        key: str,
        initializer: Callable[[], builtins.list[Any]],
        count: int = 1,
    ) -> builtins.list[Any]:
        """Like :meth:`shift`, but an absent or empty list is first seeded from *initializer*."""
        return self._take(key, initializer, count, from_head=True, refill=True)

    def _take(
        self,
        key: str,
        initializer: Callable[[], builtins.list[Any]],
        count: int,
        *,
        from_head: bool,
        refill: bool,
    ) -> builtins.list[Any]:
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")

        def processor(items: LockedList[Any]) -> list[Any]:
            if refill and not len(items):
                items.set(LockedList.from_storage(initializer()).get_values())
            taken = items.shift(count) if from_head else items.pop(count)
            _drop_if_empty(items)
            return taken

        return self.list(key, list, processor)
