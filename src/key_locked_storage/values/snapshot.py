"""Snapshot — the persistence decision derived from a handle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Snapshot:
    """Immutable outcome of one processor invocation.

    Attributes:
        changed: ``True`` when the backend must write (or delete) the key.
        remove:  ``True`` when the key should be deleted.
        value:   Value to persist when not removing.  ``None`` also deletes.
    """

    changed: bool
    remove: bool = False
    value: Any = None

    # ── Factory helpers ──────────────────────────────────────

    @staticmethod
    def replace(value: Any) -> Snapshot:
        """Unconditionally persist *value* (``None`` deletes the key)."""
        return Snapshot(changed=True, remove=value is None, value=value)

    @staticmethod
    def delete() -> Snapshot:
        return Snapshot(changed=True, remove=True)

    @property
    def deletes(self) -> bool:
        """Whether persisting this snapshot removes the key."""
        return self.remove or self.value is None
