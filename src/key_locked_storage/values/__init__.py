"""Mutation-tracking handles passed to processors."""

from key_locked_storage.values.locked_list import LockedList
from key_locked_storage.values.locked_value import LockedValue
from key_locked_storage.values.snapshot import Snapshot

__all__ = ["LockedList", "LockedValue", "Snapshot"]
