"""Custom exceptions for the key_locked_storage package."""

from __future__ import annotations


class KeyLockedStorageError(Exception):
    """Base exception for all storage errors."""


class InvalidKeyError(KeyLockedStorageError, ValueError):
    """Raised before any I/O when a key is empty, too long or not valid UTF-8."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(message)


class StoreError(KeyLockedStorageError):
    """Raised when a store operation fails."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        msg = f"Store error during '{operation}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class EncodingError(StoreError):
    """Raised when a value cannot be encoded, or stored content cannot be decoded."""


class StorageConfigError(KeyLockedStorageError):
    """Raised when a storage backend is misconfigured."""
