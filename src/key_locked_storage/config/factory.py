# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Storage factory for creating backends from configuration.

Uses the Registry pattern to map type strings to builder callables,
allowing new backends without modifying factory code.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from pydantic import ValidationError

from key_locked_storage.exceptions import StorageConfigError
from key_locked_storage.stores import InMemoryStorage, KeyLockedStorage, SQLStorage

from .schema import StorageConfigSchema

StorageBuilder = Callable[[StorageConfigSchema], KeyLockedStorage]


def _build_memory(config: StorageConfigSchema) -> KeyLockedStorage:
    return InMemoryStorage()


def _build_sql(config: StorageConfigSchema) -> KeyLockedStorage:
    if not config.url:
        raise StorageConfigError("SQL storage requires 'url' configuration")
    return SQLStorage(config.url, config.table_name, auto_setup=config.auto_setup)


class StorageFactory:
    """Creates storage backends from configuration.

    Example:
        storage = StorageFactory.create({"type": "sql", "url": "sqlite:///state.db"})

        # Custom backends:
        StorageFactory.register("redis", build_redis_storage)
    """

    # Class-level registry mapping type strings to builders
    _registry: ClassVar[dict[str, StorageBuilder]] = {
        "memory": _build_memory,
        "sql": _build_sql,
    }

    @classmethod
    def register(cls, type_name: str, builder: StorageBuilder) -> None:
        """Register a custom storage type.

        Args:
            type_name: Type string to use in configuration
            builder: Callable receiving the validated config and returning a storage
        """
        cls._registry[type_name] = builder

    @classmethod
    def registered_types(cls) -> list[str]:
        """Return list of registered storage type names."""
        return list(cls._registry.keys())

    @classmethod
    def create(cls, config: StorageConfigSchema | Mapping[str, Any]) -> KeyLockedStorage:
        """Create a storage backend.

        Args:
            config: Validated schema, or a plain mapping to validate

        Returns:
            Storage instance

        Raises:
            StorageConfigError: If the config is invalid or the type is unknown
        """
        if not isinstance(config, StorageConfigSchema):
            try:
                config = StorageConfigSchema.model_validate(dict(config))
            except ValidationError as e:
                raise StorageConfigError(f"Invalid storage configuration: {e}") from e

        builder = cls._registry.get(config.type)
        if builder is None:
            available = ", ".join(sorted(cls.registered_types()))
            raise StorageConfigError(
                f"Unknown storage type: '{config.type}'. Available types: {available}"
            )
        return builder(config)
