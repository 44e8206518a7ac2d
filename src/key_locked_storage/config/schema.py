# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Configuration models for building a storage backend.

These Pydantic models validate settings coming from files, environment
or plain dicts before the factory turns them into a storage instance.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from key_locked_storage.stores.sql import DEFAULT_TABLE_NAME


class StorageConfigSchema(BaseModel):
    """Storage backend configuration.

    Attributes:
        type: Backend type ("memory" or "sql")
        url: SQLAlchemy connection URL (for sql type)
        table_name: Name of the backing table (for sql type)
        auto_setup: Create the table on first use when it is missing
    """

    type: str = "memory"
    url: str = ""
    table_name: str = Field(default=DEFAULT_TABLE_NAME, min_length=1, max_length=64)
    auto_setup: bool = True
