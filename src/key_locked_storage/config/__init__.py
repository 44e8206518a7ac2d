# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Configuration-driven construction of storage backends.

Exports:
    StorageConfigSchema: Validated backend settings
    StorageFactory: Builds a backend from settings
"""

from .factory import StorageFactory
from .schema import StorageConfigSchema

__all__ = [
    "StorageConfigSchema",
    "StorageFactory",
]
