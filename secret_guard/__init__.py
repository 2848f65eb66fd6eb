# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Store secret fields of ORM records hashed, never in plaintext."""

from ._version import __version__
from .config import (
    DEFAULT_COST,
    CustomRehashHandler,
    RehashPolicy,
    RejectRehash,
    SecretFieldConfig,
    Settings,
    SettingsManager,
)
from .detector import is_hash
from .exceptions import (
    EmptySecretDetected,
    GuardConfigurationError,
    RehashDetected,
    SecretGuardError,
)
from .guard import PersistOptions, Record, SecretFieldGuard
from .hashing import BcryptHasher, Hasher, compare_async, hash_async
from .orm import MappedRecord, get_guard, guarded, save

__all__ = [
    "__version__",
    "DEFAULT_COST",
    "BcryptHasher",
    "CustomRehashHandler",
    "EmptySecretDetected",
    "GuardConfigurationError",
    "Hasher",
    "MappedRecord",
    "PersistOptions",
    "Record",
    "RehashDetected",
    "RehashPolicy",
    "RejectRehash",
    "SecretFieldConfig",
    "SecretFieldGuard",
    "SecretGuardError",
    "Settings",
    "SettingsManager",
    "compare_async",
    "get_guard",
    "guarded",
    "hash_async",
    "is_hash",
    "save",
]
