# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Configuration module for the secret guard."""

from ._common import DEFAULT_COST, ENV_PREFIX, MAX_COST, MIN_COST, ROOT_DIR
from .field import (
    CustomRehashHandler,
    RehashPolicy,
    RejectRehash,
    SecretFieldConfig,
)
from .settings import Settings
from .settings_manager import SettingsManager

__all__ = [
    "CustomRehashHandler",
    "RehashPolicy",
    "RejectRehash",
    "SecretFieldConfig",
    "Settings",
    "SettingsManager",
    "DEFAULT_COST",
    "ENV_PREFIX",
    "MAX_COST",
    "MIN_COST",
    "ROOT_DIR",
]
