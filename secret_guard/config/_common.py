# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Common configuration constants."""

from pathlib import Path

ENV_PREFIX = "SECRET_GUARD_"
ROOT_DIR = Path(__file__).parent.parent.parent.resolve()
DOT_ENV_PATH = ROOT_DIR / ".env"

# https://paragonie.com/blog/2016/02/how-safely-store-password-in-2016
DEFAULT_COST = 12
# the range bcrypt accepts for its cost factor
MIN_COST = 4
MAX_COST = 31
