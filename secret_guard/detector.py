# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Detect values that are already bcrypt hashes.

A bcrypt hash in modular crypt format looks like::

    $2b$12$R9h/cIPz0gi.URNNX3kh2OPST9/PgBkqquzi.Ss7KIUgO2t0jWMUW
     |  |  |
     |  |  +-- 22 characters of salt followed by 31 characters of digest
     |  +----- the cost factor (two decimal digits)
     +-------- the algorithm version tag

Splitting on ``$`` therefore yields exactly four parts with an empty first
part. The check only looks at the shape of the value, it never needs the
plain secret.
"""

from typing import Any, FrozenSet

HASH_DELIMITER = "$"
HASH_VERSION_TAGS: FrozenSet[str] = frozenset(("2a", "2b", "2y"))
HASH_BODY_LENGTH = 53
_DIGITS = frozenset("0123456789")


def is_hash(candidate: Any) -> bool:
    """Check if a value looks like a bcrypt hash.

    Parameters
    ----------
    candidate : Any
        The value to check.

    Returns
    -------
    bool
        True if the value has the bcrypt hash shape, False otherwise.
    """
    if not isinstance(candidate, str):
        return False
    parts = candidate.split(HASH_DELIMITER)
    if len(parts) != 4:
        return False
    prefix, tag, cost, body = parts
    if prefix:
        return False
    if tag not in HASH_VERSION_TAGS:
        return False
    if not cost or not set(cost) <= _DIGITS:
        return False
    return len(body) == HASH_BODY_LENGTH


__all__ = [
    "HASH_BODY_LENGTH",
    "HASH_DELIMITER",
    "HASH_VERSION_TAGS",
    "is_hash",
]
