# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Secret hashing and comparison."""

from ._bcrypt_hasher import MAX_SECRET_BYTES, BcryptHasher
from ._offload import compare_async, hash_async
from .protocol import Hasher

password_hasher: Hasher = BcryptHasher()

__all__ = [
    "password_hasher",
    "Hasher",
    "BcryptHasher",
    "MAX_SECRET_BYTES",
    "hash_async",
    "compare_async",
]
