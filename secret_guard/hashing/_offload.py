# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Run the blocking hasher calls off the event loop."""

from typing import Optional

import anyio.to_thread

from .protocol import Hasher


async def hash_async(hasher: Hasher, plain: str, cost: int) -> str:
    """Hash a secret in a worker thread.

    Parameters
    ----------
    hasher : Hasher
        The hasher to use.
    plain : str
        The plain secret.
    cost : int
        The work factor.

    Returns
    -------
    str
        The hashed secret.
    """
    return await anyio.to_thread.run_sync(hasher.hash, plain, cost)


async def compare_async(
    candidate: Optional[str],
    stored: Optional[str],
    hasher: Optional[Hasher] = None,
) -> bool:
    """Compare a candidate secret against a stored hash in a worker thread.

    Errors raised by the hasher reach the caller unchanged.

    Parameters
    ----------
    candidate : Optional[str]
        The plain secret to check.
    stored : Optional[str]
        The stored hash.
    hasher : Optional[Hasher]
        The hasher to use, defaults to the package hasher.

    Returns
    -------
    bool
        True if the stored hash was generated from the candidate.
    """
    if hasher is None:
        from . import password_hasher  # pylint: disable=import-outside-toplevel

        hasher = password_hasher
    return await anyio.to_thread.run_sync(hasher.compare, candidate, stored)


__all__ = ["hash_async", "compare_async"]
