# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Secret hashing protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Hasher(Protocol):  # pragma: no cover
    """Protocol for secret hashing implementations.

    Implementations are blocking, callers offload them to a worker thread.
    """

    def hash(self, plain: str, cost: int) -> str:
        """Hash a plain text secret.

        Parameters
        ----------
        plain : str
            The plain text secret
        cost : int
            The work factor
        """
        ...

    def compare(self, plain: str, stored: str) -> bool:
        """Compare a plain text secret against a stored hash.

        Parameters
        ----------
        plain : str
            The plain text secret
        stored : str
            The stored hash
        """
        ...


__all__ = ["Hasher"]
