# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Bcrypt secret hasher."""

from typing import Optional

import bcrypt

# bcrypt only uses the first 72 bytes of its input
MAX_SECRET_BYTES = 72


def _to_bytes(plain: str) -> bytes:
    # Explicitly truncate to 72 bytes for compatibility
    # ref (src):
    #  bcrypt originally suffered from a wraparound bug:
    #  http://www.openwall.com/lists/oss-security/2012/01/02/4
    # This bug was corrected in the OpenBSD source by truncating
    # inputs to 72 bytes on the updated prefix $2b$,
    # but leaving $2a$ unchanged for compatibility.
    # Recent pyca/bcrypt releases refuse longer inputs instead of
    # truncating them, so we do it here.
    return plain.encode("utf-8")[:MAX_SECRET_BYTES]


class BcryptHasher:
    """Hash and compare secrets with bcrypt.

    Errors from ``bcrypt`` (invalid rounds, invalid salt) are not caught.
    """

    @staticmethod
    def hash(plain: Optional[str], cost: int) -> str:
        """Hash a secret using bcrypt.

        Parameters
        ----------
        plain : Optional[str]
            The plain secret to hash.
        cost : int
            The bcrypt cost factor (log2 of the rounds).

        Returns
        -------
        str
            The hashed secret.

        Raises
        ------
        ValueError
            If no secret is given or bcrypt rejects the cost.
        """
        if plain is None:
            raise ValueError("data and salt arguments required")
        salt = bcrypt.gensalt(rounds=cost)
        return bcrypt.hashpw(_to_bytes(plain), salt).decode("utf-8")

    @staticmethod
    def compare(plain: Optional[str], stored: Optional[str]) -> bool:
        """Compare a secret against a bcrypt hash.

        Parameters
        ----------
        plain : Optional[str]
            The plain secret to check.
        stored : Optional[str]
            The stored hash.

        Returns
        -------
        bool
            True if the hash was generated from the secret.

        Raises
        ------
        ValueError
            If an argument is missing or the stored hash is malformed.
        """
        if plain is None or stored is None:
            raise ValueError("data and hash arguments required")
        return bcrypt.checkpw(_to_bytes(plain), stored.encode("utf-8"))


__all__ = ["BcryptHasher", "MAX_SECRET_BYTES"]
