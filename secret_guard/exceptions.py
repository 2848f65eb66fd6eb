# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Errors raised by the secret field guard."""


class SecretGuardError(Exception):
    """Base class for all secret guard errors."""


class RehashDetected(SecretGuardError):
    """The guarded field already holds a hash at save time."""

    def __init__(self) -> None:
        super().__init__("Tried to hash a value that is already a hash")


class EmptySecretDetected(SecretGuardError):
    """The guarded field is None at save time and empty is not allowed."""

    def __init__(self) -> None:
        super().__init__("Cannot hash a null or undefined secret")


class GuardConfigurationError(SecretGuardError):
    """A record type cannot be guarded with the requested configuration."""


__all__ = [
    "SecretGuardError",
    "RehashDetected",
    "EmptySecretDetected",
    "GuardConfigurationError",
]
