# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Hash a guarded secret field right before a record is persisted."""

import logging
from collections.abc import Collection, Mapping
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Union, runtime_checkable

from .config import SecretFieldConfig
from .exceptions import EmptySecretDetected
from .hashing import Hasher, compare_async, hash_async, password_hasher

LOG = logging.getLogger(__name__)


@runtime_checkable
class Record(Protocol):  # pragma: no cover
    """The view of a record the guard needs."""

    def get(self, field: str) -> Any:
        """Get the current value of a field."""

    def set(self, field: str, value: Any) -> None:
        """Set the value of a field."""

    def has_changed(self, field: str) -> bool:
        """Check if a field changed since the record was loaded."""


@dataclass(frozen=True)
class PersistOptions:
    """Per call options of a save.

    Set ``hash_secret`` to False to store the guarded value verbatim,
    e.g. when it was already hashed elsewhere.
    """

    hash_secret: bool = True


OptionsType = Union[PersistOptions, Mapping[str, Any], None]


def _should_hash(options: OptionsType) -> bool:
    if options is None:
        return True
    if isinstance(options, PersistOptions):
        return options.hash_secret
    return options.get("hash_secret", True) is not False


class SecretFieldGuard:
    """Guard one secret field of a record type."""

    def __init__(
        self,
        config: SecretFieldConfig,
        hasher: Optional[Hasher] = None,
    ) -> None:
        """Initialize the guard.

        Parameters
        ----------
        config : SecretFieldConfig
            The field configuration.
        hasher : Optional[Hasher]
            The hasher to use, defaults to bcrypt.
        """
        self.config = config
        self.hasher: Hasher = hasher if hasher is not None else password_hasher

    @property
    def field_name(self) -> str:
        """The name of the guarded field.

        Returns
        -------
        str
            The field name.
        """
        return self.config.field_name

    async def before_persist(
        self,
        record: Record,
        changed: Collection[str],
        options: OptionsType = None,
    ) -> None:
        """Hash the guarded field if it changed.

        Parameters
        ----------
        record : Record
            The record about to be persisted.
        changed : Collection[str]
            The names of the fields changed in this save.
        options : OptionsType
            The per call options.

        Raises
        ------
        EmptySecretDetected
            If the field is empty and empty secrets are not allowed.
        """
        field = self.config.field_name
        if not _should_hash(options):
            LOG.debug("Hashing of %s bypassed", field)
            return
        if field not in changed:
            LOG.debug("Field %s did not change, nothing to hash", field)
            return
        value = record.get(field)
        if value is None:
            if self.config.allow_empty_secret:
                return
            raise EmptySecretDetected()
        if self.config.rehash_detector(value):
            # the policy either raises or lets us hash the hash
            self.config.on_rehash(record)
            LOG.debug("Rehash of %s allowed by the configured handler", field)
        LOG.debug("Hashing %s with cost %d", field, self.config.cost)
        hashed = await hash_async(self.hasher, value, self.config.cost)
        record.set(field, hashed)

    async def compare(
        self, candidate: Optional[str], stored: Optional[str]
    ) -> bool:
        """Compare a candidate secret against a stored hash.

        Parameters
        ----------
        candidate : Optional[str]
            The plain secret to check.
        stored : Optional[str]
            The stored hash.

        Returns
        -------
        bool
            True if the stored hash was generated from the candidate.
        """
        return await compare_async(candidate, stored, self.hasher)

    async def compare_record(
        self, record: Record, candidate: Optional[str]
    ) -> bool:
        """Compare a candidate secret against the hash stored in a record.

        Parameters
        ----------
        record : Record
            The record holding the hash.
        candidate : Optional[str]
            The plain secret to check.

        Returns
        -------
        bool
            True if the record's hash was generated from the candidate.
        """
        return await self.compare(candidate, record.get(self.field_name))

    def __repr__(self) -> str:
        return f"SecretFieldGuard(field_name={self.field_name!r})"


__all__ = ["PersistOptions", "Record", "SecretFieldGuard", "OptionsType"]
