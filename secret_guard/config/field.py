# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=too-few-public-methods

"""Per record type configuration of a guarded field."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator
from typing_extensions import Annotated

from ..detector import is_hash
from ..exceptions import RehashDetected
from ._common import DEFAULT_COST
from .settings import Settings
from .settings_manager import SettingsManager


class RehashPolicy(ABC):
    """What to do when the guarded field already holds a hash."""

    @abstractmethod
    def __call__(self, record: Any) -> None:
        """Handle a detected rehash.

        Parameters
        ----------
        record : Any
            The record being saved.
        """


class RejectRehash(RehashPolicy):
    """Abort the save by raising ``RehashDetected``."""

    def __call__(self, record: Any) -> None:
        """Raise ``RehashDetected``.

        Parameters
        ----------
        record : Any
            The record being saved.

        Raises
        ------
        RehashDetected
            Always.
        """
        raise RehashDetected()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RejectRehash)

    def __hash__(self) -> int:
        return hash(RejectRehash)

    def __repr__(self) -> str:
        return "RejectRehash()"


class CustomRehashHandler(RehashPolicy):
    """Delegate to a user supplied handler.

    The handler receives the record. If it raises, the save is aborted,
    if it returns, the value is hashed anyway.
    """

    def __init__(self, handler: Callable[[Any], Any]) -> None:
        if not callable(handler):
            raise TypeError("The rehash handler must be callable")
        self.handler = handler

    def __call__(self, record: Any) -> None:
        """Call the handler with the record.

        Parameters
        ----------
        record : Any
            The record being saved.
        """
        self.handler(record)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, CustomRehashHandler)
            and other.handler is self.handler
        )

    def __hash__(self) -> int:
        return hash(self.handler)

    def __repr__(self) -> str:
        return f"CustomRehashHandler({self.handler!r})"


class SecretFieldConfig(BaseModel):
    """Configuration of the guarded field of a record type."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    field_name: Annotated[str, Field(min_length=1)]
    allow_empty_secret: bool = False
    cost: Annotated[StrictInt, Field(ge=1)] = DEFAULT_COST
    on_rehash: RehashPolicy = Field(default_factory=RejectRehash)
    rehash_detector: Callable[[str], bool] = is_hash

    @field_validator("on_rehash", mode="before")
    @classmethod
    def validate_on_rehash(cls, value: Any) -> RehashPolicy:
        """Wrap plain callables in a ``CustomRehashHandler``.

        Parameters
        ----------
        value : Any
            The configured policy or handler.

        Returns
        -------
        RehashPolicy
            The policy to use.

        Raises
        ------
        ValueError
            If the value is neither a policy nor callable.
        """
        if value is None:
            return RejectRehash()
        if isinstance(value, RehashPolicy):
            return value
        if callable(value):
            return CustomRehashHandler(value)
        raise ValueError("on_rehash must be a RehashPolicy or a callable")

    @classmethod
    def from_settings(
        cls,
        field_name: str,
        settings: Optional[Settings] = None,
        **overrides: Any,
    ) -> "SecretFieldConfig":
        """Build a configuration using the package settings as defaults.

        Parameters
        ----------
        field_name : str
            The name of the guarded field.
        settings : Optional[Settings]
            The settings to use, defaults to the loaded package settings.
        **overrides : Any
            Explicit values that take precedence over the settings.

        Returns
        -------
        SecretFieldConfig
            The configuration.
        """
        if settings is None:
            settings = SettingsManager.get_settings()
        values: dict[str, Any] = {
            "cost": settings.cost,
            "allow_empty_secret": settings.allow_empty_secret,
        }
        values.update(overrides)
        return cls(field_name=field_name, **values)


__all__ = [
    "RehashPolicy",
    "RejectRehash",
    "CustomRehashHandler",
    "SecretFieldConfig",
]
