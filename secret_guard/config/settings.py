# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Secret guard settings module."""

import logging

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated

from ._common import (
    DEFAULT_COST,
    DOT_ENV_PATH,
    ENV_PREFIX,
    MAX_COST,
    MIN_COST,
)

LOG = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Process wide defaults for guarded fields.

    Environment variables (with prefix SECRET_GUARD_)
    -------------------------------------------------
    COST (int) # default: 12
    ALLOW_EMPTY_SECRET (bool) # default: False
    LOG_LEVEL (str) # default: INFO
    """

    cost: Annotated[int, Field(ge=MIN_COST, le=MAX_COST)] = DEFAULT_COST
    allow_empty_secret: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate the log level.

        Parameters
        ----------
        value : str
            The log level

        Returns
        -------
        str
            The upper case log level
        """
        if isinstance(value, str):
            return value.upper()
        return value

    @classmethod
    def load(cls) -> "Settings":
        """Load the settings.

        Returns
        -------
        Settings
            The settings instance
        """
        if DOT_ENV_PATH.exists():
            load_dotenv(DOT_ENV_PATH, override=False)
        instance = cls()
        LOG.debug(
            "Loaded settings: cost=%s, allow_empty_secret=%s",
            instance.cost,
            instance.allow_empty_secret,
        )
        return instance
