# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=missing-return-doc,missing-param-doc,unused-argument
"""Test secret_guard.config.field."""

import os
from typing import Any, List
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from secret_guard import RehashDetected, is_hash
from secret_guard.config import (
    DEFAULT_COST,
    ENV_PREFIX,
    CustomRehashHandler,
    RehashPolicy,
    RejectRehash,
    SecretFieldConfig,
    Settings,
)


def test_defaults() -> None:
    """Test the configuration defaults."""
    config = SecretFieldConfig(field_name="password")
    assert config.cost == DEFAULT_COST
    assert config.allow_empty_secret is False
    assert config.on_rehash == RejectRehash()
    assert config.rehash_detector is is_hash


@pytest.mark.parametrize("cost", [0, -1, "abc", "5", 5.0, None])
def test_invalid_cost(cost: Any) -> None:
    """Test that invalid costs fail at configuration time."""
    with pytest.raises(ValidationError):
        SecretFieldConfig(field_name="password", cost=cost)


def test_field_name_required() -> None:
    """Test that the field name cannot be empty."""
    with pytest.raises(ValidationError):
        SecretFieldConfig(field_name="")
    with pytest.raises(ValidationError):
        SecretFieldConfig()  # type: ignore[call-arg]


def test_frozen() -> None:
    """Test that the configuration is immutable."""
    config = SecretFieldConfig(field_name="password")
    with pytest.raises(ValidationError):
        config.cost = 4  # type: ignore[misc]


def test_reject_policy_raises() -> None:
    """Test the default rehash policy."""
    with pytest.raises(RehashDetected):
        RejectRehash()(object())


def test_callable_is_wrapped() -> None:
    """Test that a plain callable becomes a custom handler."""
    calls: List[Any] = []

    def handler(record: Any) -> None:
        calls.append(record)

    config = SecretFieldConfig(field_name="password", on_rehash=handler)
    assert isinstance(config.on_rehash, CustomRehashHandler)
    assert config.on_rehash == CustomRehashHandler(handler)
    record = object()
    config.on_rehash(record)
    assert calls == [record]


def test_invalid_on_rehash() -> None:
    """Test that a non callable handler is rejected."""
    with pytest.raises(ValidationError):
        SecretFieldConfig(field_name="password", on_rehash="log")
    with pytest.raises(TypeError):
        CustomRehashHandler("log")  # type: ignore[arg-type]


def test_rehash_policy_is_abstract() -> None:
    """Test that only concrete policies can be used."""
    with pytest.raises(TypeError):
        RehashPolicy()  # type: ignore[abstract]

    class Incomplete(RehashPolicy):  # pylint: disable=abstract-method
        """A policy without a decision."""

    with pytest.raises(TypeError):
        Incomplete()  # type: ignore[abstract]

    class Allow(RehashPolicy):
        """A policy that lets rehashes through."""

        def __call__(self, record: Any) -> None:
            """Do nothing."""

    policy = Allow()
    config = SecretFieldConfig(field_name="password", on_rehash=policy)
    assert config.on_rehash is policy


def test_invalid_detector() -> None:
    """Test that the detector must be callable."""
    with pytest.raises(ValidationError):
        SecretFieldConfig(field_name="password", rehash_detector=True)


def test_equality() -> None:
    """Test comparing configurations."""
    first = SecretFieldConfig(field_name="password", cost=4)
    assert first == SecretFieldConfig(field_name="password", cost=4)
    assert first != SecretFieldConfig(field_name="password", cost=5)
    assert first != SecretFieldConfig(field_name="secret", cost=4)


def test_from_settings() -> None:
    """Test building a configuration from settings."""
    settings = Settings(cost=8, allow_empty_secret=True)
    config = SecretFieldConfig.from_settings("password", settings)
    assert config.cost == 8
    assert config.allow_empty_secret is True

    config = SecretFieldConfig.from_settings(
        "password", settings, cost=5, allow_empty_secret=False
    )
    assert config.cost == 5
    assert config.allow_empty_secret is False


@patch.dict(os.environ, {f"{ENV_PREFIX}COST": "7"})
def test_from_loaded_settings() -> None:
    """Test that the loaded settings are used by default."""
    config = SecretFieldConfig.from_settings("password")
    assert config.cost == 7
