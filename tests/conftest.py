# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
# pylint: disable=missing-return-doc,missing-yield-doc,missing-param-doc
"""Shared fixtures for tests."""

import os
from collections.abc import AsyncGenerator, Generator

import bcrypt
import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from secret_guard import PersistOptions, save
from secret_guard.config import SettingsManager
from tests.models import Base, User

ENV_KEY_PREFIX = "SECRET_GUARD_"
DATABASE_URL = "sqlite+aiosqlite:///:memory:"
SEED_EMAIL = "raina_kunde14@example.com"
SEED_SECRET = "password"  # nosemgrep # nosec


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Return the backend to use for anyio tests."""
    return "asyncio"


@pytest.fixture(scope="function", autouse=True)
def reset_settings_and_env() -> Generator[None, None, None]:
    """Automatically reset SettingsManager before each test."""
    SettingsManager.reset_settings()
    for key in list(os.environ):
        if key.startswith(ENV_KEY_PREFIX):
            os.environ.pop(key, "")
    yield
    SettingsManager.reset_settings()


@pytest.fixture(name="async_session")
async def async_session_fixture() -> AsyncGenerator[AsyncSession, None]:
    """Fixture for an async session on a fresh in-memory database."""
    engine = create_async_engine(DATABASE_URL, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async_session_maker = async_sessionmaker(engine, expire_on_commit=False)
    async with async_session_maker() as session:
        yield session
    await engine.dispose()


@pytest.fixture(name="seeded_user")
async def seeded_user_fixture(async_session: AsyncSession) -> User:
    """A user stored with an already hashed secret."""
    hashed = bcrypt.hashpw(
        SEED_SECRET.encode("utf-8"), bcrypt.gensalt(rounds=4)
    ).decode("utf-8")
    user = User(name="Amira Dooley", email=SEED_EMAIL, password=hashed)
    return await save(
        async_session, user, PersistOptions(hash_secret=False)
    )
