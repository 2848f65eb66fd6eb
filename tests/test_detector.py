# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=missing-param-doc

"""Tests for secret_guard.detector."""

import bcrypt
import pytest

from secret_guard.detector import HASH_BODY_LENGTH, is_hash

# cspell: disable-next-line
SEED_HASH = "$2a$12$jajQAjyjDhsBxii3eD43aO/uZteexr0laWE3pxZa3yxEbGLdlzS3q"


def test_bcrypt_output_is_a_hash() -> None:
    """Test that fresh bcrypt hashes are detected."""
    for rounds in (4, 5, 10):
        hashed = bcrypt.hashpw(b"password", bcrypt.gensalt(rounds=rounds))
        assert is_hash(hashed.decode("utf-8"))


def test_known_tags() -> None:
    """Test all recognized version tags."""
    body = "a" * HASH_BODY_LENGTH
    for tag in ("2a", "2b", "2y"):
        assert is_hash(f"${tag}$12${body}")
    assert is_hash(SEED_HASH)


@pytest.mark.parametrize(
    "candidate",
    [
        "password",
        "",
        "$",
        "$$$",
        "p@ssw0rd!#$%^&*()",
        "12345678910",
        "$2b$12$",
    ],
)
def test_plaintext(candidate: str) -> None:
    """Test values that are not hashes."""
    assert not is_hash(candidate)


def test_unknown_tag() -> None:
    """Test a one character different tag."""
    assert not is_hash(SEED_HASH.replace("$2a$", "$2c$", 1))
    assert not is_hash(SEED_HASH.replace("$2a$", "$2$", 1))
    assert not is_hash(SEED_HASH.replace("$2a$", "$2A$", 1))


def test_non_numeric_cost() -> None:
    """Test a cost segment that is not made of digits."""
    assert not is_hash(SEED_HASH.replace("$12$", "$1x$", 1))
    assert not is_hash(SEED_HASH.replace("$12$", "$$", 1))
    assert not is_hash(SEED_HASH.replace("$12$", "$-1$", 1))
    assert not is_hash(SEED_HASH.replace("$12$", "$١٢$", 1))


def test_truncated_body() -> None:
    """Test a hash with a truncated final segment."""
    assert not is_hash(SEED_HASH[:-1])
    assert not is_hash(SEED_HASH + "a")


def test_prefixed_garbage() -> None:
    """Test garbage in front of a valid hash."""
    assert not is_hash("garbage" + SEED_HASH)
    assert not is_hash(" " + SEED_HASH)


def test_extra_segments() -> None:
    """Test a value with more than four segments."""
    assert not is_hash(SEED_HASH + "$")
    assert not is_hash("$2a" + SEED_HASH)


def test_non_string() -> None:
    """Test that non string values are never hashes."""
    assert not is_hash(None)
    assert not is_hash(12)
    assert not is_hash(SEED_HASH.encode("utf-8"))


def test_no_learned_state() -> None:
    """Test that the result does not depend on previous calls."""
    results = [is_hash(SEED_HASH), is_hash("password"), is_hash(SEED_HASH)]
    assert results == [True, False, True]
