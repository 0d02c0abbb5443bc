"""Shared fixtures for the usermgmt test suite."""

import os
from datetime import datetime, timezone

import pytest
from argon2 import PasswordHasher, Type

# Cheap Argon2 parameters keep the hashing tests fast.
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "1024")
os.environ.setdefault("ARGON2_PARALLELISM", "1")

from usermgmt.config import get_settings  # noqa: E402
from usermgmt.infrastructure.auth import password as password_module  # noqa: E402
from usermgmt.infrastructure.clock import FixedClock  # noqa: E402

TEST_PASSWORD = "Te$tP@ssw0rd"
OTHER_PASSWORD = "te$tP@ssw0rd"

BCRYPT_HASH = "$2y$10$.vGA1O9wmRjrwAVXD98HNOgsNpDczlqm3Jq7KnEd1rVAGv3Fykk1a"


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings and hasher so env changes in a test take effect."""
    get_settings.cache_clear()
    password_module._hasher.cache_clear()
    yield
    get_settings.cache_clear()
    password_module._hasher.cache_clear()


def _argon2_hash(password: str, hash_type: Type) -> str:
    hasher = PasswordHasher(time_cost=1, memory_cost=1024, parallelism=1, type=hash_type)
    return hasher.hash(password)


@pytest.fixture
def argon2id_hash() -> str:
    return _argon2_hash(TEST_PASSWORD, Type.ID)


@pytest.fixture
def other_argon2id_hash() -> str:
    return _argon2_hash(OTHER_PASSWORD, Type.ID)


@pytest.fixture
def argon2i_hash() -> str:
    return _argon2_hash(TEST_PASSWORD, Type.I)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))
