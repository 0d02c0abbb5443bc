"""Argon2id password hashing using argon2-cffi."""
import logging
from functools import lru_cache

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from usermgmt.config import get_settings
from usermgmt.domain.identity.value_objects import Argon2idPassword, PlainPassword

logger = logging.getLogger(__name__)


@lru_cache
def _hasher() -> PasswordHasher:
    settings = get_settings()
    return PasswordHasher(
        time_cost=settings.argon2_time_cost,
        memory_cost=settings.argon2_memory_cost,
        parallelism=settings.argon2_parallelism,
        hash_len=settings.argon2_hash_len,
        salt_len=settings.argon2_salt_len,
        type=Type.ID,
    )


def hash_password(password: PlainPassword) -> Argon2idPassword:
    """Hash a plain password using Argon2id."""
    return Argon2idPassword.of(_hasher().hash(password.value))


def verify_password(password: PlainPassword, password_hash: Argon2idPassword) -> bool:
    """Verify a plain password against a stored Argon2id hash."""
    try:
        return _hasher().verify(password_hash.value, password.value)
    except VerifyMismatchError:
        return False
    except (VerificationError, InvalidHashError):
        logger.warning("Stored password hash could not be verified")
        return False


def needs_rehash(password_hash: Argon2idPassword) -> bool:
    """True if the hash was created with outdated parameters and should be updated."""
    outdated = _hasher().check_needs_rehash(password_hash.value)
    if outdated:
        logger.debug("Password hash parameters are outdated; rehash required")
    return outdated
