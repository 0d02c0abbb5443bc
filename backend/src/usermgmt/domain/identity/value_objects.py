"""Immutable value objects for the Identity bounded context."""
from __future__ import annotations

import re
from dataclasses import dataclass

from argon2 import Type, extract_parameters
from argon2.exceptions import InvalidHashError

from usermgmt.domain.shared.value_objects import (
    ValidatedString,
    excludes,
    matches,
    max_length,
    min_length,
    not_empty,
    satisfies,
)

from .email import is_valid_email, is_valid_email_address
from .exceptions import (
    EmailAddressError,
    EmailError,
    PasswordError,
    UserNameError,
    VerificationTokenError,
)

# Leading or trailing whitespace, full-width space (U+3000) included
_SURROUNDING_WHITESPACE = re.compile(r"^[\s　]+|[\s　]+$")
_CONTROL_CHARACTERS = re.compile(r"[\t\n\r]")
_LOWER_HEX = re.compile(r"[0-9a-f]+")
_BCRYPT = re.compile(r"\$2[aby]\$\d{2}\$[./A-Za-z0-9]{53}")

_ARGON2_NAMES = {Type.ID: "argon2id", Type.I: "argon2i", Type.D: "argon2d"}
ARGON2ID = "argon2id"
UNKNOWN_ALGORITHM = "unknown"


@dataclass(frozen=True)
class UserName(ValidatedString):
    """Display name of a user. ``UserName.none()`` stands for "not set"."""

    value: str | None
    MAX_LENGTH = 255
    NULLABLE = True
    error = UserNameError
    rules = (
        not_empty(),
        max_length(MAX_LENGTH),
        excludes(_SURROUNDING_WHITESPACE),
        excludes(_CONTROL_CHARACTERS),
    )

    @classmethod
    def none(cls) -> UserName:
        return cls(None)

    def is_none(self) -> bool:
        return self.value is None


class EmailValue:
    """Mixin for the email value objects: value comparison across email types."""

    value: str

    def is_same_value(self, other: EmailValue) -> bool:
        return self.value == other.value


@dataclass(frozen=True)
class Email(EmailValue, ValidatedString):
    """A user's confirmed email address."""

    MAX_LENGTH = 255
    error = EmailError
    rules = (not_empty(), max_length(MAX_LENGTH), satisfies(is_valid_email))


@dataclass(frozen=True)
class UnverifiedEmail(EmailValue, ValidatedString):
    """An email address waiting for its owner to confirm it."""

    MAX_LENGTH = 255
    error = EmailError
    rules = (not_empty(), max_length(MAX_LENGTH), satisfies(is_valid_email))


@dataclass(frozen=True)
class EmailAddress(EmailValue, ValidatedString):
    MAX_LENGTH = 255
    error = EmailAddressError
    rules = (not_empty(), max_length(MAX_LENGTH), satisfies(is_valid_email_address))


class PasswordValue:
    """Mixin for password value objects: keeps the value out of ``repr``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}('********')"


@dataclass(frozen=True, repr=False)
class PlainPassword(PasswordValue, ValidatedString):
    """A password exactly as the user typed it. Never persisted."""

    MIN_LENGTH = 12
    MAX_LENGTH = 255
    error = PasswordError
    rules = (not_empty(), min_length(MIN_LENGTH), max_length(MAX_LENGTH))


def identify_hash_algorithm(password_hash: str) -> str:
    """Name the algorithm that produced ``password_hash``.

    Returns ``"bcrypt"``, ``"argon2i"``, ``"argon2d"`` or ``"argon2id"``, and
    ``"unknown"`` for anything that does not decode as one of those.
    """
    if _BCRYPT.fullmatch(password_hash):
        return "bcrypt"
    try:
        parameters = extract_parameters(password_hash)
    except InvalidHashError:
        return UNKNOWN_ALGORITHM
    return _ARGON2_NAMES.get(parameters.type, UNKNOWN_ALGORITHM)


def _argon2id(value: str, error: type[PasswordError]) -> PasswordError | None:
    algorithm = identify_hash_algorithm(value)
    if algorithm != ARGON2ID:
        return error.not_argon2id(algorithm)
    return None


@dataclass(frozen=True, repr=False)
class Argon2idPassword(PasswordValue, ValidatedString):
    """Encoded Argon2id hash of a password, as stored."""

    MIN_LENGTH = 12
    MAX_LENGTH = 255
    error = PasswordError
    rules = (not_empty(), min_length(MIN_LENGTH), max_length(MAX_LENGTH), _argon2id)


@dataclass(frozen=True)
class EmailVerificationToken(ValidatedString):
    MIN_LENGTH = 32
    MAX_LENGTH = 255
    error = VerificationTokenError
    rules = (
        not_empty(),
        min_length(MIN_LENGTH),
        max_length(MAX_LENGTH),
        matches(_LOWER_HEX),
    )
