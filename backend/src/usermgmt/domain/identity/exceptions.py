"""Exceptions raised by the Identity bounded context."""
from usermgmt.domain.shared.exceptions import EntityError, ValueObjectError, ValueObjectErrorKind

Kind = ValueObjectErrorKind


class UserNameError(ValueObjectError):
    messages = {
        Kind.EMPTY: "User name is empty.",
        Kind.TOO_LONG: "User name '{excerpt}' exceeds maximum length: {maximum} characters (actual: {actual}).",
        Kind.INVALID_FORMAT: "User name '{excerpt}' is invalid format.",
    }


class EmailError(ValueObjectError):
    messages = {
        Kind.EMPTY: "Email is empty.",
        Kind.TOO_LONG: "Email '{excerpt}' exceeds maximum length: {maximum} characters (actual: {actual}).",
        Kind.INVALID_FORMAT: "Email '{excerpt}' is invalid format.",
    }


class EmailAddressError(ValueObjectError):
    messages = {
        Kind.EMPTY: "Email address is empty.",
        Kind.TOO_LONG: (
            "Email address '{excerpt}' exceeds the maximum length of {maximum} characters (actual: {actual})."
        ),
        Kind.INVALID_FORMAT: "Email address '{excerpt}' has an invalid format.",
    }


class PasswordError(ValueObjectError):
    """Password failures report lengths or the algorithm name, never the password."""

    echoes_value = False
    messages = {
        Kind.EMPTY: "Password is empty.",
        Kind.TOO_SHORT: "Password is below minimum length: {minimum} characters (actual: {actual}).",
        Kind.TOO_LONG: "Password exceeds maximum length: {maximum} characters (actual: {actual}).",
        Kind.NOT_ARGON2ID: "Password algorithm is not 'Argon2id': '{algorithm}'.",
    }


class VerificationTokenError(ValueObjectError):
    echoes_value = False
    messages = {
        Kind.EMPTY: "Verification token is empty.",
        Kind.TOO_SHORT: "Verification token is below minimum length: {minimum} characters (actual: {actual}).",
        Kind.TOO_LONG: "Verification token exceeds maximum length: {maximum} characters (actual: {actual}).",
        Kind.INVALID_FORMAT: "Verification token is invalid format.",
    }


# ── Entity rules ──────────────────────────────────────────────────────────────

class EmailVerificationError(EntityError):
    pass


class VerificationTokenMismatchError(EmailVerificationError):
    pass


class VerificationExpiredError(EmailVerificationError):
    pass


class VerificationAlreadyUsedError(EmailVerificationError):
    pass
