"""Base exception types shared by every bounded context."""
from __future__ import annotations

from enum import StrEnum
from typing import Any, ClassVar

EXCERPT_LENGTH = 20
EXCERPT_ELLIPSIS = "..."


def excerpt(value: str) -> str:
    """Shorten a value for use inside an error message."""
    if len(value) <= EXCERPT_LENGTH:
        return value
    return value[:EXCERPT_LENGTH] + EXCERPT_ELLIPSIS


class ValueObjectErrorKind(StrEnum):
    EMPTY = "empty"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    INVALID_FORMAT = "invalid_format"
    NOT_ARGON2ID = "not_argon2id"


class ValueObjectError(ValueError):
    """A value object rejected its input at construction time.

    Subclasses name a value object family and supply the message templates
    for it. Templates are ``str.format`` strings over the ``detail`` keys:
    ``actual``, ``minimum``, ``maximum``, ``excerpt`` and ``algorithm``.
    """

    messages: ClassVar[dict[ValueObjectErrorKind, str]] = {}
    # Families holding secrets keep the raw value out of messages entirely.
    echoes_value: ClassVar[bool] = True

    def __init__(self, kind: ValueObjectErrorKind, **detail: Any) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(self.messages[kind].format(**detail))

    @classmethod
    def _with_value(cls, kind: ValueObjectErrorKind, value: str, **detail: Any) -> ValueObjectError:
        if cls.echoes_value:
            detail["excerpt"] = excerpt(value)
        return cls(kind, **detail)

    @classmethod
    def empty(cls) -> ValueObjectError:
        return cls(ValueObjectErrorKind.EMPTY)

    @classmethod
    def too_short(cls, value: str, minimum: int) -> ValueObjectError:
        return cls._with_value(ValueObjectErrorKind.TOO_SHORT, value, actual=len(value), minimum=minimum)

    @classmethod
    def too_long(cls, value: str, maximum: int) -> ValueObjectError:
        return cls._with_value(ValueObjectErrorKind.TOO_LONG, value, actual=len(value), maximum=maximum)

    @classmethod
    def invalid_format(cls, value: str) -> ValueObjectError:
        return cls._with_value(ValueObjectErrorKind.INVALID_FORMAT, value)

    @classmethod
    def not_argon2id(cls, algorithm: str) -> ValueObjectError:
        return cls(ValueObjectErrorKind.NOT_ARGON2ID, algorithm=algorithm)


class EntityError(Exception):
    """An entity refused an operation that would break one of its rules."""
