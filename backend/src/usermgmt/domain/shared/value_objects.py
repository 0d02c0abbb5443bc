"""Value object base types and the validation rules they compose."""
from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Self, TypeVar

from .exceptions import ValueObjectError

T = TypeVar("T")

Rule = Callable[[str, type[ValueObjectError]], "ValueObjectError | None"]


@dataclass(frozen=True)
class ValueObject(Generic[T]):
    """Immutable wrapper around exactly one primitive.

    Dataclass equality already requires ``other.__class__ is self.__class__``,
    so two value objects of different types never compare equal even when
    they wrap the same primitive.
    """

    value: T

    def __str__(self) -> str:
        return "" if self.value is None else str(self.value)

    def equals(self, other: Any) -> bool:
        return self == other


@dataclass(frozen=True)
class ValidatedString(ValueObject[str]):
    """A string value object checked against an ordered rule set on creation.

    Subclasses set ``error`` to their exception family and ``rules`` to the
    checks to run. The first failing rule raises; the rest are skipped.
    """

    error: ClassVar[type[ValueObjectError]] = ValueObjectError
    rules: ClassVar[tuple[Rule, ...]] = ()
    NULLABLE: ClassVar[bool] = False

    def __post_init__(self) -> None:
        if self.value is None and self.NULLABLE:
            return
        validate(self.value, self.rules, self.error)

    @classmethod
    def of(cls, value: str) -> Self:
        return cls(value)


def validate(value: str, rules: tuple[Rule, ...], error: type[ValueObjectError]) -> None:
    for rule in rules:
        failure = rule(value, error)
        if failure is not None:
            raise failure


# ── Rules ─────────────────────────────────────────────────────────────────────

def not_empty() -> Rule:
    def rule(value: str, error: type[ValueObjectError]) -> ValueObjectError | None:
        return error.empty() if value == "" else None
    return rule


def min_length(minimum: int) -> Rule:
    def rule(value: str, error: type[ValueObjectError]) -> ValueObjectError | None:
        return error.too_short(value, minimum) if len(value) < minimum else None
    return rule


def max_length(maximum: int) -> Rule:
    # len() counts code points, not bytes
    def rule(value: str, error: type[ValueObjectError]) -> ValueObjectError | None:
        return error.too_long(value, maximum) if len(value) > maximum else None
    return rule


def matches(pattern: re.Pattern[str]) -> Rule:
    """Fail unless the whole value matches ``pattern``."""
    def rule(value: str, error: type[ValueObjectError]) -> ValueObjectError | None:
        return None if pattern.fullmatch(value) else error.invalid_format(value)
    return rule


def excludes(pattern: re.Pattern[str]) -> Rule:
    """Fail if ``pattern`` is found anywhere in the value."""
    def rule(value: str, error: type[ValueObjectError]) -> ValueObjectError | None:
        return error.invalid_format(value) if pattern.search(value) else None
    return rule


def satisfies(predicate: Callable[[str], bool]) -> Rule:
    def rule(value: str, error: type[ValueObjectError]) -> ValueObjectError | None:
        return None if predicate(value) else error.invalid_format(value)
    return rule
