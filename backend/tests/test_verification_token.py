"""Tests for the EmailVerificationToken value object."""

import pytest

from usermgmt.domain.identity.exceptions import VerificationTokenError
from usermgmt.domain.identity.value_objects import EmailVerificationToken, UserName
from usermgmt.domain.shared.exceptions import ValueObjectErrorKind

TEST_VALUE = "0123456789abcdef0123456789abcdef"
OTHER_VALUE = "a123456789abcdef0123456789abcdef"


def _replace(value: str, index: int, char: str) -> str:
    return value[:index] + char + value[index + 1:]


class TestEmailVerificationTokenCreation:
    @pytest.mark.parametrize(
        "value",
        [TEST_VALUE, "0123456789" * 4, "abcdef" * 6, "a" * 32, "a" * 255],
        ids=["typical", "numeric_only", "hex_only", "minimum_length", "maximum_length"],
    )
    def test_of_accepts_valid_value(self, value):
        token = EmailVerificationToken.of(value)
        assert token.value == value
        assert str(token) == value


class TestEmailVerificationTokenValidation:
    def test_empty(self):
        with pytest.raises(VerificationTokenError, match="^Verification token is empty\\.$"):
            EmailVerificationToken.of("")

    def test_below_minimum_length(self):
        with pytest.raises(VerificationTokenError) as exc_info:
            EmailVerificationToken.of("a" * 31)
        assert exc_info.value.kind is ValueObjectErrorKind.TOO_SHORT
        assert str(exc_info.value) == (
            "Verification token is below minimum length: 32 characters (actual: 31)."
        )

    def test_short_non_hex_reports_length_first(self):
        with pytest.raises(VerificationTokenError) as exc_info:
            EmailVerificationToken.of("XYZ")
        assert exc_info.value.kind is ValueObjectErrorKind.TOO_SHORT

    def test_exceeds_maximum_length(self):
        with pytest.raises(VerificationTokenError) as exc_info:
            EmailVerificationToken.of("a" * 256)
        assert exc_info.value.kind is ValueObjectErrorKind.TOO_LONG
        assert str(exc_info.value) == (
            "Verification token exceeds maximum length: 255 characters (actual: 256)."
        )

    @pytest.mark.parametrize(
        "value",
        [
            _replace(TEST_VALUE, 0, "g"),
            TEST_VALUE.upper(),
            _replace(TEST_VALUE, 0, "A"),
            _replace(TEST_VALUE, 0, "あ"),
            _replace(TEST_VALUE, 16, "-"),
            _replace(TEST_VALUE, 16, " "),
            _replace(TEST_VALUE, 16, "\n"),
            TEST_VALUE + "\n",
        ],
        ids=[
            "invalid_hex",
            "all_uppercase",
            "partial_uppercase",
            "multi_byte",
            "with_hyphen",
            "with_space",
            "with_newline",
            "trailing_newline",
        ],
    )
    def test_invalid_format(self, value):
        with pytest.raises(VerificationTokenError) as exc_info:
            EmailVerificationToken.of(value)
        assert exc_info.value.kind is ValueObjectErrorKind.INVALID_FORMAT
        assert str(exc_info.value) == "Verification token is invalid format."


class TestEmailVerificationTokenEquality:
    def test_equal_for_same_value(self):
        assert EmailVerificationToken.of(TEST_VALUE).equals(EmailVerificationToken.of(TEST_VALUE))

    def test_not_equal_for_different_value(self):
        assert not EmailVerificationToken.of(TEST_VALUE).equals(EmailVerificationToken.of(OTHER_VALUE))

    def test_not_equal_to_other_type(self):
        assert not EmailVerificationToken.of(TEST_VALUE).equals(UserName.of(TEST_VALUE))
