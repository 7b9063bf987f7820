"""Unit tests for password error kinds.

Tests cover:
- Fixed descriptions for built-in kinds
- Custom message passthrough
- Error codes
- Equality, hashing and immutability
- Errors are data, not exceptions
"""

from dataclasses import FrozenInstanceError

import pytest

from password_validator.core.enums import ErrorCode
from password_validator.core.errors import DomainError
from password_validator.domain.errors import (
    Custom,
    MissingDigit,
    MissingSpecialChar,
    MissingUppercase,
    PasswordError,
    TooShort,
)


@pytest.mark.unit
class TestBuiltInDescriptions:
    """Test the fixed description text of built-in kinds."""

    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (TooShort(), "Password must be at least 8 characters long"),
            (MissingUppercase(), "Password must include an uppercase letter"),
            (MissingDigit(), "Password must include a number"),
            (MissingSpecialChar(), "Password must include a special character"),
        ],
    )
    def test_description_is_fixed_text(self, error, expected):
        """Test each built-in kind maps to its fixed description."""
        assert error.description == expected
        assert error.message == expected

    def test_built_in_message_cannot_be_overridden(self):
        """Test built-in kinds take no message argument."""
        with pytest.raises(TypeError):
            TooShort(message="Password must be at least 12 characters long")  # type: ignore[call-arg]

    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (TooShort(), ErrorCode.PASSWORD_TOO_SHORT),
            (MissingUppercase(), ErrorCode.PASSWORD_MISSING_UPPERCASE),
            (MissingDigit(), ErrorCode.PASSWORD_MISSING_DIGIT),
            (MissingSpecialChar(), ErrorCode.PASSWORD_MISSING_SPECIAL_CHAR),
            (Custom("anything"), ErrorCode.PASSWORD_RULE_FAILED),
        ],
    )
    def test_error_codes(self, error, code):
        """Test each kind carries its machine-readable code."""
        assert error.code == code


@pytest.mark.unit
class TestCustomError:
    """Test the Custom kind."""

    def test_custom_description_equals_message(self):
        """Test description is the message unchanged."""
        message = "Password must not start with a number"
        error = Custom(message)

        assert error.description == message
        assert error.message == message

    def test_custom_accepts_keyword_message(self):
        """Test message may be passed by keyword."""
        assert Custom(message="x").description == "x"

    def test_custom_keeps_whitespace_and_empty_message(self):
        """Test message is not stripped or altered."""
        assert Custom("  padded  ").description == "  padded  "
        assert Custom("").description == ""

    def test_custom_errors_compare_by_message(self):
        """Test Custom equality depends on the message."""
        assert Custom("a") == Custom("a")
        assert Custom("a") != Custom("b")


@pytest.mark.unit
class TestErrorValueSemantics:
    """Test equality, hashing and immutability."""

    def test_built_in_kinds_are_singleton_like(self):
        """Test two instances of the same kind are equal."""
        assert TooShort() == TooShort()
        assert MissingDigit() == MissingDigit()

    def test_different_kinds_are_not_equal(self):
        """Test kinds never compare equal to each other."""
        assert TooShort() != MissingDigit()
        assert MissingUppercase() != Custom("Password must include an uppercase letter")

    def test_errors_are_hashable(self):
        """Test errors can be used in sets."""
        errors = {TooShort(), TooShort(), Custom("a"), Custom("a")}

        assert len(errors) == 2

    def test_errors_are_immutable(self):
        """Test errors cannot be mutated."""
        error = Custom("original")

        with pytest.raises(FrozenInstanceError):
            error.message = "changed"  # type: ignore[misc]

    def test_errors_are_domain_errors_not_exceptions(self):
        """Test errors flow as data."""
        error = MissingSpecialChar()

        assert isinstance(error, PasswordError)
        assert isinstance(error, DomainError)
        assert not isinstance(error, Exception)

    def test_str_includes_code_and_message(self):
        """Test __str__ format from DomainError."""
        assert str(MissingDigit()) == (
            "password_missing_digit: Password must include a number"
        )

    def test_details_cannot_be_supplied(self):
        """Test no kind accepts a details payload."""
        with pytest.raises(TypeError):
            TooShort(details={"min_length": "12"})  # type: ignore[call-arg]
        with pytest.raises(TypeError):
            Custom("a", details={})  # type: ignore[call-arg]

    def test_details_is_always_none(self):
        """Test details stays None so kinds keep equal and hashable."""
        assert TooShort().details is None
        assert Custom("a").details is None
        assert hash(Custom("a")) == hash(Custom("a"))
        assert hash(MissingUppercase()) == hash(MissingUppercase())
