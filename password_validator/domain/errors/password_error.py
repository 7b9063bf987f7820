"""Password validation errors.

Closed set of built-in failure kinds plus an open-ended Custom kind for
caller-defined rules. Every kind is a frozen DomainError subclass, so errors
travel as data inside Failure results and ValidationResult.errors.

Kinds:
    PasswordError (base)
    ├── TooShort
    ├── MissingUppercase
    ├── MissingDigit
    ├── MissingSpecialChar
    └── Custom(message)

Note:
    TooShort always reports the 8-character text, whatever minimum the rule
    was configured with. Callers may match on that string.
"""

from dataclasses import dataclass, field

from password_validator.core.enums import ErrorCode
from password_validator.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordError(DomainError):
    """Base class for all password validation failures.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable description of the failure.
        details: Always None; password errors carry no payload beyond the
            message, which keeps them equal per kind and hashable.
    """

    details: dict[str, str] | None = field(default=None, init=False)

    @property
    def description(self) -> str:
        """Human-readable description shown to end users."""
        return self.message


@dataclass(frozen=True, slots=True, kw_only=True)
class TooShort(PasswordError):
    """Password is shorter than the configured minimum length."""

    code: ErrorCode = field(default=ErrorCode.PASSWORD_TOO_SHORT, init=False)
    message: str = field(
        default="Password must be at least 8 characters long", init=False
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class MissingUppercase(PasswordError):
    """Password has no uppercase letter."""

    code: ErrorCode = field(default=ErrorCode.PASSWORD_MISSING_UPPERCASE, init=False)
    message: str = field(
        default="Password must include an uppercase letter", init=False
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class MissingDigit(PasswordError):
    """Password has no decimal digit."""

    code: ErrorCode = field(default=ErrorCode.PASSWORD_MISSING_DIGIT, init=False)
    message: str = field(default="Password must include a number", init=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class MissingSpecialChar(PasswordError):
    """Password has no character from the configured special set."""

    code: ErrorCode = field(
        default=ErrorCode.PASSWORD_MISSING_SPECIAL_CHAR, init=False
    )
    message: str = field(
        default="Password must include a special character", init=False
    )


@dataclass(frozen=True, slots=True)
class Custom(PasswordError):
    """Failure reported by a caller-defined rule.

    The description is the message exactly as the rule produced it.

    Example:
        >>> error = Custom("Password must not contain 'admin'")
        >>> error.description
        "Password must not contain 'admin'"
    """

    code: ErrorCode = field(default=ErrorCode.PASSWORD_RULE_FAILED, init=False)
    message: str
