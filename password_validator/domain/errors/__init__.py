"""Password error kinds.

Usage:
    from password_validator.domain.errors import Custom, PasswordError, TooShort
"""

from password_validator.domain.errors.password_error import (
    Custom,
    MissingDigit,
    MissingSpecialChar,
    MissingUppercase,
    PasswordError,
    TooShort,
)

__all__ = [
    "PasswordError",
    "TooShort",
    "MissingUppercase",
    "MissingDigit",
    "MissingSpecialChar",
    "Custom",
]
