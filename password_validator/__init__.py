"""Composable password validation.

Usage:
    from password_validator import PasswordValidator

    result = PasswordValidator.default_rules().validate("Password123!")
    assert result.is_valid
"""

import logging

from password_validator.core.result import Failure, Result, Success
from password_validator.domain.errors import (
    Custom,
    MissingDigit,
    MissingSpecialChar,
    MissingUppercase,
    PasswordError,
    TooShort,
)
from password_validator.domain.protocols import PasswordRule, RuleOutcome
from password_validator.domain.rules import (
    DigitRule,
    MinLengthRule,
    SpecialCharacterRule,
    UppercaseRule,
)
from password_validator.domain.validators import (
    PasswordValidator,
    PasswordValidatorBuilder,
    ValidationResult,
)

# Library logger: the host decides handlers and levels.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Success",
    "Failure",
    "Result",
    "PasswordError",
    "TooShort",
    "MissingUppercase",
    "MissingDigit",
    "MissingSpecialChar",
    "Custom",
    "PasswordRule",
    "RuleOutcome",
    "MinLengthRule",
    "UppercaseRule",
    "DigitRule",
    "SpecialCharacterRule",
    "PasswordValidator",
    "PasswordValidatorBuilder",
    "ValidationResult",
]
