"""Built-in password rules.

Each rule is a frozen dataclass implementing PasswordRule structurally.
"""

from password_validator.domain.rules.digit_rule import DigitRule
from password_validator.domain.rules.min_length_rule import MinLengthRule
from password_validator.domain.rules.special_character_rule import (
    SpecialCharacterRule,
)
from password_validator.domain.rules.uppercase_rule import UppercaseRule

__all__ = [
    "MinLengthRule",
    "UppercaseRule",
    "DigitRule",
    "SpecialCharacterRule",
]
