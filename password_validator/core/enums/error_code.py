"""Password error codes (machine-readable).

Error codes follow ENTITY_REASON naming convention and are carried by every
PasswordError so callers can branch without comparing description strings.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable password validation error codes."""

    # Built-in rule failures
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_MISSING_UPPERCASE = "password_missing_uppercase"
    PASSWORD_MISSING_DIGIT = "password_missing_digit"
    PASSWORD_MISSING_SPECIAL_CHAR = "password_missing_special_char"

    # Caller-defined rule failures
    PASSWORD_RULE_FAILED = "password_rule_failed"
