"""Validators package exports.

Exports:
    - PasswordValidator, PasswordValidatorBuilder, ValidationResult
    - Pydantic-facing functions (from functions.py)
    - Registry components (from registry.py)
"""

from password_validator.domain.validators.functions import (
    make_password_check,
    validate_password_strength,
)
from password_validator.domain.validators.password_validator import (
    PasswordValidator,
    PasswordValidatorBuilder,
)
from password_validator.domain.validators.registry import (
    PASSWORD_RULES_REGISTRY,
    PasswordRuleMetadata,
    get_all_password_rules,
    get_password_rule,
    get_statistics,
)
from password_validator.domain.validators.validation_result import ValidationResult

__all__ = [
    "PasswordValidator",
    "PasswordValidatorBuilder",
    "ValidationResult",
    "make_password_check",
    "validate_password_strength",
    "PASSWORD_RULES_REGISTRY",
    "PasswordRuleMetadata",
    "get_password_rule",
    "get_all_password_rules",
    "get_statistics",
]
