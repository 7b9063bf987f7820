"""Built-in Password Rules Registry.

Single source of truth for the built-in rules: which class implements each
rule, which error code it reports, which builder method appends it and
which settings drive it. ``PasswordValidator.from_settings`` builds its
validator by walking this registry in registration order. Compliance tests
check that every built-in rule and every non-custom error code is registered
exactly once.
"""

from dataclasses import dataclass

from password_validator.core.enums import ErrorCode
from password_validator.domain.rules import (
    DigitRule,
    MinLengthRule,
    SpecialCharacterRule,
    UppercaseRule,
)


@dataclass(frozen=True, kw_only=True)
class PasswordRuleMetadata:
    """Metadata for a single built-in rule.

    Attributes:
        rule_name: Unique identifier for the rule (e.g., 'min_length').
        rule_class: Class implementing the rule.
        error_code: Code of the error the rule reports on failure.
        builder_method: Name of the PasswordValidatorBuilder method that
            appends the rule.
        description: Human-readable summary of the requirement.
        enabled_by: Boolean Settings field switching the rule on, or None
            when the rule is always part of a settings-driven policy.
        settings_args: Settings fields passed, in order, to builder_method.
    """

    rule_name: str
    rule_class: type
    error_code: ErrorCode
    builder_method: str
    description: str
    enabled_by: str | None = None
    settings_args: tuple[str, ...] = ()


# =============================================================================
# Password Rules Registry
# =============================================================================

PASSWORD_RULES_REGISTRY: dict[str, PasswordRuleMetadata] = {
    "min_length": PasswordRuleMetadata(
        rule_name="min_length",
        rule_class=MinLengthRule,
        error_code=ErrorCode.PASSWORD_TOO_SHORT,
        builder_method="min_length",
        description="At least N code points (default 8)",
        settings_args=("min_length",),
    ),
    "uppercase": PasswordRuleMetadata(
        rule_name="uppercase",
        rule_class=UppercaseRule,
        error_code=ErrorCode.PASSWORD_MISSING_UPPERCASE,
        builder_method="require_uppercase",
        description="At least one Unicode uppercase letter",
        enabled_by="require_uppercase",
    ),
    "digit": PasswordRuleMetadata(
        rule_name="digit",
        rule_class=DigitRule,
        error_code=ErrorCode.PASSWORD_MISSING_DIGIT,
        builder_method="require_digit",
        description="At least one decimal digit",
        enabled_by="require_digit",
    ),
    "special_character": PasswordRuleMetadata(
        rule_name="special_character",
        rule_class=SpecialCharacterRule,
        error_code=ErrorCode.PASSWORD_MISSING_SPECIAL_CHAR,
        builder_method="require_special_character",
        description="At least one character from a configurable special set",
        enabled_by="require_special_character",
        settings_args=("special_characters",),
    ),
}


# =============================================================================
# Helper Functions
# =============================================================================


def get_password_rule(rule_name: str) -> PasswordRuleMetadata | None:
    """Get rule metadata by name.

    Args:
        rule_name: Name of the rule (e.g., 'digit').

    Returns:
        PasswordRuleMetadata if found, None otherwise.
    """
    return PASSWORD_RULES_REGISTRY.get(rule_name)


def get_all_password_rules() -> list[PasswordRuleMetadata]:
    """Get all built-in rules in registration order."""
    return list(PASSWORD_RULES_REGISTRY.values())


def get_statistics() -> dict[str, int | list[str]]:
    """Get registry statistics.

    Returns:
        Dictionary with:
        - total_rules: Number of registered rules
        - error_codes: Error code values covered by the registry
    """
    rules = list(PASSWORD_RULES_REGISTRY.values())
    return {
        "total_rules": len(rules),
        "error_codes": [rule.error_code.value for rule in rules],
    }
