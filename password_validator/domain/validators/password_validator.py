"""Password validator and its fluent builder.

A PasswordValidator is an immutable, ordered composition of rules. Every rule
runs on every call (no fail-fast) and all failures are collected, in rule
order, into a ValidationResult. Failures are returned, never raised.

Usage:
    validator = (
        PasswordValidator.builder()
        .min_length(12)
        .require_uppercase()
        .require_digit()
        .require_special_character("!@#")
        .add_rule(NoSpacesRule())
        .build()
    )

    result = validator.validate("Correct Horse 1!")
    if not result.is_valid:
        for description in result.descriptions:
            print(description)

Thread safety:
    A built validator holds no per-call state and may be shared between
    threads. A builder is single-owner; callers must serialize its use.
"""

from __future__ import annotations

from collections.abc import Iterable

from password_validator.core.config import Settings, get_settings
from password_validator.core.container import get_logger
from password_validator.core.constants import DEFAULT_MIN_LENGTH
from password_validator.core.result import Failure, Success
from password_validator.domain.errors import PasswordError
from password_validator.domain.protocols import LoggerProtocol, PasswordRule
from password_validator.domain.rules import (
    DigitRule,
    MinLengthRule,
    SpecialCharacterRule,
    UppercaseRule,
)
from password_validator.domain.validators.registry import get_all_password_rules
from password_validator.domain.validators.validation_result import ValidationResult


class PasswordValidator:
    """Immutable ordered composition of password rules.

    Args:
        rules: Rules to evaluate, in order. Copied on construction.
        logger: Optional logger; defaults to the library logger.
    """

    __slots__ = ("_rules", "_logger")

    def __init__(
        self,
        rules: Iterable[PasswordRule] = (),
        *,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._rules: tuple[PasswordRule, ...] = tuple(rules)
        self._logger = logger if logger is not None else get_logger()

    @property
    def rules(self) -> tuple[PasswordRule, ...]:
        """Configured rules in evaluation order."""
        return self._rules

    def validate(self, password: str) -> ValidationResult:
        """Run every rule against ``password`` and aggregate the failures.

        Args:
            password: Password to check. Any string is accepted.

        Returns:
            ValidationResult.success() when every rule passed, otherwise
            ValidationResult.failure() with one error per failing rule in
            configuration order.

        Raises:
            TypeError: If a rule returns something other than Success or
                Failure carrying a PasswordError (a defect in that rule).
        """
        errors: list[PasswordError] = []

        for rule in self._rules:
            outcome = rule.validate(password)
            match outcome:
                case Success():
                    continue
                case Failure(error=PasswordError() as error):
                    errors.append(error)
                case _:
                    rule_name = type(rule).__name__
                    self._logger.error(
                        "Password rule returned unsupported outcome",
                        rule=rule_name,
                        outcome_type=type(outcome).__name__,
                    )
                    raise TypeError(
                        f"{rule_name}.validate() must return Success or "
                        f"Failure(error=PasswordError), got {type(outcome).__name__}"
                    )

        self._logger.debug(
            "Password validated",
            rule_count=len(self._rules),
            error_count=len(errors),
            error_codes=[error.code.value for error in errors],
        )

        if errors:
            return ValidationResult.failure(errors)
        return ValidationResult.success()

    def __repr__(self) -> str:
        return f"PasswordValidator(rules={list(self._rules)!r})"

    @staticmethod
    def builder(*, logger: LoggerProtocol | None = None) -> PasswordValidatorBuilder:
        """Start configuring a new validator."""
        return PasswordValidatorBuilder(logger=logger)

    @staticmethod
    def default_rules() -> PasswordValidator:
        """Validator for the canonical policy.

        Equivalent to ``min_length(8).require_uppercase().require_digit()
        .require_special_character()``.
        """
        return (
            PasswordValidator.builder()
            .min_length(DEFAULT_MIN_LENGTH)
            .require_uppercase()
            .require_digit()
            .require_special_character()
            .build()
        )

    @staticmethod
    def from_settings(settings: Settings | None = None) -> PasswordValidator:
        """Validator for the policy described by ``settings``.

        Rules come from the built-in rules registry, in registration order
        (length, uppercase, digit, special character); each is skipped when
        its enabling setting is off. With default settings the result
        behaves like ``default_rules()``.

        Args:
            settings: Settings to read; defaults to the cached settings.

        Raises:
            pydantic.ValidationError: If settings are loaded here and an
                environment variable is invalid.
        """
        settings = settings if settings is not None else get_settings()

        builder = PasswordValidator.builder()
        for meta in get_all_password_rules():
            if meta.enabled_by is not None and not getattr(settings, meta.enabled_by):
                continue
            append_rule = getattr(builder, meta.builder_method)
            append_rule(*(getattr(settings, name) for name in meta.settings_args))
        return builder.build()


class PasswordValidatorBuilder:
    """Fluent accumulator of rules.

    Every configuration method appends exactly one rule and returns the
    builder. Rules can only be appended, never removed or reordered.
    """

    def __init__(self, *, logger: LoggerProtocol | None = None) -> None:
        self._rules: list[PasswordRule] = []
        self._logger = logger

    def min_length(self, length: int) -> PasswordValidatorBuilder:
        self._rules.append(MinLengthRule(length))
        return self

    def require_uppercase(self) -> PasswordValidatorBuilder:
        self._rules.append(UppercaseRule())
        return self

    def require_digit(self) -> PasswordValidatorBuilder:
        self._rules.append(DigitRule())
        return self

    def require_special_character(
        self, special_chars: str | None = None
    ) -> PasswordValidatorBuilder:
        """Append a special character rule.

        Args:
            special_chars: Accepted characters; None uses the default set.
        """
        if special_chars is not None:
            self._rules.append(SpecialCharacterRule(special_chars))
        else:
            self._rules.append(SpecialCharacterRule())
        return self

    def add_rule(self, rule: PasswordRule) -> PasswordValidatorBuilder:
        """Append a caller-supplied rule.

        Args:
            rule: Any object with a ``validate(password)`` method returning
                a rule outcome.

        Raises:
            TypeError: If ``rule`` has no ``validate`` method.
        """
        if not isinstance(rule, PasswordRule):
            raise TypeError(
                f"{type(rule).__name__} does not implement validate(password)"
            )
        self._rules.append(rule)
        return self

    def build(self) -> PasswordValidator:
        """Create a validator from a snapshot of the rules added so far.

        Later changes to this builder do not affect the returned validator.
        """
        logger = self._logger if self._logger is not None else get_logger()
        logger.debug(
            "Password validator built",
            rule_count=len(self._rules),
            rules=[type(rule).__name__ for rule in self._rules],
        )
        return PasswordValidator(list(self._rules), logger=logger)
