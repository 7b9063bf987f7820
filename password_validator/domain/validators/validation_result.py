"""Aggregate outcome of running every rule once against one password."""

from collections.abc import Sequence
from dataclasses import dataclass

from password_validator.domain.errors import PasswordError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationResult:
    """Aggregated validation outcome.

    Build instances through ``success()`` and ``failure()``; ``is_valid`` is
    always ``not errors``.

    Attributes:
        is_valid: True when no rule failed.
        errors: Failures in rule configuration order.

    Raises:
        ValueError: If ``is_valid`` disagrees with ``errors``.
    """

    is_valid: bool
    errors: tuple[PasswordError, ...] = ()

    def __post_init__(self) -> None:
        if self.is_valid != (not self.errors):
            raise ValueError("is_valid must be True exactly when errors is empty")

    @classmethod
    def success(cls) -> "ValidationResult":
        """Result for a password that passed every rule."""
        return cls(is_valid=True)

    @classmethod
    def failure(cls, errors: Sequence[PasswordError]) -> "ValidationResult":
        """Result for a password that failed one or more rules.

        Args:
            errors: Non-empty failures in rule order.

        Raises:
            ValueError: If ``errors`` is empty.
        """
        if not errors:
            raise ValueError("failure() requires at least one error")
        return cls(is_valid=False, errors=tuple(errors))

    @property
    def descriptions(self) -> list[str]:
        """Error descriptions in rule order."""
        return [error.description for error in self.errors]
