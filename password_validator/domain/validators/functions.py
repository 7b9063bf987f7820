"""Pydantic-facing validation functions.

Pydantic AfterValidators must raise ValueError to reject a value, so these
functions translate a failed ValidationResult into one ValueError listing
every description.
"""

from collections.abc import Callable
from functools import lru_cache

from password_validator.domain.validators.password_validator import PasswordValidator


@lru_cache(maxsize=1)
def _default_validator() -> PasswordValidator:
    return PasswordValidator.default_rules()


def make_password_check(validator: PasswordValidator) -> Callable[[str], str]:
    """Build a pydantic-compatible check bound to ``validator``.

    Args:
        validator: Validator to run.

    Returns:
        Callable returning the password unchanged, or raising ValueError
        whose message joins every failure description with "; ".
    """

    def check(v: str) -> str:
        result = validator.validate(v)
        if not result.is_valid:
            raise ValueError("; ".join(result.descriptions))
        return v

    return check


def validate_password_strength(v: str) -> str:
    """Validate a password against the default policy.

    Args:
        v: Password to validate.

    Returns:
        Password unchanged (validation only).

    Raises:
        ValueError: If any default rule fails.

    Example:
        >>> validate_password_strength("Password123!")
        'Password123!'
        >>> validate_password_strength("pass")
        ValueError: Password must be at least 8 characters long; ...
    """
    return make_password_check(_default_validator())(v)
