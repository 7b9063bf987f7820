"""Centralized constants for the default password policy.

These are fixed defaults, NOT environment-specific configuration. For
environment-driven overrides, use `password_validator/core/config.py`.

Example:
    >>> from password_validator.core.constants import DEFAULT_MIN_LENGTH
    >>> DEFAULT_MIN_LENGTH
    8
"""

# =============================================================================
# Default Policy
# =============================================================================

DEFAULT_MIN_LENGTH: int = 8
"""Minimum password length (code points) used by default_rules()."""

DEFAULT_SPECIAL_CHARACTERS: str = "!@#$%^&*(),.?\":{}|<>-_+=[]\\;'`~"
"""Characters accepted by SpecialCharacterRule when no set is given."""
