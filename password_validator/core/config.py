"""
Configuration management using Pydantic Settings.

Type-safe, validated password policy loaded from environment variables with
the ``PASSWORD_VALIDATOR_`` prefix. Hosts usually build validators in code;
settings exist for hosts that want the policy driven by deployment
configuration through ``PasswordValidator.from_settings()``.

Settings are read on first use, never at import time, so a bad environment
value surfaces where ``get_settings()`` is called instead of breaking
``import password_validator``.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from password_validator.core.config import get_settings

    if get_settings().require_digit:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from password_validator.core.constants import (
    DEFAULT_MIN_LENGTH,
    DEFAULT_SPECIAL_CHARACTERS,
)


class Settings(BaseSettings):
    """
    Password policy settings (flat structure).

    Configuration precedence:
        1. Keyword arguments
        2. Environment variables (PASSWORD_VALIDATOR_*)
        3. Default values (the canonical default policy)
    """

    min_length: int = Field(
        default=DEFAULT_MIN_LENGTH,
        ge=0,
        description="Minimum password length in code points",
    )
    require_uppercase: bool = Field(
        default=True,
        description="Require at least one uppercase letter",
    )
    require_digit: bool = Field(
        default=True,
        description="Require at least one decimal digit",
    )
    require_special_character: bool = Field(
        default=True,
        description="Require at least one character from special_characters",
    )
    special_characters: str = Field(
        default=DEFAULT_SPECIAL_CHARACTERS,
        description="Characters accepted by the special character rule",
    )

    model_config = SettingsConfigDict(
        env_prefix="PASSWORD_VALIDATOR_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("special_characters")
    @classmethod
    def validate_special_characters(cls, v: str) -> str:
        """
        Reject an empty special character set.

        An empty set would make the special character rule fail for every
        password.

        Raises:
            ValueError: If no characters are configured.
        """
        if not v:
            raise ValueError("special_characters must not be empty")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.

    Raises:
        pydantic.ValidationError: If an environment variable is invalid.
    """
    return Settings()
