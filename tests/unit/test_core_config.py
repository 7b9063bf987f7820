"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Default password policy
- Loading from PASSWORD_VALIDATOR_* environment variables
- Validation (min_length, special_characters)
- Lazy, cached loading (no import-time settings)
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

import password_validator.core.config as config_module
from password_validator import PasswordValidator
from password_validator.core.config import Settings, get_settings
from password_validator.core.constants import DEFAULT_SPECIAL_CHARACTERS


@pytest.fixture
def clear_settings_cache():
    """Reset the cached settings around a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.unit
class TestSettingsDefaults:
    """Test default settings."""

    def test_default_policy(self):
        """Test defaults describe the canonical policy."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.min_length == 8
        assert settings.require_uppercase is True
        assert settings.require_digit is True
        assert settings.require_special_character is True
        assert settings.special_characters == DEFAULT_SPECIAL_CHARACTERS


@pytest.mark.unit
class TestSettingsFromEnvironment:
    """Test loading settings from environment variables."""

    def test_prefixed_variables_are_loaded(self):
        """Test PASSWORD_VALIDATOR_* variables override defaults."""
        env_values = {
            "PASSWORD_VALIDATOR_MIN_LENGTH": "12",
            "PASSWORD_VALIDATOR_REQUIRE_DIGIT": "false",
            "PASSWORD_VALIDATOR_SPECIAL_CHARACTERS": "!#",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.min_length == 12
        assert settings.require_digit is False
        assert settings.special_characters == "!#"

    def test_unprefixed_variables_are_ignored(self):
        """Test plain MIN_LENGTH does not leak into settings."""
        with patch.dict(os.environ, {"MIN_LENGTH": "99"}, clear=True):
            settings = Settings()

        assert settings.min_length == 8


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings field validation."""

    def test_negative_min_length_rejected(self):
        """Test min_length must be >= 0."""
        with pytest.raises(ValidationError):
            Settings(min_length=-1)

    def test_zero_min_length_allowed(self):
        """Test min_length of 0 disables the length requirement."""
        assert Settings(min_length=0).min_length == 0

    def test_empty_special_characters_rejected(self):
        """Test an empty special set is rejected."""
        with pytest.raises(ValidationError):
            Settings(special_characters="")


@pytest.mark.unit
class TestGetSettings:
    """Test cached, lazily loaded settings."""

    def test_get_settings_is_cached(self, clear_settings_cache):
        """Test get_settings returns the same instance."""
        assert get_settings() is get_settings()

    def test_no_settings_instance_created_at_import(self):
        """Test the module exposes no eagerly loaded settings object."""
        assert not any(
            isinstance(value, Settings) for value in vars(config_module).values()
        )

    def test_invalid_environment_only_fails_settings_driven_calls(
        self, clear_settings_cache, mock_logger
    ):
        """Test a bad variable surfaces in from_settings(), not elsewhere."""
        with patch.dict(os.environ, {"PASSWORD_VALIDATOR_MIN_LENGTH": "-5"}):
            assert PasswordValidator.default_rules().validate("Password123!").is_valid
            assert PasswordValidator.builder(logger=mock_logger).require_digit().build()

            with pytest.raises(ValidationError):
                PasswordValidator.from_settings()
