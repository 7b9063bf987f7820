"""Pytest configuration shared by all tests.

This configuration ensures:
1. Validators under test can get a mock logger
2. structlog configuration changed by a test is reset afterwards
"""

from unittest.mock import MagicMock

import pytest
import structlog

from password_validator import PasswordValidator


@pytest.fixture
def mock_logger():
    """Logger double satisfying LoggerProtocol."""
    return MagicMock()


@pytest.fixture
def builder(mock_logger):
    """Fresh builder wired to the mock logger."""
    return PasswordValidator.builder(logger=mock_logger)


@pytest.fixture
def reset_structlog():
    """Restore structlog defaults after a test configures it."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
