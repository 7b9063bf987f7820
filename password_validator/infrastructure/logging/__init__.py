"""Logging adapters implementing LoggerProtocol."""

from password_validator.infrastructure.logging.structlog_adapter import (
    LOGGER_NAME,
    StructlogAdapter,
)

__all__ = ["LOGGER_NAME", "StructlogAdapter"]
