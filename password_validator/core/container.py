"""Composition root for shared infrastructure.

Adapter selection happens here so domain code only depends on protocols.

Usage:
    from password_validator.core.container import get_logger

    logger = get_logger()
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from password_validator.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the library-scoped logger singleton.

    Rendering, level and destination are left to the host application's
    structlog and logging configuration.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from password_validator.infrastructure.logging.structlog_adapter import (
        StructlogAdapter,
    )

    return StructlogAdapter()
