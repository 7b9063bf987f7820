"""Library-scoped structlog adapter.

The host application owns structlog and stdlib logging configuration. This
adapter only emits events: it never calls ``structlog.configure`` and
resolves the host's configuration lazily on every call, so configuration
done after the first validator was built still applies.

Events go through a stdlib logger named ``password_validator``. Hosts that
never configure logging see nothing below WARNING; hosts that do can raise
or lower that logger's level like any other library's.

Implementation intentionally does NOT inherit from LoggerProtocol (PEP 544
structural subtyping).
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

LOGGER_NAME = "password_validator"


class StructlogAdapter:
    """Emit structured password validation events through the host's structlog.

    Args:
        context: Key-value pairs added to every event from this adapter.
    """

    __slots__ = ("_logger", "_context")

    def __init__(self, **context: Any) -> None:
        # Lazy proxy: processors are looked up when an event is emitted.
        self._logger = structlog.wrap_logger(logging.getLogger(LOGGER_NAME))
        self._context: dict[str, Any] = context

    def _emit(
        self,
        level: str,
        message: str,
        error: Exception | None,
        context: dict[str, Any],
    ) -> None:
        fields = {**self._context, **context}
        if error is not None:
            fields["error_type"] = type(error).__name__
            fields["error_message"] = str(error)
        getattr(self._logger, level)(message, **fields)

    def debug(self, message: str, /, **context: Any) -> None:
        self._emit("debug", message, None, context)

    def info(self, message: str, /, **context: Any) -> None:
        self._emit("info", message, None, context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._emit("warning", message, None, context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error, e.g. a rule that broke the outcome contract.

        Args:
            message: Message text.
            error: Optional exception; adds error_type and error_message.
            **context: Structured key-value context.
        """
        self._emit("error", message, error, context)

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._emit("critical", message, error, context)

    def bind(self, **context: Any) -> StructlogAdapter:
        """Return a new adapter whose events also carry ``context``.

        The original adapter is unchanged.
        """
        return StructlogAdapter(**{**self._context, **context})
