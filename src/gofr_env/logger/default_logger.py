"""
Default logger implementation with session tracking.

Writes formatted lines to a stream (stderr by default) and drops messages
below a minimum level. Used by Environment when no logger is injected, since
the factory loggers are themselves configured through an Environment.
"""

import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, TextIO

from .interface import Logger


class DefaultLogger(Logger):
    """Stream logger with session tracking and a level threshold.

    Example:
        logger = DefaultLogger(level=logging.WARNING)
        logger.debug("Dropped")
        logger.warning("Written", key="PORT")
    """

    def __init__(
        self,
        name: str = "gofr-env",
        output: TextIO | None = None,
        include_timestamp: bool = True,
        level: int = logging.DEBUG,
    ):
        """Initialize the default logger.

        Args:
            name: Logger name (included in output for identification)
            output: Output stream (default: stderr at the time of logging)
            include_timestamp: Whether to include timestamps in log messages
            level: Minimum level written (logging.DEBUG, logging.INFO, etc.)
        """
        self._name = name
        self._session_id = str(uuid.uuid4())
        self._output = output
        self._include_timestamp = include_timestamp
        self._level = level

    def get_session_id(self) -> str:
        """Get the current session ID."""
        return self._session_id

    def _format_message(self, level: int, message: str, **kwargs: Any) -> str:
        """Format a log message with session ID and optional timestamp."""
        parts = []

        if self._include_timestamp:
            parts.append(datetime.now(timezone.utc).isoformat())

        parts.append(f"[{logging.getLevelName(level)}]")
        parts.append(f"[{self._name}]")
        parts.append(f"[session:{self._session_id[:8]}]")
        parts.append(message)

        if kwargs:
            extra = " ".join(f"{k}={v}" for k, v in kwargs.items())
            parts.append(f"({extra})")

        return " ".join(parts)

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        if level < self._level:
            return
        output = self._output if self._output is not None else sys.stderr
        print(self._format_message(level, message, **kwargs), file=output, flush=True)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message."""
        self._log(logging.CRITICAL, message, **kwargs)
