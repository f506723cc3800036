"""
gofr-env Logger Module

Usage:
    from gofr_env.logger import get_logger, create_logger

    # Configured from environment variables
    logger = get_logger("billing-service")
    logger.info("Application started")

    # Explicit configuration
    logger = create_logger(name="billing-service", level=logging.DEBUG, json_format=True)

Environment Variables:
    {PREFIX}_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    {PREFIX}_LOG_FILE: Optional file path for log output
    {PREFIX}_LOG_JSON: Boolean ("true", "1", "yes", ...) for JSON output format

    Where {PREFIX} is derived from the logger name (e.g., BILLING_SERVICE for
    "billing-service"). The variables are read through gofr_env.config.LogSettings.
"""

import logging
from typing import Optional

from .default_logger import DefaultLogger
from .interface import Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix.

    Examples:
        "gofr-env" -> "GOFR_ENV"
        "billing-service" -> "BILLING_SERVICE"
    """
    return name.upper().replace("-", "_")


def create_logger(
    name: str = "gofr-env",
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> Logger:
    """Create a new logger instance with the specified configuration.

    Options left as None are read from {PREFIX}_LOG_LEVEL, {PREFIX}_LOG_FILE
    and {PREFIX}_LOG_JSON, where PREFIX is derived from the name.

    Args:
        name: Logger name (e.g., "billing-service")
        level: Logging level (defaults to INFO or env var)
        log_file: Optional file path for log output
        json_format: If True, output logs as JSON

    Returns:
        A configured Logger instance
    """
    # LogSettings reads through Environment, which imports this package
    from gofr_env.config.settings import LogSettings

    settings = LogSettings.from_env(prefix=_get_env_prefix(name))

    if level is None:
        level = settings.level_number()

    if log_file is None:
        log_file = settings.log_file

    if json_format is None:
        json_format = settings.json_format

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
    )


def get_logger(name: str = "gofr-env") -> Logger:
    """Get a logger configured from environment variables.

    Args:
        name: Logger name (e.g., "billing-service")

    Returns:
        A configured Logger instance
    """
    return create_logger(name=name)


__all__ = [
    # Interface
    "Logger",
    # Implementations
    "DefaultLogger",
    "StructuredLogger",
    # Formatters (for custom use)
    "JsonFormatter",
    "TextFormatter",
    # Factory functions
    "create_logger",
    "get_logger",
]
