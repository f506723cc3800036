"""Dataclass-based logging settings for gofr-env.

The settings are declared as an Environment schema, so they are read and
validated by the same engine the library provides. Invalid values fall back
to the defaults instead of failing logger creation.
"""

import logging
from dataclasses import dataclass
from typing import MutableMapping, Optional

from gofr_env.environment import (
    Environment,
    EnvironmentConfig,
    boolean_var,
    enum_var,
    string_var,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def log_settings_schema(prefix: str) -> EnvironmentConfig:
    """Build the schema for {prefix}_LOG_LEVEL, {prefix}_LOG_JSON and {prefix}_LOG_FILE."""
    return {
        f"{prefix}_LOG_LEVEL": enum_var(
            LOG_LEVELS + tuple(level.lower() for level in LOG_LEVELS),
            default="INFO",
        ),
        f"{prefix}_LOG_JSON": boolean_var(default=False),
        f"{prefix}_LOG_FILE": string_var(),
    }


@dataclass
class LogSettings:
    """Logging configuration

    Attributes:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Whether to output logs as JSON
        log_file: Optional file path for log output
    """

    level: str = "INFO"
    json_format: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_env(
        cls,
        prefix: str = "GOFR_ENV",
        store: Optional[MutableMapping[str, str]] = None,
    ) -> "LogSettings":
        """Load logging settings from environment variables

        Args:
            prefix: Environment variable prefix (e.g., BILLING_SERVICE)
            store: Mapping to read from (defaults to os.environ)

        Environment variables:
            {prefix}_LOG_LEVEL: Logging level, upper or lower case
            {prefix}_LOG_JSON: Boolean for JSON output
            {prefix}_LOG_FILE: Log file path
        """
        env = Environment(log_settings_schema(prefix), store)

        return cls(
            level=env.get(f"{prefix}_LOG_LEVEL").map(str.upper).unwrap_or("INFO"),
            json_format=env.get(f"{prefix}_LOG_JSON").unwrap_or(False),
            log_file=env.get(f"{prefix}_LOG_FILE").unwrap_or(None),
        )

    def level_number(self) -> int:
        """Get the numeric logging level for ``level``."""
        return logging.getLevelName(self.level) if self.level in LOG_LEVELS else logging.INFO


__all__ = ["LogSettings", "LOG_LEVELS", "log_settings_schema"]
