"""Configuration of gofr-env itself.

Example:
    from gofr_env.config import LogSettings

    settings = LogSettings.from_env(prefix="BILLING_SERVICE")
"""

from gofr_env.config.settings import LOG_LEVELS, LogSettings, log_settings_schema

__all__ = [
    "LogSettings",
    "LOG_LEVELS",
    "log_settings_schema",
]
