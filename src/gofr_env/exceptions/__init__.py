"""Common exceptions for gofr-env.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery

Usage:
    from gofr_env.exceptions import GofrEnvError, ConfigurationError
"""

from gofr_env.exceptions.base import (
    ConfigurationError,
    GofrEnvError,
)

__all__ = [
    "GofrEnvError",
    "ConfigurationError",
]
