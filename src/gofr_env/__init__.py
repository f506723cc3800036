"""gofr-env - Typed, validated environment variables.

This package provides:
- environment: schema builders and the Environment accessor
- duration: unit-aware durations for duration variables
- exceptions: common exception classes with structured error info
- logger: logging with session tracking and JSON support
- config: logging settings read through an Environment
- testing: pytest fixtures (load as a pytest plugin)
"""

__version__ = "1.0.0"

from gofr_env.duration import Duration, DurationUnit, duration_from

from gofr_env.environment import (
    Environment,
    EnvironmentErrorType,
    EnvironmentVariableError,
    VariableNotFoundError,
    VariableParseError,
    VariableType,
    VariableUnknownError,
    boolean_var,
    duration_var,
    enum_var,
    number_var,
    string_var,
)

from gofr_env.exceptions import (
    ConfigurationError,
    GofrEnvError,
)

from gofr_env.logger import (
    DefaultLogger,
    Logger,
    StructuredLogger,
    create_logger,
    get_logger,
)

__all__ = [
    "__version__",
    # Environment
    "Environment",
    "VariableType",
    "string_var",
    "number_var",
    "boolean_var",
    "enum_var",
    "duration_var",
    # Duration
    "Duration",
    "DurationUnit",
    "duration_from",
    # Errors
    "EnvironmentErrorType",
    "EnvironmentVariableError",
    "VariableUnknownError",
    "VariableNotFoundError",
    "VariableParseError",
    "GofrEnvError",
    "ConfigurationError",
    # Logger
    "Logger",
    "DefaultLogger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
]
