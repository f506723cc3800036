"""Typed environment variables.

Declare a schema with the variable builders, then read values through an
Environment:

    from gofr_env.environment import Environment, boolean_var, number_var

    env = Environment({
        "WORKERS": number_var(format="integer", min=1, default=4),
        "VERBOSE": boolean_var(default=False),
    })

    workers = env.get_expect("WORKERS")
"""

from gofr_env.environment.accessor import UNKNOWN_VARIABLE_MESSAGE, Environment
from gofr_env.environment.errors import (
    EnvironmentErrorType,
    EnvironmentVariableError,
    VariableNotFoundError,
    VariableParseError,
    VariableUnknownError,
)
from gofr_env.environment.types import (
    BooleanVariableConfig,
    DurationVariableConfig,
    EnumVariableConfig,
    EnvironmentConfig,
    NumberVariableConfig,
    StringVariableConfig,
    VariableConfig,
    VariableType,
)
from gofr_env.environment.variable import (
    boolean_var,
    duration_var,
    enum_var,
    number_var,
    string_var,
)

__all__ = [
    # Accessor
    "Environment",
    "UNKNOWN_VARIABLE_MESSAGE",
    # Builders
    "string_var",
    "number_var",
    "boolean_var",
    "enum_var",
    "duration_var",
    # Types
    "VariableType",
    "VariableConfig",
    "EnvironmentConfig",
    "StringVariableConfig",
    "NumberVariableConfig",
    "BooleanVariableConfig",
    "EnumVariableConfig",
    "DurationVariableConfig",
    # Errors
    "EnvironmentErrorType",
    "EnvironmentVariableError",
    "VariableUnknownError",
    "VariableNotFoundError",
    "VariableParseError",
]
