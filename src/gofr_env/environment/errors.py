"""Environment variable errors.

Hierarchy:
    ConfigurationError
    └── EnvironmentVariableError
        ├── VariableUnknownError   (key missing from the schema)
        ├── VariableNotFoundError  (no value and no default)
        └── VariableParseError     (value fails its type's rules)

Errors are returned inside ``Err`` by ``Environment.get`` and raised by
``Environment.get_expect`` and ``Environment.snapshot``.
"""

from enum import Enum
from typing import Any, Dict, Optional

from gofr_env.environment.types import VariableConfig
from gofr_env.exceptions import ConfigurationError


class EnvironmentErrorType(str, Enum):
    """Environment error types."""

    VARIABLE_NOT_FOUND = "not-found-error"
    VARIABLE_PARSE = "parse-error"
    VARIABLE_UNKNOWN = "unknown-error"


class EnvironmentVariableError(ConfigurationError):
    """An error for a single environment variable.

    Attributes:
        type: The kind of failure
        key: The name of the environment variable
        config: The matching schema entry (None if the key is unknown)
        raw: The raw value (only set for parse errors)
    """

    def __init__(
        self,
        error_type: EnvironmentErrorType,
        key: str,
        config: Optional[VariableConfig] = None,
        raw: Optional[str] = None,
    ):
        self.type = error_type
        self.key = key
        self.config = config
        self.raw = raw

        details: Dict[str, Any] = {"key": key}
        if config is not None:
            details["variable_type"] = config.type.value
        if raw is not None:
            details["raw"] = raw

        super().__init__(
            code=error_type.value,
            message=f"Error getting environment variable {key}",
            details=details,
        )

    def with_message(self, message: str) -> "EnvironmentVariableError":
        """Set the message of the error and return the error."""
        self.message = message
        self.args = (message,)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a dictionary, including the error kind and key.

        The raw value stays in ``details`` only; the config is not serialized.
        """
        data = super().to_dict()
        data["error"] = type(self).__name__
        data["key"] = self.key
        return data


class VariableUnknownError(EnvironmentVariableError):
    """Raised when a key is not declared in the schema."""

    def __init__(self, key: str):
        super().__init__(EnvironmentErrorType.VARIABLE_UNKNOWN, key)


class VariableNotFoundError(EnvironmentVariableError):
    """Raised when a declared variable has no value and no default."""

    def __init__(self, key: str, config: VariableConfig):
        super().__init__(EnvironmentErrorType.VARIABLE_NOT_FOUND, key, config)


class VariableParseError(EnvironmentVariableError):
    """Raised when a raw value fails its variable's validation rules."""

    def __init__(self, key: str, config: VariableConfig, raw: str):
        super().__init__(EnvironmentErrorType.VARIABLE_PARSE, key, config, raw)


__all__ = [
    "EnvironmentErrorType",
    "EnvironmentVariableError",
    "VariableUnknownError",
    "VariableNotFoundError",
    "VariableParseError",
]
