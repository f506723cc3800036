"""Variable configuration types.

Each supported variable kind has its own frozen dataclass. The ``type`` field
is fixed per class and is what the accessor dispatches on.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, Mapping, Optional, Sequence, Union

from gofr_env.duration import Duration, DurationUnit


class VariableType(str, Enum):
    """The possible types for an environment variable."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"
    DURATION = "duration"


NumberFormat = Literal["integer", "decimal"]

# A sequence of permitted strings, a mapping whose values are permitted,
# an Enum class whose member values are permitted, or a plain class whose
# public constant attributes are permitted.
EnumSource = Union[Sequence[str], Mapping[str, str], type]


@dataclass(frozen=True)
class StringVariableConfig:
    """Config for a string environment variable

    Attributes:
        default: Value used when the variable is not set
        pattern: Regular expression (or its source text) the value must match
        should_allow_empty: Whether a blank value is accepted (default: False)
    """

    default: Optional[str] = None
    pattern: Optional[Union[str, "re.Pattern[str]"]] = None
    should_allow_empty: bool = False
    type: VariableType = field(default=VariableType.STRING, init=False)


@dataclass(frozen=True)
class NumberVariableConfig:
    """Config for a number environment variable

    Attributes:
        default: Value used when the variable is not set
        format: "integer" to reject fractional values, "decimal" to always return floats
        min: Inclusive lower bound
        max: Inclusive upper bound
    """

    default: Optional[Union[int, float]] = None
    format: Optional[NumberFormat] = None
    min: Optional[Union[int, float]] = None
    max: Optional[Union[int, float]] = None
    type: VariableType = field(default=VariableType.NUMBER, init=False)


@dataclass(frozen=True)
class BooleanVariableConfig:
    """Config for a boolean environment variable

    The valid values are compared case-insensitively. When not provided,
    ("true", "1", "yes", "y") and ("false", "0", "no", "n") are used.
    """

    default: Optional[bool] = None
    valid_true_values: Optional[Sequence[str]] = None
    valid_false_values: Optional[Sequence[str]] = None
    type: VariableType = field(default=VariableType.BOOLEAN, init=False)


@dataclass(frozen=True)
class EnumVariableConfig:
    """Config for an enum environment variable

    Attributes:
        enum: The permitted values (sequence, mapping or Enum class)
        default: Value used when the variable is not set
    """

    enum: EnumSource
    default: Optional[Any] = None
    type: VariableType = field(default=VariableType.ENUM, init=False)


@dataclass(frozen=True)
class DurationVariableConfig:
    """Config for a duration environment variable

    Attributes:
        unit: The unit a bare number is interpreted in
        default: Value used when the variable is not set
    """

    unit: Union[DurationUnit, str]
    default: Optional[Duration] = None
    type: VariableType = field(default=VariableType.DURATION, init=False)


VariableConfig = Union[
    StringVariableConfig,
    NumberVariableConfig,
    BooleanVariableConfig,
    EnumVariableConfig,
    DurationVariableConfig,
]

# Schema: variable name -> configuration
EnvironmentConfig = Mapping[str, VariableConfig]

__all__ = [
    "VariableType",
    "NumberFormat",
    "EnumSource",
    "StringVariableConfig",
    "NumberVariableConfig",
    "BooleanVariableConfig",
    "EnumVariableConfig",
    "DurationVariableConfig",
    "VariableConfig",
    "EnvironmentConfig",
]
