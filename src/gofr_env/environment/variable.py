"""Builders for environment variable configurations.

Example:
    from gofr_env.environment import Environment, duration_var, enum_var

    env = Environment({
        "APP_MODE": enum_var(["development", "production"]),
        "TIMEOUT": duration_var("seconds", default=timedelta(seconds=30)),
    })

The builders never validate their options; an invalid pattern or inverted
bounds is reported when the variable is parsed.
"""

import re
from typing import Any, Optional, Sequence, Union

from gofr_env.duration import Duration, DurationUnit
from gofr_env.environment.types import (
    BooleanVariableConfig,
    DurationVariableConfig,
    EnumSource,
    EnumVariableConfig,
    NumberFormat,
    NumberVariableConfig,
    StringVariableConfig,
)


def string_var(
    *,
    default: Optional[str] = None,
    pattern: Optional[Union[str, "re.Pattern[str]"]] = None,
    should_allow_empty: bool = False,
) -> StringVariableConfig:
    """Create a string environment variable."""
    return StringVariableConfig(
        default=default,
        pattern=pattern,
        should_allow_empty=should_allow_empty,
    )


def number_var(
    *,
    default: Optional[Union[int, float]] = None,
    format: Optional[NumberFormat] = None,
    min: Optional[Union[int, float]] = None,
    max: Optional[Union[int, float]] = None,
) -> NumberVariableConfig:
    """Create a number environment variable."""
    return NumberVariableConfig(default=default, format=format, min=min, max=max)


def boolean_var(
    *,
    default: Optional[bool] = None,
    valid_true_values: Optional[Sequence[str]] = None,
    valid_false_values: Optional[Sequence[str]] = None,
) -> BooleanVariableConfig:
    """Create a boolean environment variable."""
    return BooleanVariableConfig(
        default=default,
        valid_true_values=valid_true_values,
        valid_false_values=valid_false_values,
    )


def enum_var(values: EnumSource, *, default: Optional[Any] = None) -> EnumVariableConfig:
    """Create an enum environment variable.

    Args:
        values: The permitted values. Either a sequence of strings, a mapping
            whose values are the permitted strings, an Enum class, or a plain
            class of string constants.
        default: Value used when the variable is not set
    """
    return EnumVariableConfig(enum=values, default=default)


def duration_var(
    unit: Union[DurationUnit, str],
    *,
    default: Optional[Duration] = None,
) -> DurationVariableConfig:
    """Create a duration environment variable.

    Args:
        unit: The unit to interpret the raw number as (e.g. "seconds")
        default: Value used when the variable is not set
    """
    return DurationVariableConfig(unit=unit, default=default)


__all__ = [
    "string_var",
    "number_var",
    "boolean_var",
    "enum_var",
    "duration_var",
]
