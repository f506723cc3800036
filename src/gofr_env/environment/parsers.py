"""Parsing routines for raw environment variable values.

Each parser takes the raw string and its variable configuration and returns
``Ok(value)`` or ``Err(reason)``. The reason is a short lowercase phrase; the
accessor turns it into a VariableParseError.
"""

import math
import re
from enum import Enum
from typing import Any, List, Mapping, Union, cast

from result import Err, Ok, Result

from gofr_env.duration import Duration, DurationUnit, duration_from
from gofr_env.environment.types import (
    BooleanVariableConfig,
    DurationVariableConfig,
    EnumSource,
    EnumVariableConfig,
    NumberVariableConfig,
    StringVariableConfig,
    VariableConfig,
    VariableType,
)

DEFAULT_VALID_TRUE_VALUES = ("true", "1", "yes", "y")
DEFAULT_VALID_FALSE_VALUES = ("false", "0", "no", "n")

INFINITY_LITERALS = ("inf", "infinity")
OUT_OF_RANGE = "the value is out of range for a number"

Number = Union[int, float]


def parse_string(raw: str, cfg: StringVariableConfig) -> Result[str, str]:
    """Parse a string variable.

    A pattern takes precedence over the empty check: when a pattern is set,
    an empty value is accepted if the pattern matches it.
    """
    if cfg.pattern is not None:
        try:
            compiled = re.compile(cfg.pattern) if isinstance(cfg.pattern, str) else cfg.pattern
        except re.error:
            return Err("the pattern is not a valid regular expression")

        if compiled.search(raw) is None:
            return Err("the value does not match the pattern")
    elif not cfg.should_allow_empty and raw.strip() == "":
        return Err("the value is empty")

    return Ok(raw)


def parse_number(raw: str, cfg: NumberVariableConfig) -> Result[Number, str]:
    """Parse a number variable.

    Integral values come back as ``int`` unless the format is "decimal".
    Values a float cannot hold (e.g. "1e400", or integers longer than the
    interpreter's int conversion limit) are out of range; only an explicit
    "inf"/"infinity" parses as infinity.
    """
    text = raw.strip()
    parsed: Number
    try:
        parsed = int(text)
    except ValueError:
        try:
            parsed = float(text)
        except ValueError:
            return Err("the value is not a number")

    if isinstance(parsed, float):
        if math.isnan(parsed):
            return Err("the value is not a number")
        if math.isinf(parsed) and text.lstrip("+-").lower() not in INFINITY_LITERALS:
            return Err(OUT_OF_RANGE)

    is_integral = isinstance(parsed, int) or parsed.is_integer()

    if cfg.format == "integer" and not is_integral:
        return Err("the value is not an integer")

    if cfg.min is not None and parsed < cfg.min:
        return Err("the value is less than the minimum")

    if cfg.max is not None and parsed > cfg.max:
        return Err("the value is greater than the maximum")

    if cfg.format == "decimal":
        try:
            return Ok(float(parsed))
        except OverflowError:
            return Err(OUT_OF_RANGE)
    if is_integral:
        return Ok(int(parsed))
    return Ok(parsed)


def parse_boolean(raw: str, cfg: BooleanVariableConfig) -> Result[bool, str]:
    """Parse a boolean variable. True values are checked first."""
    true_values = cfg.valid_true_values
    if true_values is None:
        true_values = DEFAULT_VALID_TRUE_VALUES
    false_values = cfg.valid_false_values
    if false_values is None:
        false_values = DEFAULT_VALID_FALSE_VALUES

    value = raw.lower()

    if value in (v.lower() for v in true_values):
        return Ok(True)

    if value in (v.lower() for v in false_values):
        return Ok(False)

    return Err("the value is not a boolean")


def enum_values(source: EnumSource) -> List[Any]:
    """Return the permitted values of an enum source.

    A plain class is read as a namespace of constants: its public,
    non-callable attributes are the permitted values.
    """
    if isinstance(source, type):
        if issubclass(source, Enum):
            return [member.value for member in source]
        return [
            value
            for name, value in vars(source).items()
            if not name.startswith("_")
            and not callable(value)
            and not isinstance(value, (classmethod, staticmethod, property))
        ]
    if isinstance(source, Mapping):
        return list(source.values())
    return list(cast(Any, source))


def parse_enum(raw: str, cfg: EnumVariableConfig) -> Result[Any, str]:
    """Parse an enum variable. Membership is exact, there is no case folding.

    An Enum class source yields the matching member; any other source yields
    the raw string.
    """
    if raw not in enum_values(cfg.enum):
        return Err("the value is not in the enum")

    if isinstance(cfg.enum, type) and issubclass(cfg.enum, Enum):
        return Ok(cfg.enum(raw))
    return Ok(raw)


def _to_duration(value: Number, unit: Union[DurationUnit, str]) -> Result[Duration, str]:
    try:
        return Ok(duration_from(value, unit))
    except ValueError:
        return Err("the unit is not a valid duration unit")
    except OverflowError:
        return Err("the value is out of range for a duration")


def parse_duration(raw: str, cfg: DurationVariableConfig) -> Result[Duration, str]:
    """Parse a duration variable as an unconstrained number of ``cfg.unit``."""
    return parse_number(raw, NumberVariableConfig()).and_then(
        lambda value: _to_duration(value, cfg.unit)
    )


def parse_value(raw: str, config: VariableConfig) -> Result[Any, str]:
    """Parse a raw value with the parser matching the config's type."""
    match config.type:
        case VariableType.STRING:
            return parse_string(raw, cast(StringVariableConfig, config))
        case VariableType.NUMBER:
            return parse_number(raw, cast(NumberVariableConfig, config))
        case VariableType.BOOLEAN:
            return parse_boolean(raw, cast(BooleanVariableConfig, config))
        case VariableType.ENUM:
            return parse_enum(raw, cast(EnumVariableConfig, config))
        case VariableType.DURATION:
            return parse_duration(raw, cast(DurationVariableConfig, config))
        case _:
            raise ValueError(f"Unsupported variable type: {config.type!r}")


__all__ = [
    "DEFAULT_VALID_TRUE_VALUES",
    "DEFAULT_VALID_FALSE_VALUES",
    "parse_string",
    "parse_number",
    "parse_boolean",
    "parse_enum",
    "parse_duration",
    "parse_value",
    "enum_values",
]
