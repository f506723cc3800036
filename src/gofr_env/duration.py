"""Duration values built from a number and a time unit.

Durations are plain ``datetime.timedelta`` objects. ``duration_from`` is the
single constructor used by the environment parsers so that the accepted unit
symbols live in one place.
"""

from datetime import timedelta
from enum import Enum
from typing import Union

Duration = timedelta


class DurationUnit(str, Enum):
    """Time units accepted by ``duration_from``."""

    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"


def duration_from(value: Union[int, float], unit: Union[DurationUnit, str]) -> Duration:
    """Build a duration of ``value`` units.

    Args:
        value: Number of units (may be fractional)
        unit: A DurationUnit or its string symbol (e.g. "seconds")

    Returns:
        The matching timedelta

    Raises:
        ValueError: If the unit is not a known DurationUnit
        OverflowError: If the duration does not fit in a timedelta
    """
    try:
        unit = DurationUnit(unit)
    except ValueError:
        raise ValueError(f"Unknown duration unit: {unit!r}") from None

    return timedelta(**{unit.value: value})


__all__ = ["Duration", "DurationUnit", "duration_from"]
