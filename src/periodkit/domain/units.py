"""Built-in unit ids and weekday conventions.

Unit ids are plain strings so that callers can register their own units.
The built-ins live in :class:`Unit`; ``StrEnum`` members compare equal to
their string ids.
"""

from __future__ import annotations

from enum import StrEnum


class Unit(StrEnum):
    """Built-in time units."""

    MILLENNIUM = "millennium"
    CENTURY = "century"
    DECADE = "decade"
    YEAR = "year"
    QUARTER = "quarter"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    STABLE_MONTH = "stableMonth"
    CUSTOM = "custom"


# Units every calendar adapter must support.
ADAPTER_UNITS: tuple[str, ...] = (
    Unit.YEAR,
    Unit.QUARTER,
    Unit.MONTH,
    Unit.WEEK,
    Unit.DAY,
    Unit.HOUR,
    Unit.MINUTE,
    Unit.SECOND,
)

# Week days are numbered 0 = Sunday ... 6 = Saturday.
SUNDAY = 0
MONDAY = 1
SATURDAY = 6

DEFAULT_WEEK_START = MONDAY

WEEKDAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


def weekday_index(isoweekday: int) -> int:
    """Convert an ISO weekday (Monday = 1 ... Sunday = 7) to 0 = Sunday numbering.

    Examples:
        >>> weekday_index(7)
        0
        >>> weekday_index(1)
        1
    """
    return isoweekday % 7


def validate_week_start(week_start: int) -> int:
    """Return *week_start* if it is a valid day index, else raise ValueError."""
    if not isinstance(week_start, int) or isinstance(week_start, bool):
        msg = f"week start must be an int in 0..6, got {week_start!r}"
        raise ValueError(msg)
    if not SUNDAY <= week_start <= SATURDAY:
        msg = f"week start must be in 0..6, got {week_start}"
        raise ValueError(msg)
    return week_start
