"""Calendar adapter contract.

Every backend supplies four primitives over ``datetime`` instants:

- ``start_of(instant, unit)``: earliest instant of the unit period.
- ``end_of(instant, unit)``: first instant after it (exclusive end).
- ``add(instant, amount, unit)``: calendar-aware offset.
- ``diff(a, b, unit)``: signed count of unit boundaries crossed.

Week-relative primitives take the week start day (0 = Sunday ... 6 = Saturday)
as a keyword so that one adapter instance serves every configuration.

INVARIANT: an unsupported unit raises UnknownUnit, never a silent no-op.
"""

from __future__ import annotations

import calendar
from abc import ABC, abstractmethod
from datetime import datetime

from periodkit.domain.errors import UnknownUnit
from periodkit.domain.units import ADAPTER_UNITS, DEFAULT_WEEK_START


class CalendarAdapter(ABC):
    """Abstract base class for calendar backends.

    Clamping policy shared by the bundled adapters: month, quarter and year
    arithmetic keeps the day of month when the target month has it and
    otherwise clamps to that month's last day (Jan 31 + 1 month = Feb 28 or
    Feb 29). Time of day and tzinfo pass through unchanged.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Adapter identifier (e.g. 'gregorian')."""
        ...

    @abstractmethod
    def start_of(
        self, instant: datetime, unit: str, *, week_start: int = DEFAULT_WEEK_START
    ) -> datetime:
        """Earliest instant of the *unit* period containing *instant*."""
        ...

    @abstractmethod
    def end_of(
        self, instant: datetime, unit: str, *, week_start: int = DEFAULT_WEEK_START
    ) -> datetime:
        """First instant after the *unit* period containing *instant*."""
        ...

    @abstractmethod
    def add(self, instant: datetime, amount: int, unit: str) -> datetime:
        """Offset *instant* by *amount* whole units."""
        ...

    @abstractmethod
    def diff(
        self, a: datetime, b: datetime, unit: str, *, week_start: int = DEFAULT_WEEK_START
    ) -> int:
        """Signed number of *unit* boundaries crossed going from *a* to *b*."""
        ...

    def supports(self, unit: str) -> bool:
        return unit in ADAPTER_UNITS

    def _require(self, unit: str) -> str:
        if not self.supports(unit):
            raise UnknownUnit(unit, where=f"{self.name} adapter")
        return unit

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


def days_in_month(year: int, month: int) -> int:
    """Number of days in *month* of *year*, leap years included."""
    return calendar.monthrange(year, month)[1]


def shift_months(instant: datetime, months: int) -> datetime:
    """Move *instant* by *months*, clamping the day to the target month's length."""
    index = instant.year * 12 + (instant.month - 1) + months
    year, month_index = divmod(index, 12)
    month = month_index + 1
    day = min(instant.day, days_in_month(year, month))
    return instant.replace(year=year, month=month, day=day)
