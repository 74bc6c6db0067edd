"""Boundary strategies — how a unit finds its calendar boundaries.

Each registered unit carries one strategy. The algebra never branches on
unit ids to find boundaries; it asks the unit's strategy, which in turn
calls the calendar adapter of the scope it is given.

Three built-in strategies:
- AdapterStrategy: units the adapter supports natively (year ... second).
- YearMultipleStrategy: decade, century, millennium.
- StableMonthStrategy: the 6-week calendar grid around a month.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING, Protocol

from periodkit.domain.units import Unit

if TYPE_CHECKING:
    from periodkit.adapters.base import CalendarAdapter

STABLE_MONTH_WEEKS = 6


class CalendarScope(Protocol):
    """What a strategy needs from its caller: an adapter and a week start."""

    @property
    def adapter(self) -> CalendarAdapter: ...

    @property
    def week_start_day(self) -> int: ...


class BoundaryStrategy(ABC):
    """Boundary arithmetic for a single unit."""

    @abstractmethod
    def start_of(self, scope: CalendarScope, instant: datetime) -> datetime:
        """Earliest instant of the unit period containing *instant*."""
        ...

    @abstractmethod
    def end_of(self, scope: CalendarScope, instant: datetime) -> datetime:
        """First instant after the unit period containing *instant*."""
        ...

    @abstractmethod
    def add(self, scope: CalendarScope, instant: datetime, amount: int) -> datetime:
        """Offset *instant* by *amount* units."""
        ...

    @abstractmethod
    def diff(self, scope: CalendarScope, a: datetime, b: datetime) -> int:
        """Signed number of unit boundaries crossed going from *a* to *b*."""
        ...


class AdapterStrategy(BoundaryStrategy):
    """Delegate every primitive to the adapter for a native unit."""

    def __init__(self, unit: str) -> None:
        self.unit = unit

    def start_of(self, scope: CalendarScope, instant: datetime) -> datetime:
        return scope.adapter.start_of(instant, self.unit, week_start=scope.week_start_day)

    def end_of(self, scope: CalendarScope, instant: datetime) -> datetime:
        return scope.adapter.end_of(instant, self.unit, week_start=scope.week_start_day)

    def add(self, scope: CalendarScope, instant: datetime, amount: int) -> datetime:
        return scope.adapter.add(instant, amount, self.unit)

    def diff(self, scope: CalendarScope, a: datetime, b: datetime) -> int:
        return scope.adapter.diff(a, b, self.unit, week_start=scope.week_start_day)

    def __repr__(self) -> str:
        return f"AdapterStrategy({self.unit!r})"


class YearMultipleStrategy(BoundaryStrategy):
    """Spans of *factor* years starting on years divisible by *factor*.

    A decade is ``2020..2029``, a century ``2000..2099`` and a millennium
    ``2000..2999``.
    """

    def __init__(self, factor: int) -> None:
        if factor < 2:
            msg = f"factor must be at least 2, got {factor}"
            raise ValueError(msg)
        self.factor = factor

    def start_of(self, scope: CalendarScope, instant: datetime) -> datetime:
        year_start = scope.adapter.start_of(instant, Unit.YEAR)
        offset = year_start.year % self.factor
        return scope.adapter.add(year_start, -offset, Unit.YEAR)

    def end_of(self, scope: CalendarScope, instant: datetime) -> datetime:
        return scope.adapter.add(self.start_of(scope, instant), self.factor, Unit.YEAR)

    def add(self, scope: CalendarScope, instant: datetime, amount: int) -> datetime:
        return scope.adapter.add(instant, amount * self.factor, Unit.YEAR)

    def diff(self, scope: CalendarScope, a: datetime, b: datetime) -> int:
        years = scope.adapter.diff(self.start_of(scope, a), self.start_of(scope, b), Unit.YEAR)
        return years // self.factor

    def __repr__(self) -> str:
        return f"YearMultipleStrategy({self.factor})"


class StableMonthStrategy(BoundaryStrategy):
    """Fixed 6-week grid that fully contains the calendar month of an instant.

    The grid starts on the configured week start. When the month needs fewer
    than six grid rows, the spare rows are split around it: half (rounded
    down) before the month, the rest after. A four-row February therefore
    gets one padding week on each side.

    Grids of neighbouring months overlap, so this unit does not tile the
    timeline and ``start_of`` is anchored on the month, not idempotent.
    """

    def start_of(self, scope: CalendarScope, instant: datetime) -> datetime:
        adapter = scope.adapter
        month_start = adapter.start_of(instant, Unit.MONTH)
        month_end = adapter.end_of(instant, Unit.MONTH)
        first_row = adapter.start_of(month_start, Unit.WEEK, week_start=scope.week_start_day)

        rows = 0
        cursor = first_row
        while cursor < month_end:
            cursor = adapter.add(cursor, 1, Unit.WEEK)
            rows += 1

        lead = (STABLE_MONTH_WEEKS - rows) // 2
        return adapter.add(first_row, -lead, Unit.WEEK)

    def end_of(self, scope: CalendarScope, instant: datetime) -> datetime:
        return scope.adapter.add(self.start_of(scope, instant), STABLE_MONTH_WEEKS, Unit.WEEK)

    def add(self, scope: CalendarScope, instant: datetime, amount: int) -> datetime:
        return scope.adapter.add(instant, amount, Unit.MONTH)

    def diff(self, scope: CalendarScope, a: datetime, b: datetime) -> int:
        return scope.adapter.diff(a, b, Unit.MONTH)

    def __repr__(self) -> str:
        return "StableMonthStrategy()"
