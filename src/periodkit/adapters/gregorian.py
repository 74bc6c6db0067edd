"""Stdlib ``datetime`` adapter for the proleptic Gregorian calendar."""

from __future__ import annotations

from datetime import datetime, timedelta

from periodkit.adapters.base import CalendarAdapter, shift_months
from periodkit.domain.units import DEFAULT_WEEK_START, Unit, weekday_index

_FIXED_STEPS: dict[str, timedelta] = {
    Unit.WEEK: timedelta(weeks=1),
    Unit.DAY: timedelta(days=1),
    Unit.HOUR: timedelta(hours=1),
    Unit.MINUTE: timedelta(minutes=1),
    Unit.SECOND: timedelta(seconds=1),
}

_MONTH_STEPS: dict[str, int] = {
    Unit.YEAR: 12,
    Unit.QUARTER: 3,
    Unit.MONTH: 1,
}


class GregorianAdapter(CalendarAdapter):
    """Calendar arithmetic on plain ``datetime`` objects.

    Naive and aware instants are both accepted; arithmetic is wall-clock
    and tzinfo is carried through untouched.
    """

    @property
    def name(self) -> str:
        return "gregorian"

    def start_of(
        self, instant: datetime, unit: str, *, week_start: int = DEFAULT_WEEK_START
    ) -> datetime:
        self._require(unit)
        if unit == Unit.SECOND:
            return instant.replace(microsecond=0)
        if unit == Unit.MINUTE:
            return instant.replace(second=0, microsecond=0)
        if unit == Unit.HOUR:
            return instant.replace(minute=0, second=0, microsecond=0)

        midnight = instant.replace(hour=0, minute=0, second=0, microsecond=0)
        if unit == Unit.DAY:
            return midnight
        if unit == Unit.WEEK:
            offset = (weekday_index(instant.isoweekday()) - week_start) % 7
            return midnight - timedelta(days=offset)
        if unit == Unit.MONTH:
            return midnight.replace(day=1)
        if unit == Unit.QUARTER:
            first_month = (instant.month - 1) // 3 * 3 + 1
            return midnight.replace(month=first_month, day=1)
        return midnight.replace(month=1, day=1)

    def end_of(
        self, instant: datetime, unit: str, *, week_start: int = DEFAULT_WEEK_START
    ) -> datetime:
        start = self.start_of(instant, unit, week_start=week_start)
        return self.add(start, 1, unit)

    def add(self, instant: datetime, amount: int, unit: str) -> datetime:
        self._require(unit)
        if unit in _MONTH_STEPS:
            return shift_months(instant, amount * _MONTH_STEPS[unit])
        return instant + amount * _FIXED_STEPS[unit]

    def diff(
        self, a: datetime, b: datetime, unit: str, *, week_start: int = DEFAULT_WEEK_START
    ) -> int:
        self._require(unit)
        if unit == Unit.YEAR:
            return b.year - a.year
        if unit == Unit.QUARTER:
            return (b.year * 4 + (b.month - 1) // 3) - (a.year * 4 + (a.month - 1) // 3)
        if unit == Unit.MONTH:
            return (b.year * 12 + b.month) - (a.year * 12 + a.month)

        start_a = self.start_of(a, unit, week_start=week_start)
        start_b = self.start_of(b, unit, week_start=week_start)
        return (start_b - start_a) // _FIXED_STEPS[unit]
