"""python-dateutil adapter built on ``relativedelta``.

``relativedelta`` already clamps month and year offsets to the end of the
target month, which matches the clamping policy of the stdlib adapter.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta

from periodkit.adapters.base import CalendarAdapter
from periodkit.domain.units import DEFAULT_WEEK_START, Unit

# Indexed by week day, 0 = Sunday.
_WEEKDAYS = (SU, MO, TU, WE, TH, FR, SA)

_TRUNCATE: dict[str, relativedelta] = {
    Unit.SECOND: relativedelta(microsecond=0),
    Unit.MINUTE: relativedelta(second=0, microsecond=0),
    Unit.HOUR: relativedelta(minute=0, second=0, microsecond=0),
    Unit.DAY: relativedelta(hour=0, minute=0, second=0, microsecond=0),
    Unit.MONTH: relativedelta(day=1, hour=0, minute=0, second=0, microsecond=0),
    Unit.YEAR: relativedelta(month=1, day=1, hour=0, minute=0, second=0, microsecond=0),
}

_STEPS: dict[str, relativedelta] = {
    Unit.YEAR: relativedelta(years=1),
    Unit.QUARTER: relativedelta(months=3),
    Unit.MONTH: relativedelta(months=1),
    Unit.WEEK: relativedelta(weeks=1),
    Unit.DAY: relativedelta(days=1),
    Unit.HOUR: relativedelta(hours=1),
    Unit.MINUTE: relativedelta(minutes=1),
    Unit.SECOND: relativedelta(seconds=1),
}

_FIXED_STEPS: dict[str, timedelta] = {
    Unit.WEEK: timedelta(weeks=1),
    Unit.DAY: timedelta(days=1),
    Unit.HOUR: timedelta(hours=1),
    Unit.MINUTE: timedelta(minutes=1),
    Unit.SECOND: timedelta(seconds=1),
}

_MONTHS_PER: dict[str, int] = {
    Unit.YEAR: 12,
    Unit.QUARTER: 3,
    Unit.MONTH: 1,
}


class RelativeDeltaAdapter(CalendarAdapter):
    """Calendar arithmetic expressed as dateutil ``relativedelta`` offsets."""

    @property
    def name(self) -> str:
        return "relativedelta"

    def start_of(
        self, instant: datetime, unit: str, *, week_start: int = DEFAULT_WEEK_START
    ) -> datetime:
        self._require(unit)
        if unit == Unit.WEEK:
            # weekday(-1) is the latest such weekday on or before the instant.
            return instant + relativedelta(
                weekday=_WEEKDAYS[week_start](-1),
                hour=0,
                minute=0,
                second=0,
                microsecond=0,
            )
        if unit == Unit.QUARTER:
            return instant + relativedelta(
                month=(instant.month - 1) // 3 * 3 + 1,
                day=1,
                hour=0,
                minute=0,
                second=0,
                microsecond=0,
            )
        return instant + _TRUNCATE[unit]

    def end_of(
        self, instant: datetime, unit: str, *, week_start: int = DEFAULT_WEEK_START
    ) -> datetime:
        return self.start_of(instant, unit, week_start=week_start) + _STEPS[unit]

    def add(self, instant: datetime, amount: int, unit: str) -> datetime:
        self._require(unit)
        return instant + _STEPS[unit] * amount

    def diff(
        self, a: datetime, b: datetime, unit: str, *, week_start: int = DEFAULT_WEEK_START
    ) -> int:
        self._require(unit)
        start_a = self.start_of(a, unit, week_start=week_start)
        start_b = self.start_of(b, unit, week_start=week_start)
        if unit in _MONTHS_PER:
            delta = relativedelta(start_b, start_a)
            return (delta.years * 12 + delta.months) // _MONTHS_PER[unit]
        return (start_b - start_a) // _FIXED_STEPS[unit]
