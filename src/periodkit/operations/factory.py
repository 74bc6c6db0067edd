"""Period construction: unit periods, day shortcuts and custom spans."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from periodkit.domain.errors import MalformedPeriod
from periodkit.domain.period import Period, midpoint
from periodkit.domain.units import Unit

if TYPE_CHECKING:
    from periodkit.context import TemporalContext


def _instant(value: datetime | Period) -> datetime:
    return value.date if isinstance(value, Period) else value


def period_of(ctx: TemporalContext, unit: str, instant: datetime | Period) -> Period:
    """The *unit* period containing *instant*.

    A Period may be passed in place of an instant; its reference ``date``
    is used.

    Raises:
        UnknownUnit: If *unit* is unregistered or has no boundary strategy.
    """
    return ctx.period(unit, _instant(instant))


def to_period(ctx: TemporalContext, instant: datetime, unit: str = Unit.DAY) -> Period:
    """Shortcut for ``period_of(ctx, unit, instant)`` defaulting to days."""
    return ctx.period(unit, instant)


def custom_period(start: datetime, end: datetime, date: datetime | None = None) -> Period:
    """A ``custom`` period over ``[start, end)``.

    The reference date defaults to the midpoint of the span.

    Raises:
        MalformedPeriod: If ``start >= end`` or *date* lies outside the span.
    """
    if start >= end:
        msg = f"Custom period needs start < end, got {start.isoformat()} >= {end.isoformat()}"
        raise MalformedPeriod(msg)
    return Period(
        start=start,
        end=end,
        type=Unit.CUSTOM,
        date=date if date is not None else midpoint(start, end),
    )
