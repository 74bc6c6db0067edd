"""Navigation between neighbouring periods of the same unit.

Tiling units step boundary to boundary. Units whose periods overlap (the
stable month) step through their anchor month via ``go``. Custom periods
shift by their own duration.

Month-based steps from the 29th to the 31st clamp to shorter months, so
``go(go(p, 1), -1)`` can land on an earlier day of the original month.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from periodkit.domain.period import Period
from periodkit.domain.units import Unit

if TYPE_CHECKING:
    from periodkit.context import TemporalContext


def _shift_custom(period: Period, steps: int) -> Period:
    offset = period.duration * steps
    return Period(
        start=period.start + offset,
        end=period.end + offset,
        type=Unit.CUSTOM,
        date=period.date + offset,
    )


def _tiles(ctx: TemporalContext, unit: str) -> bool:
    return ctx.registry.get(unit).tiles


def next_period(ctx: TemporalContext, period: Period) -> Period:
    """The period of the same unit that starts where *period* ends."""
    if period.is_custom:
        return _shift_custom(period, 1)
    if not _tiles(ctx, period.type):
        return go(ctx, period, 1)
    return ctx.period(period.type, ctx.start_of(period.end, period.type))


def previous_period(ctx: TemporalContext, period: Period) -> Period:
    """The period of the same unit that ends where *period* starts."""
    if period.is_custom:
        return _shift_custom(period, -1)
    if not _tiles(ctx, period.type):
        return go(ctx, period, -1)
    return ctx.period(period.type, ctx.add(period.start, -1, period.type))


def go(ctx: TemporalContext, period: Period, steps: int) -> Period:
    """Jump *steps* periods forward (or backward when negative).

    ``go(ctx, p, 0)`` returns *p* itself.
    """
    if steps == 0:
        return period
    if period.is_custom:
        return _shift_custom(period, steps)
    return ctx.period(period.type, ctx.add(period.date, steps, period.type))
