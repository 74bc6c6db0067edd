"""Zoom helpers: move between coarser and finer views of the same date.

``zoom_out`` and ``zoom_to`` move ``ctx.browsing`` to the day containing the
period's reference date before building the target period.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from periodkit.domain.errors import InvalidDivision
from periodkit.domain.units import Unit
from periodkit.operations.divide import divide

if TYPE_CHECKING:
    from periodkit.context import TemporalContext
    from periodkit.domain.period import Period


def zoom_in(ctx: TemporalContext, period: Period, unit: str) -> list[Period]:
    """The finer *unit* periods inside *period*; same as ``divide``."""
    return divide(ctx, period, unit)


def zoom_out(ctx: TemporalContext, period: Period, unit: str) -> Period:
    """The coarser *unit* period around ``period.date``.

    Raises:
        InvalidDivision: If *unit* cannot be divided, directly or through
            intermediate units, into ``period.type``.
    """
    if period.type not in ctx.registry.descendants(unit):
        raise InvalidDivision(unit, period.type)
    return zoom_to(ctx, period, unit)


def zoom_to(ctx: TemporalContext, period: Period, unit: str) -> Period:
    """The *unit* period around ``period.date``, in either direction."""
    target = ctx.period(unit, period.date)
    ctx.browsing = ctx.period(Unit.DAY, period.date)
    return target
