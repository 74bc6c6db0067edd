"""Stable month: a 42-day, week-aligned grid around a calendar month.

The grid always has six rows of seven days, so calendar views keep a fixed
height. Rows before and after the month are padding; ``in_real_month`` tells
them apart from the month's own days.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from periodkit.domain.period import Period
from periodkit.domain.units import Unit
from periodkit.operations.comparison import contains
from periodkit.operations.divide import divide

if TYPE_CHECKING:
    from periodkit.context import TemporalContext


def stable_month(ctx: TemporalContext, instant: datetime) -> Period:
    """The stable-month grid of the month containing *instant*.

    With a Monday week start, ``2021-02-01`` gives ``[2021-01-25, 2021-03-08)``.
    """
    return ctx.period(Unit.STABLE_MONTH, instant)


def real_month(ctx: TemporalContext, period: Period) -> Period:
    """The calendar month a stable-month grid was built around."""
    return ctx.period(Unit.MONTH, period.date)


def in_real_month(ctx: TemporalContext, period: Period, target: datetime | Period) -> bool:
    """Whether *target* belongs to the real month behind *period*."""
    return contains(real_month(ctx, period), target)


def grid_rows(ctx: TemporalContext, period: Period) -> list[list[Period]]:
    """Day periods of a stable month arranged as six week rows."""
    return [divide(ctx, week, Unit.DAY) for week in divide(ctx, period, Unit.WEEK)]
