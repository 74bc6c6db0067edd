"""Calendar predicates on a period's reference date."""

from __future__ import annotations

from typing import TYPE_CHECKING

from periodkit.domain.units import SATURDAY, SUNDAY, Unit, weekday_index
from periodkit.operations.comparison import is_same_unit

if TYPE_CHECKING:
    from periodkit.context import TemporalContext
    from periodkit.domain.period import Period

WEEKEND_DAYS = frozenset({SATURDAY, SUNDAY})


def is_today(ctx: TemporalContext, period: Period) -> bool:
    """Whether *period*'s date falls on the same day as ``ctx.now``."""
    return is_same_unit(ctx, period.date, ctx.now.date, Unit.DAY)


def is_weekend(period: Period) -> bool:
    return weekday_index(period.date.isoweekday()) in WEEKEND_DAYS


def is_weekday(period: Period) -> bool:
    return not is_weekend(period)
