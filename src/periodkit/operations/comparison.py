"""Containment, identity and overlap checks between periods and instants."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from periodkit.domain.period import Period

if TYPE_CHECKING:
    from periodkit.context import TemporalContext


def contains(outer: Period, target: datetime | Period) -> bool:
    """Whether *target* lies within *outer*.

    An instant is contained when ``start <= instant < end``; a period when
    both its bounds fall within ``[outer.start, outer.end]``.
    """
    if isinstance(target, Period):
        return outer.start <= target.start and target.end <= outer.end
    return outer.start <= target < outer.end


def is_same(a: Period | None, b: Period | None) -> bool:
    """Same unit type and same start. ``None`` on either side is False."""
    if a is None or b is None:
        return False
    return a.type == b.type and a.start == b.start


def overlaps(a: Period, b: Period) -> bool:
    """Whether the half-open intervals share at least one instant."""
    return a.start < b.end and b.start < a.end


def is_same_unit(
    ctx: TemporalContext,
    a: datetime | None,
    b: datetime | None,
    unit: str,
) -> bool:
    """Whether instants *a* and *b* fall in the same *unit* period.

    ``None`` on either side is False.
    """
    if a is None or b is None:
        return False
    return ctx.start_of(a, unit) == ctx.start_of(b, unit)
