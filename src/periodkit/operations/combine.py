"""Merging adjacent periods and splitting a period in two."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from itertools import pairwise
from typing import TYPE_CHECKING

from periodkit.domain.errors import MalformedPeriod
from periodkit.domain.period import Period
from periodkit.operations.factory import custom_period

if TYPE_CHECKING:
    from periodkit.context import TemporalContext


def merge(ctx: TemporalContext, periods: Sequence[Period]) -> Period:
    """Combine *periods* into one period spanning all of them.

    When the periods share a type, are contiguous, and exactly cover one
    period of a tiling unit that divides into that type, that unit's period
    is returned: seven days of a week give the week, three months of a
    quarter give the quarter. Anything else becomes a ``custom`` period over
    ``[earliest start, latest end)``.

    Raises:
        MalformedPeriod: If *periods* is empty.
    """
    if not periods:
        msg = "Cannot merge an empty sequence of periods"
        raise MalformedPeriod(msg)
    if len(periods) == 1:
        return periods[0]

    ordered = sorted(periods, key=lambda p: p.start)
    natural = _natural_parent(ctx, ordered)
    if natural is not None:
        return natural
    return custom_period(ordered[0].start, max(p.end for p in ordered))


def _natural_parent(ctx: TemporalContext, ordered: list[Period]) -> Period | None:
    kind = ordered[0].type
    if any(p.type != kind for p in ordered):
        return None
    if any(a.end != b.start for a, b in pairwise(ordered)):
        return None

    anchor = ordered[len(ordered) // 2].date
    for unit_id in ctx.registry.tiling_ids():
        if kind not in ctx.registry.get(unit_id).divisible_into:
            continue
        try:
            candidate = ctx.period(unit_id, anchor)
        except MalformedPeriod:
            # Parent reaches past the datetime range, so it cannot match.
            continue
        if candidate.start == ordered[0].start and candidate.end == ordered[-1].end:
            return candidate
    return None


def split(period: Period, at: datetime) -> tuple[Period, Period]:
    """Cut *period* at *at* into ``[start, at)`` and ``[at, end)``.

    Both halves are ``custom`` periods. Each keeps ``period.date`` when it
    falls inside that half and otherwise uses the half's own start.

    Raises:
        MalformedPeriod: Unless ``period.start < at < period.end``.
    """
    if not period.start < at < period.end:
        msg = (
            f"Split point {at.isoformat()} must lie strictly inside "
            f"[{period.start.isoformat()}, {period.end.isoformat()})"
        )
        raise MalformedPeriod(msg)

    before_date = period.date if period.date < at else period.start
    after_date = period.date if period.date >= at else at
    return (
        custom_period(period.start, at, before_date),
        custom_period(at, period.end, after_date),
    )
