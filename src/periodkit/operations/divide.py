"""Subdivision of a period into a sequence of finer unit periods.

INVARIANT: the target unit is listed in the source unit's ``divisible_into``
set. Output is ascending with unique starts; for tiling units the first
start equals ``period.start`` and the last end equals ``period.end``.

The loop is bounded by ``ctx.max_iterations`` and aborts with
NonAdvancingIteration when the cursor stops moving, so a misbehaving
adapter cannot hang the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from periodkit.domain.errors import InvalidDivision, NonAdvancingIteration

if TYPE_CHECKING:
    from periodkit.context import TemporalContext
    from periodkit.domain.period import Period

logger = logging.getLogger(__name__)


def divide(ctx: TemporalContext, period: Period, unit: str) -> list[Period]:
    """Split *period* into the *unit* periods that cover it.

    Raises:
        UnknownUnit: If either unit is not registered.
        InvalidDivision: If *unit* is not in the divisibility set of
            ``period.type``.
        NonAdvancingIteration: If the cursor fails to advance or more than
            ``ctx.max_iterations`` periods would be produced.
    """
    source = ctx.registry.get(period.type)
    ctx.registry.get(unit)
    if unit not in source.divisible_into:
        raise InvalidDivision(period.type, unit)

    children: list[Period] = []
    cursor = ctx.start_of(period.start, unit)
    while cursor < period.end:
        if len(children) >= ctx.max_iterations:
            msg = (
                f"Dividing {period} into {unit!r} exceeded "
                f"{ctx.max_iterations} iterations"
            )
            raise NonAdvancingIteration(msg)

        children.append(ctx.period(unit, cursor))

        following = ctx.start_of(ctx.add(cursor, 1, unit), unit)
        if following <= cursor:
            msg = f"{unit!r} cursor stalled at {cursor.isoformat()} while dividing {period}"
            raise NonAdvancingIteration(msg)
        cursor = following

    logger.debug("Divided %s into %d %s periods", period, len(children), unit)
    return children
