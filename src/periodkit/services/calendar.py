"""CalendarService — engine operations packaged for the CLI.

Each method runs one algebra operation against the service's
TemporalContext and returns an OperationResult whose ``data`` is plain JSON.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from periodkit.domain.errors import PeriodKitError
from periodkit.domain.units import WEEKDAY_NAMES
from periodkit.operations import (
    divide,
    go,
    grid_rows,
    in_real_month,
    is_today,
    is_weekend,
    period_of,
    real_month,
    stable_month,
)
from periodkit.services.result import OperationResult

if TYPE_CHECKING:
    from periodkit.context import TemporalContext
    from periodkit.domain.period import Period


def period_payload(period: Period) -> dict[str, Any]:
    """JSON-safe dict of a period's fields."""
    return period.model_dump(mode="json")


class CalendarService:
    """Read-only calendar queries over a TemporalContext."""

    def __init__(self, temporal: TemporalContext) -> None:
        self._temporal = temporal

    @property
    def temporal(self) -> TemporalContext:
        return self._temporal

    def _instant(self, date: datetime | None) -> datetime:
        return date if date is not None else self._temporal.browsing.date

    def period(self, unit: str, date: datetime | None = None) -> OperationResult:
        """The *unit* period around *date* (default: the browsing date)."""
        op = "period"
        try:
            p = period_of(self._temporal, unit, self._instant(date))
        except PeriodKitError as exc:
            return OperationResult.failure(op, exc)
        return OperationResult(ok=True, op=op, data={"period": period_payload(p)})

    def divide(self, unit: str, target: str, date: datetime | None = None) -> OperationResult:
        """Divide the *unit* period around *date* into *target* periods."""
        op = "divide"
        try:
            p = period_of(self._temporal, unit, self._instant(date))
            children = divide(self._temporal, p, target)
        except PeriodKitError as exc:
            return OperationResult.failure(op, exc)
        return OperationResult(
            ok=True,
            op=op,
            data={
                "period": period_payload(p),
                "unit": target,
                "items": [period_payload(c) for c in children],
                "count": len(children),
            },
        )

    def go(self, unit: str, steps: int, date: datetime | None = None) -> OperationResult:
        """Move *steps* *unit* periods away from the one around *date*."""
        op = "go"
        try:
            origin = period_of(self._temporal, unit, self._instant(date))
            target = go(self._temporal, origin, steps)
        except PeriodKitError as exc:
            return OperationResult.failure(op, exc)
        return OperationResult(
            ok=True,
            op=op,
            data={
                "origin": period_payload(origin),
                "steps": steps,
                "period": period_payload(target),
            },
        )

    def grid(self, date: datetime | None = None) -> OperationResult:
        """Stable-month grid around *date*, with per-day flags for rendering."""
        op = "grid"
        ctx = self._temporal
        try:
            grid = stable_month(ctx, self._instant(date))
            month = real_month(ctx, grid)
            rows = [
                [
                    {
                        "date": day.start.date().isoformat(),
                        "day": day.start.day,
                        "in_month": in_real_month(ctx, grid, day),
                        "today": is_today(ctx, day),
                        "weekend": is_weekend(day),
                    }
                    for day in week
                ]
                for week in grid_rows(ctx, grid)
            ]
        except PeriodKitError as exc:
            return OperationResult.failure(op, exc)

        ws = ctx.week_start_day
        headers = [WEEKDAY_NAMES[(ws + i) % 7][:3] for i in range(7)]
        return OperationResult(
            ok=True,
            op=op,
            data={
                "period": period_payload(grid),
                "month": period_payload(month),
                "week_start_day": ws,
                "headers": headers,
                "rows": rows,
            },
        )

    def units(self) -> OperationResult:
        """List the registered units with their divisibility sets."""
        items = [
            {
                "id": d.id,
                "plural": d.plural_id,
                "parent": d.parent_id,
                "divisible_into": sorted(d.divisible_into),
                "tiles": d.tiles,
                "buildable": d.strategy is not None,
            }
            for d in self._temporal.registry
        ]
        return OperationResult(ok=True, op="units", data={"items": items, "count": len(items)})


__all__ = ["CalendarService", "period_payload"]
