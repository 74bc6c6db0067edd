"""Tests for the stable-month grid."""

from datetime import datetime, timedelta

import pytest

from periodkit.context import TemporalContext, create_temporal
from periodkit.domain.errors import InvalidDivision
from periodkit.operations import (
    divide,
    grid_rows,
    in_real_month,
    period_of,
    real_month,
    stable_month,
)


class TestStableMonth:
    def test_february_2021_scenario(self, ctx: TemporalContext) -> None:
        grid = stable_month(ctx, datetime(2021, 2, 1))
        assert grid.start == datetime(2021, 1, 25)
        assert grid.end == datetime(2021, 3, 8)
        assert grid.type == "stableMonth"
        assert grid.duration == timedelta(days=42)

    @pytest.mark.parametrize("adapter_name", ["gregorian", "relativedelta"])
    def test_four_row_february_on_sunday_weeks(self, adapter_name: str) -> None:
        # February 2026 runs Sunday 1st to Saturday 28th: one spare week each side.
        ctx = create_temporal(adapter_name, week_start_day=0)
        grid = stable_month(ctx, datetime(2026, 2, 10))
        assert grid.start == datetime(2026, 1, 25)
        assert grid.end == datetime(2026, 3, 8)
        assert grid_rows(ctx, grid)[1][0].start == datetime(2026, 2, 1)

    def test_same_february_on_monday_weeks_has_no_lead(self, ctx: TemporalContext) -> None:
        grid = stable_month(ctx, datetime(2026, 2, 10))
        assert grid.start == datetime(2026, 1, 26)
        assert grid.end == datetime(2026, 3, 9)

    @pytest.mark.parametrize("week_start", range(7))
    def test_always_42_days(self, week_start: int) -> None:
        ctx = create_temporal("gregorian", week_start_day=week_start)
        for year in (2021, 2024):
            for month in range(1, 13):
                grid = stable_month(ctx, datetime(year, month, 15))
                assert grid.duration == timedelta(days=42)
                month_period = real_month(ctx, grid)
                assert grid.start <= month_period.start
                assert month_period.end <= grid.end

    def test_divides_into_six_weeks(self, ctx: TemporalContext) -> None:
        grid = stable_month(ctx, datetime(2024, 6, 15))
        weeks = divide(ctx, grid, "week")
        assert len(weeks) == 6
        assert weeks[0].start == grid.start
        assert weeks[-1].end == grid.end

    def test_divides_into_42_days(self, ctx: TemporalContext) -> None:
        grid = stable_month(ctx, datetime(2024, 6, 15))
        assert len(divide(ctx, grid, "day")) == 42

    def test_cannot_divide_into_months(self, ctx: TemporalContext) -> None:
        grid = stable_month(ctx, datetime(2024, 6, 15))
        with pytest.raises(InvalidDivision):
            divide(ctx, grid, "month")

    def test_grid_rows(self, ctx: TemporalContext) -> None:
        rows = grid_rows(ctx, stable_month(ctx, datetime(2021, 2, 1)))
        assert len(rows) == 6
        assert all(len(row) == 7 for row in rows)
        assert rows[0][0].start == datetime(2021, 1, 25)
        assert rows[1][0].start == datetime(2021, 2, 1)


class TestRealMonth:
    def test_real_month(self, ctx: TemporalContext) -> None:
        grid = stable_month(ctx, datetime(2021, 2, 10))
        month = real_month(ctx, grid)
        assert month == period_of(ctx, "month", datetime(2021, 2, 10))

    def test_padding_edges(self, ctx: TemporalContext) -> None:
        # June 2024 starts on a Saturday and ends on a Sunday (Monday start).
        instant = datetime(2024, 6, 15)
        grid = stable_month(ctx, instant)
        assert in_real_month(ctx, grid, instant)
        assert not in_real_month(ctx, grid, grid.start)
        assert not in_real_month(ctx, grid, grid.end - timedelta(seconds=1))
        assert in_real_month(ctx, grid, datetime(2024, 6, 1))
        assert in_real_month(ctx, grid, datetime(2024, 6, 30, 23))

    def test_accepts_periods(self, ctx: TemporalContext) -> None:
        grid = stable_month(ctx, datetime(2021, 2, 1))
        days = divide(ctx, grid, "day")
        inside = [d for d in days if in_real_month(ctx, grid, d)]
        assert len(inside) == 28
        assert inside[0].start == datetime(2021, 2, 1)
