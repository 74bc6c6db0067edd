"""Tests for zoom helpers."""

from datetime import datetime

import pytest

from periodkit.context import TemporalContext
from periodkit.domain.errors import InvalidDivision
from periodkit.operations import period_of, zoom_in, zoom_out, zoom_to


def test_zoom_in_is_divide(ctx: TemporalContext) -> None:
    quarter = period_of(ctx, "quarter", datetime(2024, 5, 1))
    assert [m.start.month for m in zoom_in(ctx, quarter, "month")] == [4, 5, 6]


class TestZoomOut:
    def test_returns_coarser_period(self, ctx: TemporalContext) -> None:
        day = period_of(ctx, "day", datetime(2024, 5, 20, 9))
        year = zoom_out(ctx, day, "year")
        assert year.type == "year"
        assert year.start == datetime(2024, 1, 1)
        assert year.date == day.date

    def test_moves_browsing(self, ctx: TemporalContext) -> None:
        month = period_of(ctx, "month", datetime(2023, 3, 9))
        zoom_out(ctx, month, "decade")
        assert ctx.browsing.type == "day"
        assert ctx.browsing.start == datetime(2023, 3, 9)

    def test_rejects_finer_unit(self, ctx: TemporalContext) -> None:
        month = period_of(ctx, "month", datetime(2024, 5, 1))
        with pytest.raises(InvalidDivision):
            zoom_out(ctx, month, "day")

    def test_rejects_unrelated_unit(self, ctx: TemporalContext) -> None:
        week = period_of(ctx, "week", datetime(2024, 5, 1))
        with pytest.raises(InvalidDivision):
            zoom_out(ctx, week, "month")


def test_zoom_to_any_unit(ctx: TemporalContext) -> None:
    week = period_of(ctx, "week", datetime(2024, 5, 1))
    month = zoom_to(ctx, week, "month")
    assert month.start == datetime(2024, 5, 1)
    assert ctx.browsing.start == datetime(2024, 5, 1)
