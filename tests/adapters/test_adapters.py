"""Behaviour shared by the bundled adapters beyond the conformance suite."""

from datetime import datetime, timedelta, timezone

import pytest

from periodkit.adapters.base import CalendarAdapter, days_in_month, shift_months
from periodkit.domain.errors import UnknownUnit


class TestStartOf:
    @pytest.mark.parametrize(
        ("unit", "expected"),
        [
            ("year", datetime(2024, 1, 1)),
            ("quarter", datetime(2024, 4, 1)),
            ("month", datetime(2024, 6, 1)),
            ("week", datetime(2024, 6, 10)),
            ("day", datetime(2024, 6, 15)),
            ("hour", datetime(2024, 6, 15, 14)),
            ("minute", datetime(2024, 6, 15, 14, 30)),
            ("second", datetime(2024, 6, 15, 14, 30, 45)),
        ],
    )
    def test_truncation(self, adapter: CalendarAdapter, unit: str, expected: datetime) -> None:
        instant = datetime(2024, 6, 15, 14, 30, 45, 500)
        assert adapter.start_of(instant, unit) == expected

    def test_sunday_week_start(self, adapter: CalendarAdapter) -> None:
        # 2024-06-15 is a Saturday.
        assert adapter.start_of(datetime(2024, 6, 15), "week", week_start=0) == datetime(
            2024, 6, 9
        )

    def test_week_start_on_same_day(self, adapter: CalendarAdapter) -> None:
        assert adapter.start_of(datetime(2024, 6, 15, 9), "week", week_start=6) == datetime(
            2024, 6, 15
        )

    def test_tzinfo_preserved(self, adapter: CalendarAdapter) -> None:
        tz = timezone(timedelta(hours=2))
        start = adapter.start_of(datetime(2024, 6, 15, 9, tzinfo=tz), "month")
        assert start == datetime(2024, 6, 1, tzinfo=tz)
        assert start.tzinfo is tz


class TestEndOf:
    def test_end_is_exclusive(self, adapter: CalendarAdapter) -> None:
        assert adapter.end_of(datetime(2024, 2, 10), "month") == datetime(2024, 3, 1)
        assert adapter.end_of(datetime(2024, 12, 31, 23), "year") == datetime(2025, 1, 1)
        assert adapter.end_of(datetime(2024, 11, 5), "quarter") == datetime(2025, 1, 1)


class TestAdd:
    def test_negative_amounts(self, adapter: CalendarAdapter) -> None:
        assert adapter.add(datetime(2024, 1, 15), -1, "month") == datetime(2023, 12, 15)
        assert adapter.add(datetime(2024, 1, 1), -1, "day") == datetime(2023, 12, 31)

    def test_time_of_day_kept(self, adapter: CalendarAdapter) -> None:
        assert adapter.add(datetime(2024, 1, 31, 8, 15), 1, "month") == datetime(
            2024, 2, 29, 8, 15
        )


class TestDiff:
    def test_counts_boundaries_not_durations(self, adapter: CalendarAdapter) -> None:
        assert adapter.diff(datetime(2024, 1, 31), datetime(2024, 2, 1), "month") == 1
        assert adapter.diff(datetime(2024, 12, 31, 23), datetime(2025, 1, 1), "year") == 1
        assert adapter.diff(datetime(2024, 6, 15, 23), datetime(2024, 6, 16, 1), "day") == 1

    def test_quarters(self, adapter: CalendarAdapter) -> None:
        assert adapter.diff(datetime(2024, 3, 31), datetime(2024, 4, 1), "quarter") == 1
        assert adapter.diff(datetime(2024, 5, 1), datetime(2023, 5, 1), "quarter") == -4

    def test_weeks_honour_week_start(self, adapter: CalendarAdapter) -> None:
        saturday = datetime(2024, 6, 15)
        sunday = datetime(2024, 6, 16)
        assert adapter.diff(saturday, sunday, "week", week_start=1) == 0
        assert adapter.diff(saturday, sunday, "week", week_start=0) == 1


def test_unknown_unit_names_adapter(adapter: CalendarAdapter) -> None:
    with pytest.raises(UnknownUnit) as exc_info:
        adapter.start_of(datetime(2024, 1, 1), "decade")
    assert exc_info.value.where == f"{adapter.name} adapter"


def test_repr(adapter: CalendarAdapter) -> None:
    assert adapter.name in repr(adapter)


class TestHelpers:
    @pytest.mark.parametrize(
        ("year", "month", "days"),
        [(2024, 2, 29), (2023, 2, 28), (1900, 2, 28), (2000, 2, 29), (2024, 4, 30)],
    )
    def test_days_in_month(self, year: int, month: int, days: int) -> None:
        assert days_in_month(year, month) == days

    def test_shift_months_across_years(self) -> None:
        assert shift_months(datetime(2024, 11, 30), 3) == datetime(2025, 2, 28)
        assert shift_months(datetime(2024, 1, 31), -13) == datetime(2022, 12, 31)
