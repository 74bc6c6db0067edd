"""Adapter conformance suite.

Any backend must pass these checks before the algebra can rely on it.
``run_conformance`` collects every failure instead of stopping at the first,
so a third-party adapter gets one complete report.

Checks:
- idempotence: ``start_of(start_of(x, u), u) == start_of(x, u)``
- closure: ``end_of(x, u) == start_of(add(x, 1, u), u)``
- leap years: year -> month -> day chains count 12 months and 28/29-day Februaries
- clamping: month-end overflow resolves inside the target month
- diff: zero on identity, exact on whole offsets, antisymmetric
- week start: every configured start day is honoured
- unknown units raise UnknownUnit
"""

from __future__ import annotations

import calendar
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from periodkit.domain.errors import UnknownUnit
from periodkit.domain.units import ADAPTER_UNITS, SATURDAY, SUNDAY, Unit, weekday_index

if TYPE_CHECKING:
    from periodkit.adapters.base import CalendarAdapter

DEFAULT_SAMPLES: tuple[datetime, ...] = (
    datetime(2024, 6, 15, 14, 30, 45, 123000),
    datetime(2024, 2, 29, 23, 59, 59),
    datetime(2023, 12, 31, 0, 0, 0),
    datetime(2021, 2, 1, 8, 0, 0),
    datetime(2000, 1, 1, 0, 0, 0),
)

LEAP_PROBE_YEARS: tuple[int, ...] = (1900, 2000, 2023, 2024)


@dataclass(frozen=True)
class ConformanceReport:
    """Outcome of a conformance run."""

    adapter: str
    checks: int = 0
    failures: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failures


class _Collector:
    def __init__(self) -> None:
        self.checks = 0
        self.failures: list[str] = []

    def expect(self, ok: bool, message: str) -> None:
        self.checks += 1
        if not ok:
            self.failures.append(message)

    @contextmanager
    def guard(self, label: str) -> Iterator[None]:
        """Record an exception from the adapter as a failure of *label*."""
        try:
            yield
        except Exception as exc:
            self.expect(False, f"{label} raised {type(exc).__name__}: {exc}")


def run_conformance(
    adapter: CalendarAdapter,
    *,
    samples: Sequence[datetime] = DEFAULT_SAMPLES,
) -> ConformanceReport:
    """Run every conformance check against *adapter*.

    An exception from the adapter fails the check that triggered it; the
    remaining checks still run.
    """
    out = _Collector()
    _check_idempotence_and_closure(adapter, samples, out)
    _check_leap_years(adapter, out)
    _check_clamping(adapter, out)
    _check_diff(adapter, samples, out)
    _check_week_start(adapter, samples, out)
    _check_unknown_unit(adapter, out)
    return ConformanceReport(adapter=adapter.name, checks=out.checks, failures=out.failures)


def _check_idempotence_and_closure(
    adapter: CalendarAdapter, samples: Sequence[datetime], out: _Collector
) -> None:
    for x in samples:
        for unit in ADAPTER_UNITS:
            with out.guard(f"boundaries({unit}) at {x.isoformat()}"):
                start = adapter.start_of(x, unit)
                out.expect(
                    adapter.start_of(start, unit) == start,
                    f"start_of not idempotent for {unit} at {x.isoformat()}",
                )
                out.expect(start <= x, f"start_of({unit}) after instant at {x.isoformat()}")
                end = adapter.end_of(x, unit)
                out.expect(x < end, f"end_of({unit}) not after instant at {x.isoformat()}")
                out.expect(
                    end == adapter.start_of(adapter.add(x, 1, unit), unit),
                    f"end_of != start_of(add(x, 1)) for {unit} at {x.isoformat()}",
                )


def _check_leap_years(adapter: CalendarAdapter, out: _Collector) -> None:
    for year in LEAP_PROBE_YEARS:
        with out.guard(f"leap year chain for {year}"):
            year_start = adapter.start_of(datetime(year, 7, 1), Unit.YEAR)
            year_end = adapter.end_of(year_start, Unit.YEAR)

            months = 0
            cursor = year_start
            while cursor < year_end and months <= 12:
                cursor = adapter.add(cursor, 1, Unit.MONTH)
                months += 1
            out.expect(months == 12, f"{year} has {months} months")

            february = adapter.add(year_start, 1, Unit.MONTH)
            days = adapter.diff(february, adapter.end_of(february, Unit.MONTH), Unit.DAY)
            expected = 29 if calendar.isleap(year) else 28
            out.expect(days == expected, f"February {year} has {days} days, expected {expected}")

            year_days = adapter.diff(year_start, year_end, Unit.DAY)
            expected_year = 366 if calendar.isleap(year) else 365
            out.expect(year_days == expected_year, f"{year} has {year_days} days")


def _check_clamping(adapter: CalendarAdapter, out: _Collector) -> None:
    cases = (
        (datetime(2024, 1, 31), 1, Unit.MONTH, datetime(2024, 2, 29)),
        (datetime(2023, 1, 31), 1, Unit.MONTH, datetime(2023, 2, 28)),
        (datetime(2024, 3, 31), -1, Unit.MONTH, datetime(2024, 2, 29)),
        (datetime(2024, 2, 29), 1, Unit.YEAR, datetime(2025, 2, 28)),
        (datetime(2024, 11, 30), 1, Unit.QUARTER, datetime(2025, 2, 28)),
        (datetime(2024, 6, 15, 14, 30), 8, Unit.MONTH, datetime(2025, 2, 15, 14, 30)),
    )
    for instant, amount, unit, expected in cases:
        label = f"add({instant.date()}, {amount}, {unit})"
        with out.guard(label):
            result = adapter.add(instant, amount, unit)
            out.expect(
                result == expected,
                f"{label} = {result.isoformat()}, expected {expected.isoformat()}",
            )


def _check_diff(adapter: CalendarAdapter, samples: Sequence[datetime], out: _Collector) -> None:
    for x in samples:
        for unit in ADAPTER_UNITS:
            with out.guard(f"diff({unit}) at {x.isoformat()}"):
                out.expect(adapter.diff(x, x, unit) == 0, f"diff(x, x, {unit}) != 0")
                start = adapter.start_of(x, unit)
                later = adapter.add(start, 3, unit)
                out.expect(
                    adapter.diff(start, later, unit) == 3,
                    f"diff over 3 {unit}s from {start.isoformat()} != 3",
                )
                out.expect(
                    adapter.diff(later, start, unit) == -3,
                    f"diff over -3 {unit}s from {later.isoformat()} != -3",
                )


def _check_week_start(
    adapter: CalendarAdapter, samples: Sequence[datetime], out: _Collector
) -> None:
    for x in samples:
        for week_start in range(SUNDAY, SATURDAY + 1):
            with out.guard(f"week starting {week_start} at {x.isoformat()}"):
                start = adapter.start_of(x, Unit.WEEK, week_start=week_start)
                out.expect(
                    weekday_index(start.isoweekday()) == week_start,
                    f"week starting {week_start} begins on day "
                    f"{weekday_index(start.isoweekday())}",
                )
                end = adapter.end_of(x, Unit.WEEK, week_start=week_start)
                out.expect(
                    adapter.diff(start, end, Unit.DAY) == 7,
                    f"week starting {week_start} is not 7 days at {x.isoformat()}",
                )
                out.expect(start <= x < end, f"week starting {week_start} misses {x.isoformat()}")


def _check_unknown_unit(adapter: CalendarAdapter, out: _Collector) -> None:
    probe = DEFAULT_SAMPLES[0]
    for name, call in (
        ("start_of", lambda: adapter.start_of(probe, "fortnight")),
        ("end_of", lambda: adapter.end_of(probe, "fortnight")),
        ("add", lambda: adapter.add(probe, 1, "fortnight")),
        ("diff", lambda: adapter.diff(probe, probe, "fortnight")),
    ):
        try:
            call()
        except UnknownUnit:
            out.expect(True, "")
        except Exception as exc:
            out.expect(
                False,
                f"{name} on an unsupported unit raised {type(exc).__name__}, not UnknownUnit",
            )
        else:
            out.expect(False, f"{name} on an unsupported unit did not raise UnknownUnit")
