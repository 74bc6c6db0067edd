"""TemporalContext — adapter, configuration and the browsing/now pointers.

Created once by ``create_temporal`` and passed as the first argument of every
operation. The adapter is injected explicitly or resolved by name from
configuration; nothing is probed from the environment.

INVARIANT: ``browsing`` and ``now`` are always Periods. ``browsing`` is the
only mutable state and a single writer is assumed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import TYPE_CHECKING

from periodkit.adapters import get_adapter
from periodkit.adapters.base import CalendarAdapter
from periodkit.config.models import EngineConfig
from periodkit.domain.errors import MalformedPeriod, UnknownUnit
from periodkit.domain.period import Period
from periodkit.domain.registry import UnitRegistry, default_registry
from periodkit.domain.units import Unit, validate_week_start

if TYPE_CHECKING:
    from periodkit.domain.strategies import BoundaryStrategy

logger = logging.getLogger(__name__)


@contextmanager
def _datetime_range(unit: str, instant: datetime) -> Iterator[None]:
    """Report calendar arithmetic past year 1 or 9999 as MalformedPeriod."""
    try:
        yield
    except (ValueError, OverflowError) as exc:
        msg = (
            f"{unit} arithmetic around {instant.isoformat()} is outside "
            f"the supported datetime range: {exc}"
        )
        raise MalformedPeriod(msg) from exc


class TemporalContext:
    """Shared state for the period algebra.

    Satisfies the ``CalendarScope`` protocol, so unit strategies can be
    handed the context directly.
    """

    def __init__(
        self,
        adapter: CalendarAdapter,
        *,
        registry: UnitRegistry,
        week_start_day: int,
        max_iterations: int,
        date: datetime,
        now: datetime,
    ) -> None:
        if max_iterations <= 0:
            msg = f"max_iterations must be positive, got {max_iterations}"
            raise ValueError(msg)
        self._adapter = adapter
        self._registry = registry
        self._week_start_day = validate_week_start(week_start_day)
        self._max_iterations = max_iterations
        self._browsing = self.period(Unit.DAY, date)
        self._now = self.period(Unit.SECOND, now)

    @property
    def adapter(self) -> CalendarAdapter:
        return self._adapter

    @property
    def registry(self) -> UnitRegistry:
        return self._registry

    @property
    def week_start_day(self) -> int:
        """First day of the week, 0 = Sunday ... 6 = Saturday."""
        return self._week_start_day

    @property
    def max_iterations(self) -> int:
        """Hard ceiling on the number of periods a single ``divide`` may emit."""
        return self._max_iterations

    @property
    def now(self) -> Period:
        """The second period captured as the current instant."""
        return self._now

    @property
    def browsing(self) -> Period:
        """The period the caller is currently looking at."""
        return self._browsing

    @browsing.setter
    def browsing(self, value: Period) -> None:
        if not isinstance(value, Period):
            msg = f"browsing must be a Period, got {type(value).__name__}"
            raise TypeError(msg)
        self._browsing = value
        logger.debug("Browsing moved to %s", value)

    def refresh_now(self, instant: datetime | None = None) -> Period:
        """Re-capture ``now`` at *instant* (default: the current time)."""
        self._now = self.period(Unit.SECOND, instant or datetime.now())
        return self._now

    # --- Strategy-routed primitives ---

    def strategy(self, unit: str) -> BoundaryStrategy:
        """Boundary strategy of *unit*, or UnknownUnit if it has none."""
        strategy = self._registry.get(unit).strategy
        if strategy is None:
            raise UnknownUnit(unit, where="no boundary strategy")
        return strategy

    def start_of(self, instant: datetime, unit: str) -> datetime:
        strategy = self.strategy(unit)
        with _datetime_range(unit, instant):
            return strategy.start_of(self, instant)

    def end_of(self, instant: datetime, unit: str) -> datetime:
        strategy = self.strategy(unit)
        with _datetime_range(unit, instant):
            return strategy.end_of(self, instant)

    def add(self, instant: datetime, amount: int, unit: str) -> datetime:
        strategy = self.strategy(unit)
        with _datetime_range(unit, instant):
            return strategy.add(self, instant, amount)

    def diff(self, a: datetime, b: datetime, unit: str) -> int:
        strategy = self.strategy(unit)
        with _datetime_range(unit, a):
            return strategy.diff(self, a, b)

    def period(self, unit: str, instant: datetime) -> Period:
        """The *unit* period containing *instant*.

        Raises:
            UnknownUnit: If *unit* is not registered or has no strategy.
            MalformedPeriod: If a boundary falls outside the ``datetime`` range.
        """
        strategy = self.strategy(unit)
        with _datetime_range(unit, instant):
            start = strategy.start_of(self, instant)
            end = strategy.end_of(self, instant)
        return Period(start=start, end=end, type=unit, date=instant)

    def __repr__(self) -> str:
        return (
            f"<TemporalContext adapter={self._adapter.name!r} "
            f"week_start_day={self._week_start_day} browsing={self._browsing}>"
        )


def create_temporal(
    adapter: CalendarAdapter | str | None = None,
    *,
    date: datetime | None = None,
    now: datetime | None = None,
    week_start_day: int | None = None,
    registry: UnitRegistry | None = None,
    config: EngineConfig | None = None,
) -> TemporalContext:
    """Build a TemporalContext.

    Args:
        adapter: Adapter instance, or the name of a registered adapter.
            Defaults to ``config.adapter``.
        date: Instant the initial ``browsing`` day is built from.
        now: Instant captured as ``now``. Both default to the current time.
        week_start_day: Overrides ``config.week_start_day``; validated 0..6.
        registry: Unit registry; a fresh built-in registry by default.
        config: Engine configuration; defaults to ``EngineConfig()``.

    Raises:
        AdapterUnavailable: If the adapter name is not registered.
        pydantic.ValidationError: If the week start day is out of range.
    """
    config = config or EngineConfig()
    if week_start_day is not None:
        config = EngineConfig.model_validate(
            {**config.model_dump(), "week_start_day": week_start_day}
        )

    if adapter is None:
        adapter = get_adapter(config.adapter)
    elif isinstance(adapter, str):
        adapter = get_adapter(adapter)

    current = datetime.now()
    ctx = TemporalContext(
        adapter,
        registry=registry if registry is not None else default_registry(),
        week_start_day=config.week_start_day,
        max_iterations=config.max_iterations,
        date=date or current,
        now=now or current,
    )
    logger.debug(
        "Created temporal context: adapter=%s week_start_day=%d",
        adapter.name,
        config.week_start_day,
    )
    return ctx
