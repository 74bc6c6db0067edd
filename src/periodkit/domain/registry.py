"""Unit registry — unit id -> definition, consulted at divide time.

From the base hierarchy:

    millennium > century > decade > year > {quarter, month, week} > day
    > hour > minute > second

plus the derived ``stableMonth`` grid and the ``custom`` span produced by
merge/split.

INVARIANT: ``divisible_into`` only lists units whose boundaries nest cleanly
inside the source unit (a month is never divisible into weeks). No unit
divides into itself and the divisibility graph has no cycles.

Extension: callers ``register()`` new ids with their own strategy and
divisibility set. The core algebra reads the table and never needs changes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from periodkit.domain.errors import InvalidUnitDefinition, UnknownUnit
from periodkit.domain.strategies import (
    AdapterStrategy,
    BoundaryStrategy,
    StableMonthStrategy,
    YearMultipleStrategy,
)
from periodkit.domain.units import ADAPTER_UNITS, Unit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnitDefinition:
    """Registry metadata for one unit.

    Attributes:
        id: Unit id (e.g. ``"month"``).
        plural_id: Plural form used for display (e.g. ``"months"``).
        parent_id: Next coarser unit in the hierarchy, if any.
        divisible_into: Unit ids this unit may be divided into.
        strategy: Boundary arithmetic; None for units that cannot be built
            from an instant (``custom``).
        tiles: Whether consecutive periods partition the timeline.
    """

    id: str
    plural_id: str
    parent_id: str | None = None
    divisible_into: frozenset[str] = field(default_factory=frozenset)
    strategy: BoundaryStrategy | None = None
    tiles: bool = True

    def __post_init__(self) -> None:
        # Accept any iterable of ids for convenience.
        if not isinstance(self.divisible_into, frozenset):
            object.__setattr__(self, "divisible_into", frozenset(self.divisible_into))


class UnitRegistry:
    """Catalogue of units keyed by id."""

    def __init__(self, definitions: Iterable[UnitDefinition] = ()) -> None:
        self._units: dict[str, UnitDefinition] = {}
        for definition in definitions:
            self.register(definition.id, definition)

    def register(self, unit_id: str, definition: UnitDefinition) -> None:
        """Register *definition* under *unit_id*.

        Raises:
            InvalidUnitDefinition: If the id is empty, does not match the
                definition, is already taken, divides into itself, or
                divides into an unknown unit. Division targets must be
                registered first, so the divisibility graph stays acyclic.
        """
        normalized = unit_id.strip()
        if not normalized:
            msg = "Unit id must not be empty"
            raise InvalidUnitDefinition(msg)

        if definition.id != normalized:
            msg = f"Unit {normalized!r} declares id {definition.id!r}"
            raise InvalidUnitDefinition(msg)

        if normalized in self._units:
            msg = f"Unit {normalized!r} is already registered"
            raise InvalidUnitDefinition(msg)

        if normalized in definition.divisible_into:
            msg = f"Unit {normalized!r} cannot be divisible into itself"
            raise InvalidUnitDefinition(msg)

        unknown = sorted(t for t in definition.divisible_into if t not in self._units)
        if unknown:
            msg = f"Unit {normalized!r} divides into unregistered units: {unknown}"
            raise InvalidUnitDefinition(msg)

        self._units[normalized] = definition
        logger.debug("Registered unit: %s", normalized)

    def get(self, unit_id: str) -> UnitDefinition:
        """Return the definition for *unit_id* or raise UnknownUnit."""
        try:
            return self._units[unit_id]
        except KeyError:
            raise UnknownUnit(unit_id, where="registry") from None

    def can_divide(self, source: str, target: str) -> bool:
        """Whether *source* periods may be divided into *target* periods."""
        return target in self.get(source).divisible_into

    def descendants(self, unit_id: str) -> set[str]:
        """All unit ids reachable from *unit_id* through divisibility."""
        seen: set[str] = set()
        stack = list(self.get(unit_id).divisible_into)
        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            stack.extend(self._units[current].divisible_into)
        return seen

    def ids(self) -> list[str]:
        """Registered unit ids in registration order."""
        return list(self._units)

    def tiling_ids(self) -> list[str]:
        """Ids of units whose periods can be built and partition the timeline."""
        return [u.id for u in self._units.values() if u.tiles and u.strategy is not None]

    def copy(self) -> UnitRegistry:
        clone = UnitRegistry()
        clone._units = dict(self._units)
        return clone

    def __contains__(self, unit_id: object) -> bool:
        return unit_id in self._units

    def __iter__(self) -> Iterator[UnitDefinition]:
        return iter(self._units.values())

    def __len__(self) -> int:
        return len(self._units)


def _builtin_definitions() -> list[UnitDefinition]:
    """Base hierarchy, leaf-first so every division target is registered first."""
    return [
        UnitDefinition(
            id=Unit.SECOND,
            plural_id="seconds",
            parent_id=Unit.MINUTE,
            strategy=AdapterStrategy(Unit.SECOND),
        ),
        UnitDefinition(
            id=Unit.MINUTE,
            plural_id="minutes",
            parent_id=Unit.HOUR,
            divisible_into=frozenset({Unit.SECOND}),
            strategy=AdapterStrategy(Unit.MINUTE),
        ),
        UnitDefinition(
            id=Unit.HOUR,
            plural_id="hours",
            parent_id=Unit.DAY,
            divisible_into=frozenset({Unit.MINUTE}),
            strategy=AdapterStrategy(Unit.HOUR),
        ),
        UnitDefinition(
            id=Unit.DAY,
            plural_id="days",
            parent_id=Unit.MONTH,
            divisible_into=frozenset({Unit.HOUR}),
            strategy=AdapterStrategy(Unit.DAY),
        ),
        UnitDefinition(
            id=Unit.WEEK,
            plural_id="weeks",
            parent_id=Unit.YEAR,
            divisible_into=frozenset({Unit.DAY}),
            strategy=AdapterStrategy(Unit.WEEK),
        ),
        UnitDefinition(
            id=Unit.MONTH,
            plural_id="months",
            parent_id=Unit.QUARTER,
            divisible_into=frozenset({Unit.DAY}),
            strategy=AdapterStrategy(Unit.MONTH),
        ),
        UnitDefinition(
            id=Unit.QUARTER,
            plural_id="quarters",
            parent_id=Unit.YEAR,
            divisible_into=frozenset({Unit.MONTH, Unit.DAY}),
            strategy=AdapterStrategy(Unit.QUARTER),
        ),
        UnitDefinition(
            id=Unit.YEAR,
            plural_id="years",
            parent_id=Unit.DECADE,
            divisible_into=frozenset({Unit.QUARTER, Unit.MONTH, Unit.DAY}),
            strategy=AdapterStrategy(Unit.YEAR),
        ),
        UnitDefinition(
            id=Unit.DECADE,
            plural_id="decades",
            parent_id=Unit.CENTURY,
            divisible_into=frozenset({Unit.YEAR, Unit.QUARTER, Unit.MONTH}),
            strategy=YearMultipleStrategy(10),
        ),
        UnitDefinition(
            id=Unit.CENTURY,
            plural_id="centuries",
            parent_id=Unit.MILLENNIUM,
            divisible_into=frozenset({Unit.DECADE, Unit.YEAR}),
            strategy=YearMultipleStrategy(100),
        ),
        UnitDefinition(
            id=Unit.MILLENNIUM,
            plural_id="millennia",
            divisible_into=frozenset({Unit.CENTURY, Unit.DECADE, Unit.YEAR}),
            strategy=YearMultipleStrategy(1000),
        ),
        UnitDefinition(
            id=Unit.STABLE_MONTH,
            plural_id="stableMonths",
            divisible_into=frozenset({Unit.WEEK, Unit.DAY}),
            strategy=StableMonthStrategy(),
            tiles=False,
        ),
        UnitDefinition(
            id=Unit.CUSTOM,
            plural_id="custom",
            divisible_into=frozenset(ADAPTER_UNITS),
            tiles=False,
        ),
    ]


def default_registry() -> UnitRegistry:
    """Fresh registry holding the built-in units."""
    return UnitRegistry(_builtin_definitions())
