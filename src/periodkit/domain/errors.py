"""periodkit exception hierarchy.

All engine errors inherit from PeriodKitError and carry a stable ``code``
used by the CLI result contract. Errors are raised at detection and never
retried or recovered inside the engine.
"""

from __future__ import annotations


class PeriodKitError(Exception):
    """Base exception for all periodkit errors."""

    code = "PERIODKIT_ERROR"


class UnknownUnit(PeriodKitError):
    """A unit id is not registered, or an adapter does not support it."""

    code = "UNKNOWN_UNIT"

    def __init__(self, unit: str, *, where: str | None = None) -> None:
        self.unit = unit
        self.where = where
        suffix = f" ({where})" if where else ""
        super().__init__(f"Unknown unit: {unit!r}{suffix}")


class InvalidDivision(PeriodKitError):
    """The target unit is not in the source unit's divisibility set.

    Examples:
        - Dividing a week into months
        - Dividing a month into weeks (week boundaries cross month boundaries)
        - Dividing a stable month into months
    """

    code = "INVALID_DIVISION"

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Cannot divide {source!r} into {target!r}")


class AdapterUnavailable(PeriodKitError):
    """No calendar adapter is registered under the requested name."""

    code = "ADAPTER_UNAVAILABLE"


class NonAdvancingIteration(PeriodKitError):
    """Interval generation stopped making progress.

    Raised by ``divide`` when the cursor fails to move forward or the
    iteration ceiling is reached.
    """

    code = "NON_ADVANCING_ITERATION"


class MalformedPeriod(PeriodKitError):
    """A period violates ``start <= date < end``, or cannot be formed."""

    code = "MALFORMED_PERIOD"


class InvalidUnitDefinition(PeriodKitError):
    """A unit definition was rejected by the registry.

    Examples:
        - Self-division
        - Division into an unregistered unit
        - A divisibility cycle
        - A duplicate id
    """

    code = "INVALID_UNIT_DEFINITION"
