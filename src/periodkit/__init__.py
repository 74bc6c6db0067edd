"""periodkit — calendar period algebra over pluggable calendar adapters."""

from periodkit.context import TemporalContext, create_temporal
from periodkit.domain.errors import (
    AdapterUnavailable,
    InvalidDivision,
    InvalidUnitDefinition,
    MalformedPeriod,
    NonAdvancingIteration,
    PeriodKitError,
    UnknownUnit,
)
from periodkit.domain.period import Period
from periodkit.domain.registry import UnitDefinition, UnitRegistry, default_registry
from periodkit.domain.units import Unit

__version__ = "0.1.0"

__all__ = [
    "AdapterUnavailable",
    "InvalidDivision",
    "InvalidUnitDefinition",
    "MalformedPeriod",
    "NonAdvancingIteration",
    "Period",
    "PeriodKitError",
    "TemporalContext",
    "Unit",
    "UnitDefinition",
    "UnitRegistry",
    "__version__",
    "create_temporal",
    "default_registry",
]
