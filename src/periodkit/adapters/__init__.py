"""Calendar adapters and the named adapter catalogue.

Adapters are always chosen explicitly, either passed to ``create_temporal``
or named in configuration. Nothing probes the environment for a backend.
Plugins may add factories via the ``register_adapters`` hook.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from periodkit.adapters.base import CalendarAdapter
from periodkit.domain.errors import AdapterUnavailable

logger = logging.getLogger(__name__)

AdapterFactory = Callable[[], CalendarAdapter]


def _gregorian() -> CalendarAdapter:
    from periodkit.adapters.gregorian import GregorianAdapter

    return GregorianAdapter()


def _relativedelta() -> CalendarAdapter:
    from periodkit.adapters.relativedelta import RelativeDeltaAdapter

    return RelativeDeltaAdapter()


BUILTIN_ADAPTERS: dict[str, AdapterFactory] = {
    "gregorian": _gregorian,
    "relativedelta": _relativedelta,
}

ADAPTER_FACTORIES: dict[str, AdapterFactory] = dict(BUILTIN_ADAPTERS)


def register_adapter(name: str, factory: AdapterFactory) -> None:
    """Register an adapter factory under *name*.

    Built-in names are reserved and cannot be overridden.
    """
    normalized = name.strip()
    if not normalized:
        msg = "Adapter name must not be empty"
        raise ValueError(msg)
    if normalized in BUILTIN_ADAPTERS:
        msg = f"Adapter {normalized!r} conflicts with a built-in adapter"
        raise ValueError(msg)
    if not callable(factory):
        msg = f"Adapter factory for {normalized!r} must be callable"
        raise TypeError(msg)

    existing = ADAPTER_FACTORIES.get(normalized)
    if existing is not None and existing is not factory:
        msg = f"Adapter {normalized!r} is already registered"
        raise ValueError(msg)

    ADAPTER_FACTORIES[normalized] = factory
    logger.debug("Registered adapter: %s", normalized)


def get_adapter(name: str) -> CalendarAdapter:
    """Instantiate the adapter registered under *name*.

    Raises:
        AdapterUnavailable: If no factory is registered under *name*, or
            the factory does not produce a CalendarAdapter.
    """
    factory = ADAPTER_FACTORIES.get(name)
    if factory is None:
        msg = f"No calendar adapter named {name!r}; available: {available_adapters()}"
        raise AdapterUnavailable(msg)

    adapter = factory()
    if not isinstance(adapter, CalendarAdapter):
        msg = f"Adapter factory {name!r} returned {type(adapter).__name__}, not a CalendarAdapter"
        raise AdapterUnavailable(msg)
    return adapter


def available_adapters() -> list[str]:
    """Sorted names of all registered adapters."""
    return sorted(ADAPTER_FACTORIES)


__all__ = [
    "ADAPTER_FACTORIES",
    "AdapterFactory",
    "CalendarAdapter",
    "available_adapters",
    "get_adapter",
    "register_adapter",
]
