"""Pluggy hook specifications for periodkit setup-time extensions.

Plugins contribute calendar units and adapters. Both hooks are collected
once, when the plugin manager loads, and fed into the unit registry and the
adapter catalogue.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from periodkit.adapters import AdapterFactory
    from periodkit.domain.registry import UnitDefinition

PROJECT_NAME = "periodkit"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class PeriodKitHookSpec:
    """Hook specifications for the periodkit plugin system."""

    @hookspec
    def register_units(self) -> list[UnitDefinition] | None:
        """Return unit definitions to add to the unit registry.

        Definitions are registered in the order returned, so division
        targets must come before the units that divide into them.
        """

    @hookspec
    def register_adapters(self) -> dict[str, AdapterFactory] | None:
        """Return name -> zero-argument factory mappings for calendar adapters."""
