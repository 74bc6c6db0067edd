"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) in the ``periodkit.plugins`` group via
pluggy's setuptools entrypoint loader, plus plugins registered directly.
Capabilities: extra calendar units and calendar adapters.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any

import pluggy

from periodkit.plugins.hookspecs import PROJECT_NAME, PeriodKitHookSpec

if TYPE_CHECKING:
    from periodkit.domain.registry import UnitRegistry

ENTRY_POINT_GROUP = "periodkit.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook collection."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(PeriodKitHookSpec)

    def discover_and_load(self, registry: UnitRegistry | None = None) -> list[str]:
        """Load entry-point plugins and apply their contributions.

        Units go into *registry* (when given); adapters go into the global
        adapter catalogue. Returns the names of all registered plugins.
        """
        try:
            self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        except Exception:
            logger.warning("Failed to load %s entry points", ENTRY_POINT_GROUP, exc_info=True)
        self._normalize_plugin_instances()

        if registry is not None:
            self.apply_units(registry)
        self.apply_adapters()
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Contributions
    # ------------------------------------------------------------------

    def apply_units(self, registry: UnitRegistry) -> list[str]:
        """Register every plugin-provided unit into *registry*.

        Rejected definitions are logged as warnings and skipped. Returns the
        ids that were registered.
        """
        from periodkit.domain.errors import InvalidUnitDefinition
        from periodkit.domain.registry import UnitDefinition

        added: list[str] = []
        for plugin_name, definitions in self._collect("register_units", list):
            for definition in definitions:
                if not isinstance(definition, UnitDefinition):
                    logger.warning(
                        "Plugin %s returned %s instead of a UnitDefinition",
                        plugin_name,
                        type(definition).__name__,
                    )
                    continue
                try:
                    registry.register(definition.id, definition)
                except InvalidUnitDefinition:
                    logger.warning(
                        "Skipping unit %r from plugin %s",
                        definition.id,
                        plugin_name,
                        exc_info=True,
                    )
                    continue
                added.append(definition.id)
        return added

    def apply_adapters(self) -> list[str]:
        """Register every plugin-provided adapter factory. Returns the new names."""
        from periodkit.adapters import register_adapter

        added: list[str] = []
        for plugin_name, factories in self._collect("register_adapters", dict):
            for name, factory in factories.items():
                try:
                    register_adapter(name, factory)
                except (TypeError, ValueError):
                    logger.warning(
                        "Skipping adapter %r from plugin %s",
                        name,
                        plugin_name,
                        exc_info=True,
                    )
                    continue
                added.append(name)
        return added

    def _collect(self, hook_name: str, expected: type) -> list[tuple[str, Any]]:
        """Call *hook_name* on each plugin separately so one failure stays isolated."""
        results: list[tuple[str, Any]] = []
        for plugin in self._pm.get_plugins():
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            hook = getattr(plugin, hook_name, None)
            if hook is None:
                continue
            try:
                value = hook()
            except Exception:
                logger.warning(
                    "Plugin %s failed in %s",
                    plugin_name,
                    hook_name,
                    exc_info=True,
                )
                continue
            if value is None:
                continue
            if not isinstance(value, expected):
                logger.warning(
                    "Plugin %s returned %s from %s, expected %s",
                    plugin_name,
                    type(value).__name__,
                    hook_name,
                    expected.__name__,
                )
                continue
            results.append((plugin_name, value))
        return results

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly, leaving
        ``self`` unbound at dispatch time.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            if not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        ``HookimplMarker("periodkit")`` sets a ``periodkit_impl`` attribute
        on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, f"{PROJECT_NAME}_impl", None):
                return True
        return False
