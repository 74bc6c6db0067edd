"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy TemporalContext construction and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from periodkit.domain.errors import PeriodKitError
from periodkit.output.formatters import format_result
from periodkit.services.result import OperationResult

if TYPE_CHECKING:
    from periodkit.config.settings import PeriodKitSettings
    from periodkit.context import TemporalContext
    from periodkit.services.calendar import CalendarService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The temporal context is built on first use so ``--help`` and
    ``--version`` never load plugins or resolve adapters.
    """

    def __init__(self, settings: PeriodKitSettings) -> None:
        self.settings = settings
        self._temporal: TemporalContext | None = None

        from periodkit.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def temporal(self) -> TemporalContext:
        """The engine context (created lazily on first access).

        Plugins are loaded first, when enabled, so their units and adapters
        are visible to the new context. A configuration error (such as an
        unknown adapter name) is emitted as a failed ``configure`` result.
        """
        if self._temporal is None:
            from periodkit.context import create_temporal
            from periodkit.domain.registry import default_registry

            registry = default_registry()
            if self.settings.plugins.enabled:
                from periodkit.plugins.manager import PluginManager

                PluginManager().discover_and_load(registry)

            try:
                self._temporal = create_temporal(config=self.settings.engine, registry=registry)
            except PeriodKitError as exc:
                self.emit(OperationResult.failure("configure", exc))
            else:
                from periodkit.config.logging import bind_engine_context

                bind_engine_context(
                    adapter=self._temporal.adapter.name,
                    week_start_day=self._temporal.week_start_day,
                )
        assert self._temporal is not None
        return self._temporal

    @property
    def calendar(self) -> CalendarService:
        from periodkit.services.calendar import CalendarService

        return CalendarService(self.temporal)

    def emit(self, result: OperationResult) -> None:
        """Format and output an OperationResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(
            result,
            json_output=self.settings.json_output,
            verbose=self.settings.verbose,
        )
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
