"""Root CLI group for periodkit with global flags and command registration."""

from __future__ import annotations

import click

from periodkit import __version__
from periodkit.commands import register_commands
from periodkit.commands._context import AppContext
from periodkit.config.settings import PeriodKitSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="periodkit")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--week-start",
    type=click.IntRange(0, 6),
    default=None,
    help="First day of the week (0 = Sunday ... 6 = Saturday).",
)
@click.option("--adapter", default=None, help="Calendar adapter name.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    week_start: int | None,
    adapter: str | None,
) -> None:
    """periodkit — calendar period algebra from the command line."""
    ctx.ensure_object(dict)
    settings = PeriodKitSettings.from_cli(
        config_path=config_path,
        week_start=week_start,
        adapter=adapter,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
