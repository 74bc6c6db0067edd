"""Subcommand modules for periodkit.

Provides register_commands() which uses deferred imports to keep
``periodkit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from periodkit.commands.divide import divide
    from periodkit.commands.go import go
    from periodkit.commands.grid import grid
    from periodkit.commands.period import period
    from periodkit.commands.units import units

    cli.add_command(period)
    cli.add_command(divide)
    cli.add_command(go)
    cli.add_command(grid)
    cli.add_command(units)
