"""Command: list registered units."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from periodkit.commands._base import PkCommand

if TYPE_CHECKING:
    from periodkit.commands._context import AppContext


@click.command(
    cls=PkCommand,
    examples="""\
  periodkit units
  periodkit --json units""",
)
@click.pass_obj
def units(app: AppContext) -> None:
    """List registered units and what each divides into."""
    app.emit(app.calendar.units())
