"""Command: step forward or backward by whole periods."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from periodkit.commands._base import PkCommand, date_argument

if TYPE_CHECKING:
    from periodkit.commands._context import AppContext


@click.command(
    cls=PkCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  periodkit go quarter 1 2024-05-01
  periodkit go month -3 2024-05-31
  periodkit --json go week 52 2024-01-01""",
)
@click.argument("unit")
@click.argument("steps", type=int)
@date_argument()
@click.pass_obj
def go(app: AppContext, unit: str, steps: int, date: datetime | None) -> None:
    """Move STEPS UNIT periods away from the one containing DATE."""
    app.emit(app.calendar.go(unit, steps, date))
