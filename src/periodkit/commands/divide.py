"""Command: divide a period into finer periods."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from periodkit.commands._base import PkCommand, date_argument

if TYPE_CHECKING:
    from periodkit.commands._context import AppContext


@click.command(
    cls=PkCommand,
    examples="""\
  periodkit divide year month 2024-06-15
  periodkit divide month day 2023-02-10
  periodkit --json divide stableMonth week 2021-02-01""",
)
@click.argument("unit")
@click.argument("target")
@date_argument()
@click.pass_obj
def divide(app: AppContext, unit: str, target: str, date: datetime | None) -> None:
    """Divide the UNIT period containing DATE into TARGET periods."""
    app.emit(app.calendar.divide(unit, target, date))
