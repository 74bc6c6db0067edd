"""Command: show the period of a unit around a date."""

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
  periodkit period month 2024-02-10
  periodkit period decade 2024-06-15
  periodkit --week-start 0 period week 2024-06-15
  periodkit --json period stableMonth 2021-02-01""",
)
@click.argument("unit")
@date_argument()
@click.pass_obj
def period(app: AppContext, unit: str, date: datetime | None) -> None:
    """Show the UNIT period containing DATE (default: today)."""
    app.emit(app.calendar.period(unit, date))
