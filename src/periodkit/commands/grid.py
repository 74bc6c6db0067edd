"""Command: print the stable-month calendar grid."""

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
  periodkit grid 2021-02-01
  periodkit --week-start 0 grid 2024-06-15
  periodkit --json grid""",
)
@date_argument()
@click.pass_obj
def grid(app: AppContext, date: datetime | None) -> None:
    """Show the six-week calendar grid of the month containing DATE.

    Padding days from neighbouring months are dimmed.
    """
    app.emit(app.calendar.grid(date))
