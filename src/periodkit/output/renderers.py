"""Operation-specific Rich renderers for OperationResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from periodkit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from periodkit.services.result import OperationResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: OperationResult, *, verbose: bool = False) -> str:
    """Render an OperationResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: OperationResult) -> None:
    label = Text("OK", style="pk.ok")
    op = Text(f"  {result.op}", style="pk.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="pk.key")
    v = Text(str(value), style="pk.unit" if key in ("type", "unit") else "")
    console.print(k + v)


def _period_fields(console: Console, period: dict[str, Any], *, label: str = "") -> None:
    if label:
        console.print(Text(f"  {label}", style="pk.key"))
    _field(console, "type", period["type"])
    _field(console, "start", period["start"])
    _field(console, "end", period["end"])
    _field(console, "date", period["date"])


def _period_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Start", style="pk.bound", no_wrap=True)
    table.add_column("End", no_wrap=True)
    for index, item in enumerate(items):
        table.add_row(str(index), item["start"], item["end"])
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: OperationResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f"[{err.code}] " if err else ""
    label = Text("ERROR", style="pk.error")
    op = Text(f"  {result.op}", style="pk.op")
    console.print(label, op, Text(": "), Text(f"{code}{msg}"))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Period renderers ──────────────────────────────────────────────────


def _render_period(result: OperationResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _period_fields(console, result.data["period"])


def _render_divide(result: OperationResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _period_fields(console, d["period"])
    _field(console, "unit", d["unit"])
    console.print(_period_table(d["items"]))
    console.print(f"\n{d['count']} periods")


def _render_go(result: OperationResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "steps", d["steps"])
    if verbose:
        _period_fields(console, d["origin"], label="from:")
    _period_fields(console, d["period"])


def _render_grid(result: OperationResult, console: Console, *, verbose: bool = False) -> None:
    """Render a stable month as a calendar table with dimmed padding days."""
    d = result.data
    month = d["month"]["start"][:7]
    table = Table(title=month, show_header=True, show_lines=False, pad_edge=False, expand=False)
    for header in d["headers"]:
        table.add_column(header, justify="right")

    for row in d["rows"]:
        cells: list[Text] = []
        for cell in row:
            if not cell["in_month"]:
                style = "pk.padding"
            elif cell["today"]:
                style = "pk.today"
            elif cell["weekend"]:
                style = "pk.weekend"
            else:
                style = ""
            cells.append(Text(str(cell["day"]), style=style))
        table.add_row(*cells)

    console.print(table)
    if verbose:
        _field(console, "start", d["period"]["start"])
        _field(console, "end", d["period"]["end"])


def _render_units(result: OperationResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Unit", style="pk.unit", no_wrap=True)
    table.add_column("Parent")
    table.add_column("Divisible into")
    table.add_column("Tiles")
    for item in result.data["items"]:
        table.add_row(
            item["id"],
            item["parent"] or "",
            ", ".join(item["divisible_into"]),
            "yes" if item["tiles"] else "no",
        )
    console.print(table)
    console.print(f"\n{result.data['count']} units")


def _render_generic(result: OperationResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "period": _render_period,
    "divide": _render_divide,
    "go": _render_go,
    "grid": _render_grid,
    "units": _render_units,
}
