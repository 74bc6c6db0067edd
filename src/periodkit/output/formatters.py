"""Rich/JSON output helpers.

The CLI renders OperationResult for humans (Rich tables and styled fields)
or machines (--json).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from periodkit.output.renderers import render_result

if TYPE_CHECKING:
    from periodkit.services.result import OperationResult


def format_result(
    result: OperationResult, *, json_output: bool = False, verbose: bool = False
) -> str:
    """Format an OperationResult for display.

    Args:
        result: The operation result to format.
        json_output: If True, return JSON; otherwise Rich-rendered text.
        verbose: Include error detail in human output.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    return render_result(result, verbose=verbose)
