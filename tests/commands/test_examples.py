"""Tests for --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from periodkit.cli import cli

pytestmark = pytest.mark.usefixtures("_isolated_config")

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["period", "--examples"], ["periodkit period month", "--week-start 0"]),
    (["divide", "--examples"], ["periodkit divide year month", "stableMonth week"]),
    (["go", "--examples"], ["periodkit go quarter 1", "month -3"]),
    (["grid", "--examples"], ["periodkit grid 2021-02-01"]),
    (["units", "--examples"], ["periodkit units", "--json units"]),
]


def _examples_id(item: tuple[list[str], list[str]]) -> str:
    args, _ = item
    return "_".join(a for a in args if a != "--examples")


@pytest.mark.parametrize(
    "args,expected_keywords",
    EXAMPLES_COMMANDS,
    ids=[_examples_id(item) for item in EXAMPLES_COMMANDS],
)
def test_examples_flag(
    cli_runner: CliRunner, args: list[str], expected_keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in examples output for {args}"


@pytest.mark.parametrize("command", ["period", "divide", "go", "grid", "units"])
def test_examples_in_help(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0
    assert "--examples" in result.output


def test_examples_exit_before_validation(cli_runner: CliRunner) -> None:
    """--examples is eager, so missing arguments are not reported."""
    result = cli_runner.invoke(cli, ["divide", "--examples"])
    assert result.exit_code == 0
    assert "Missing argument" not in result.output
