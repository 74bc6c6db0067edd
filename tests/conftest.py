"""Shared pytest fixtures for periodkit tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import datetime
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from periodkit.adapters import ADAPTER_FACTORIES, BUILTIN_ADAPTERS
from periodkit.adapters.base import CalendarAdapter
from periodkit.adapters.gregorian import GregorianAdapter
from periodkit.adapters.relativedelta import RelativeDeltaAdapter
from periodkit.context import TemporalContext, create_temporal

# A fixed "now" keeps is_today and default-date behaviour deterministic.
FIXED_NOW = datetime(2024, 6, 15, 14, 30, 45)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(params=["gregorian", "relativedelta"])
def adapter(request: pytest.FixtureRequest) -> CalendarAdapter:
    """Each bundled adapter in turn."""
    if request.param == "gregorian":
        return GregorianAdapter()
    return RelativeDeltaAdapter()


@pytest.fixture
def ctx(adapter: CalendarAdapter) -> TemporalContext:
    """Monday-start context over each bundled adapter."""
    return create_temporal(adapter, date=FIXED_NOW, now=FIXED_NOW, week_start_day=1)


@pytest.fixture
def gregorian_ctx() -> TemporalContext:
    """Monday-start context over the stdlib adapter only."""
    return create_temporal(GregorianAdapter(), date=FIXED_NOW, now=FIXED_NOW, week_start_day=1)


@pytest.fixture
def _restore_adapters() -> Iterator[None]:
    """Drop adapters registered during a test."""
    yield
    ADAPTER_FACTORIES.clear()
    ADAPTER_FACTORIES.update(BUILTIN_ADAPTERS)


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty directory with no periodkit env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` so no stray
    periodkit.toml or PERIODKIT_* variable leaks into a test.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PERIODKIT_CONFIG", raising=False)
    monkeypatch.delenv("PERIODKIT_ENGINE__WEEK_START_DAY", raising=False)
    monkeypatch.delenv("PERIODKIT_ENGINE__ADAPTER", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo root-logger changes made by configure_logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pk = logging.getLogger("periodkit")
    pk_level = pk.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pk.setLevel(pk_level)
    structlog.contextvars.clear_contextvars()
