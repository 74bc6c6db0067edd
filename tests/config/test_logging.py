"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from periodkit.config.logging import QUIET_LOGGERS, bind_engine_context, configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("periodkit").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("periodkit").level == logging.WARNING

    def test_human_mode_output(self) -> None:
        configure_logging(verbose=True, log_json=False)
        log = structlog.get_logger("periodkit.test")
        log.warning("hello world", key="val")

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("periodkit.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "periodkit.test"
        assert "timestamp" in parsed

    def test_stdlib_engine_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("periodkit.operations.divide").debug("Divided probe")

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "Divided probe"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "periodkit.operations.divide"
        assert "timestamp" in parsed

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("pluggy").debug("hook noise")
        logging.getLogger("dateutil").debug("parser noise")

        captured = capfd.readouterr()
        assert captured.err == ""

    def test_quiet_loggers_stay_at_warning(self) -> None:
        configure_logging(verbose=True, log_json=False)
        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_json_tracebacks_are_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)

        try:
            raise RuntimeError("boom")
        except RuntimeError:
            logging.getLogger("periodkit.plugins.manager").warning(
                "Plugin probe failed", exc_info=True
            )

        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Plugin probe failed"
        assert isinstance(parsed["exception"], list)
        assert parsed["exception"][0]["exc_type"] == "RuntimeError"

    def test_engine_context_is_bound(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        bind_engine_context(adapter="gregorian", week_start_day=0)

        logging.getLogger("periodkit.context").debug("Browsing moved")

        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["adapter"] == "gregorian"
        assert parsed["week_start_day"] == 0

    def test_quiet_mode_hides_debug(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)

        logging.getLogger("periodkit.context").debug("Created temporal context")

        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        root = logging.getLogger()
        assert len(root.handlers) == 1
