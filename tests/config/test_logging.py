"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from rosterctl.config.logging import configure_logging, logger_levels

pytestmark = pytest.mark.usefixtures("_restore_logging")


class TestLoggerLevels:
    def test_defaults_are_warning(self) -> None:
        assert set(logger_levels().values()) == {logging.WARNING}

    def test_verbose(self) -> None:
        levels = logger_levels(verbose=True)
        assert levels["rosterctl"] == logging.DEBUG
        assert levels["mcp"] == logging.INFO
        assert levels["httpx"] == logging.WARNING

    def test_serving_raises_lifecycle_loggers(self) -> None:
        levels = logger_levels(serving=True)
        assert levels["rosterctl.infrastructure"] == logging.INFO
        assert levels["rosterctl.mcp"] == logging.INFO
        assert levels["rosterctl"] == logging.WARNING
        assert levels["mcp"] == logging.WARNING

    def test_verbose_wins_over_serving(self) -> None:
        levels = logger_levels(verbose=True, serving=True)
        assert levels["rosterctl.infrastructure"] == logging.DEBUG


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("rosterctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("rosterctl").level == logging.WARNING
        assert logging.getLogger("uvicorn").level == logging.WARNING

    def test_reconfigure_resets_serving_levels(self) -> None:
        configure_logging(serving=True)
        assert logging.getLogger("rosterctl.infrastructure").level == logging.INFO
        configure_logging()
        assert logging.getLogger("rosterctl.infrastructure").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("rosterctl.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "rosterctl.test"
        assert "timestamp" in parsed

    def test_stdlib_loggers_are_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("rosterctl.infrastructure.loader").info("Loaded %d friends", 3)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Loaded 3 friends"
        assert parsed["level"] == "info"

    def test_info_hidden_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("rosterctl.infrastructure.loader").info("Loaded 3 friends")
        assert capfd.readouterr().err == ""

    def test_serving_shows_bootstrap_events(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True, serving=True)
        logging.getLogger("rosterctl.infrastructure.loader").info("Loaded %d friends", 4)
        logging.getLogger("rosterctl.services.roster").info("Getting friends list")
        lines = capfd.readouterr().err.strip().splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["Loaded 4 friends"]

    def test_nothing_on_stdout(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True, serving=True)
        logging.getLogger("rosterctl").warning("to stderr")
        logging.getLogger("rosterctl.mcp.server").info("MCP server ready")
        assert capfd.readouterr().out == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
