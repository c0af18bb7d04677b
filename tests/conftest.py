"""Shared pytest fixtures for rosterctl tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from rosterctl.config.logging import logger_levels
from rosterctl.domain.models import AppState, Friend, Profile
from rosterctl.infrastructure.store import StateStore
from rosterctl.services.dispatcher import CommandDispatcher
from rosterctl.services.telemetry import disable_telemetry

PROFILE_DOC: dict[str, Any] = {
    "name": "Ada",
    "email": "ada@example.com",
    "status": "Shipping the roster",
    "availability": "Online",
}

ROSTER_DOC: list[dict[str, Any]] = [
    {"name": "Bob", "email": "bob@example.com", "status": "in a meeting", "availability": "Busy"},
    {"name": "Ann", "email": "ann@example.com", "status": "", "availability": "Online"},
    {"name": "Zoe", "email": "zoe@example.com", "status": "on holiday", "availability": "Offline"},
    {"name": "Cy", "email": "cy@example.com", "status": "lunch", "availability": "Away"},
]


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``--verbose`` CLI runs flip the telemetry flag; keep tests independent."""
    yield
    disable_telemetry()


@pytest.fixture
def _restore_logging() -> Generator[None]:
    """Restore the root handlers and every managed logger level after a test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    managed = {name: logging.getLogger(name).level for name in logger_levels()}
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    for name, level in managed.items():
        logging.getLogger(name).setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    """Temp directory holding ``user.json`` and ``friends.json``."""
    (tmp_path / "user.json").write_text(json.dumps(PROFILE_DOC), encoding="utf-8")
    (tmp_path / "friends.json").write_text(json.dumps(ROSTER_DOC), encoding="utf-8")
    return tmp_path


@pytest.fixture
def _isolated_data(data_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests from a temp data root with no outside config.

    Use via ``@pytest.mark.usefixtures("_isolated_data")``.
    """
    monkeypatch.delenv("ROSTERCTL_CONFIG", raising=False)
    monkeypatch.chdir(data_root)


@pytest.fixture
def state() -> AppState:
    return AppState(
        profile=Profile.model_validate(PROFILE_DOC),
        friends=[Friend.model_validate(doc) for doc in ROSTER_DOC],
    )


@pytest.fixture
def store(state: AppState) -> StateStore:
    return StateStore(state)


@pytest.fixture
def dispatcher(store: StateStore) -> CommandDispatcher:
    return CommandDispatcher(store)
