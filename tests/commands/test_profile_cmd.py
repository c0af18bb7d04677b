"""Tests for the profile command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from rosterctl.cli import cli


@pytest.mark.usefixtures("_isolated_data")
class TestProfileCommands:
    def test_show_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "profile", "show"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "get_profile"
        assert data["data"]["profile"]["email"] == "ada@example.com"

    def test_show_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["profile", "show"])
        assert result.exit_code == 0
        assert "Ada" in result.output
        assert "Online" in result.output

    def test_rename(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "profile", "rename", "Ada Lovelace"])
        assert result.exit_code == 0
        profile = json.loads(result.output)["data"]["profile"]
        assert profile["name"] == "Ada Lovelace"
        assert profile["status"] == "Shipping the roster"

    def test_rename_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "profile", "rename", ""])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["profile"]["name"] == ""

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "profile", "rename", "X"])
        assert result.exit_code == 0
        assert result.output.strip() == "OK: set_profile_name"

    def test_rename_is_not_written_back(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["profile", "rename", "Changed"])
        result = cli_runner.invoke(cli, ["--json", "profile", "show"])
        assert json.loads(result.output)["data"]["profile"]["name"] == "Ada"
