"""Tests for format_result and the Rich renderers."""

from __future__ import annotations

import json

from rosterctl.output.formatters import OutputSettings, format_result
from rosterctl.services.result import ServiceError, ServiceResult

ANN = {"name": "Ann", "email": "ann@x.com", "status": "hello", "availability": "Online"}
ZOE = {"name": "Zoe", "email": "zoe@x.com", "status": "", "availability": "Offline"}


def _roster() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="list_roster_partitioned",
        data={"online": [ANN], "offline": [ZOE], "counts": {"online": 1, "offline": 1}},
    )


def _err() -> ServiceResult:
    return ServiceResult(
        ok=False,
        op="update_friend",
        error=ServiceError(code="NOT_FOUND", message="Friend not found: x@x.com"),
    )


class TestJson:
    def test_round_trips(self) -> None:
        output = format_result(_roster(), settings=OutputSettings(json_output=True))
        parsed = json.loads(output)
        assert parsed["ok"] is True
        assert parsed["data"]["online"][0]["email"] == "ann@x.com"

    def test_json_beats_quiet(self) -> None:
        output = format_result(_roster(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "list_roster_partitioned"


class TestQuiet:
    def test_roster_lists_emails(self) -> None:
        output = format_result(_roster(), settings=OutputSettings(quiet=True))
        assert output.splitlines() == ["ann@x.com", "zoe@x.com"]

    def test_other_ops(self) -> None:
        result = ServiceResult(ok=True, op="add_friend", data={"friend": ANN})
        assert format_result(result, settings=OutputSettings(quiet=True)) == "OK: add_friend"

    def test_error(self) -> None:
        output = format_result(_err(), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: update_friend")


class TestHuman:
    def test_roster_tables(self) -> None:
        output = format_result(_roster())
        assert "Online (1)" in output
        assert "Offline (1)" in output
        assert "ann@x.com" in output
        assert "📴 Offline" in output

    def test_profile(self) -> None:
        result = ServiceResult(ok=True, op="get_profile", data={"profile": ANN})
        output = format_result(result)
        assert output.startswith("OK")
        assert "email: ann@x.com" in output
        assert "👤 Online" in output

    def test_friend_with_changes_leaves_warnings_out(self) -> None:
        result = ServiceResult(
            ok=True,
            op="update_friend",
            data={"friend": ANN, "fields_changed": ["status"]},
            warnings=["careful"],
        )
        output = format_result(result)
        assert "changed: status" in output
        assert "careful" not in output

    def test_generic_fallback(self) -> None:
        result = ServiceResult(ok=True, op="something_else", data={"k": "v"})
        assert "k: v" in format_result(result)

    def test_error(self) -> None:
        output = format_result(_err())
        assert "ERROR" in output
        assert "[NOT_FOUND]" in output

    def test_verbose_meta(self) -> None:
        result = ServiceResult(
            ok=True, op="get_profile", data={"profile": ANN}, meta={"duration_ms": 1.5}
        )
        output = format_result(result, settings=OutputSettings(verbose=True))
        assert "duration_ms: 1.5" in output
