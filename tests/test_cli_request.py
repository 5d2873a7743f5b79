from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest
import respx

pytest.importorskip("rich_click")
pytest.importorskip("rich")

from click.testing import CliRunner

import smartsheet_requests
from smartsheet_requests.cli.main import cli

TOKEN = "cli-token-abcdef123456"


def _runner_env() -> dict[str, str]:
    return {"SMARTSHEET_ACCESS_TOKEN": TOKEN, "SMARTSHEET_BASE_URL": ""}


def test_cli_no_args_shows_help() -> None:
    result = CliRunner().invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage:" in result.output


def test_cli_version_json() -> None:
    result = CliRunner().invoke(cli, ["--json", "version"])
    assert result.exit_code == 0
    payload = json.loads(result.output.strip())
    assert payload["ok"] is True
    assert payload["data"]["version"] == smartsheet_requests.__version__


def test_request_dry_run_prints_composed_request() -> None:
    result = CliRunner().invoke(
        cli,
        [
            "--json",
            "request",
            "GET",
            "sheets/{sheet_id}",
            "-p",
            "sheet_id=42",
            "--param",
            "include=discussions",
            "--header",
            "Accept=text/csv",
            "--dry-run",
        ],
        env=_runner_env(),
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output.strip())
    data = payload["data"]
    assert payload["meta"]["dryRun"] is True
    assert data["url"] == "https://api.smartsheet.com/2.0/sheets/42"
    assert data["params"] == {"include": "discussions"}
    assert data["headers"]["Accept"] == "text/csv"
    assert data["headers"]["Authorization"] == "Bearer ****3456"
    assert TOKEN not in result.output
    assert "body" not in data


def test_request_dry_run_json_body() -> None:
    result = CliRunner().invoke(
        cli,
        ["--json", "request", "post", "sheets", "--body", '{"name": "x"}', "--dry-run"],
        env=_runner_env(),
    )
    assert result.exit_code == 0, result.output
    data = json.loads(result.output.strip())["data"]
    assert data["method"] == "POST"
    assert data["bodyType"] == "json"
    assert data["body"] == {"name": "x"}
    assert data["headers"]["Content-Type"] == "application/json"


def test_request_output_json_matches_json_flag() -> None:
    args = ["request", "post", "sheets", "--body", '{"name": "x"}', "--dry-run"]
    via_flag = CliRunner().invoke(cli, ["--json", *args], env=_runner_env())
    via_output = CliRunner().invoke(cli, ["--output", "json", *args], env=_runner_env())
    assert via_output.exit_code == 0, via_output.output
    flag_data = json.loads(via_flag.output.strip())["data"]
    output_data = json.loads(via_output.output.strip())["data"]
    assert output_data == flag_data


def test_request_rejects_body_with_file(tmp_path: Path) -> None:
    path = tmp_path / "data.csv"
    path.write_bytes(b"a,b\n")
    result = CliRunner().invoke(
        cli,
        [
            "request",
            "POST",
            "sheets/import",
            "--body",
            "{}",
            "--file",
            str(path),
            "--file-type",
            "csv",
            "--dry-run",
        ],
        env=_runner_env(),
    )
    assert result.exit_code == 2
    assert "Use either --body or --file" in result.output


def test_request_dry_run_file_upload(tmp_path: Path) -> None:
    path = tmp_path / "data.csv"
    path.write_bytes(b"a,b\n1,2\n")
    result = CliRunner().invoke(
        cli,
        [
            "--json",
            "request",
            "POST",
            "sheets/import",
            "--file",
            str(path),
            "--file-type",
            "csv",
            "--dry-run",
        ],
        env=_runner_env(),
    )
    assert result.exit_code == 0, result.output
    data = json.loads(result.output.strip())["data"]
    assert data["headers"]["Content-Type"] == "text/csv"
    assert data["headers"]["Content-Length"] == "8"
    assert data["body"] == "<file: 8 bytes>"


def test_request_dry_run_table_output() -> None:
    result = CliRunner().invoke(
        cli,
        ["request", "GET", "sheets/{sheet_id}", "-p", "sheet_id=7", "--dry-run"],
        env=_runner_env(),
    )
    assert result.exit_code == 0, result.output
    assert "https://api.smartsheet.com/2.0/sheets/7" in result.output
    assert TOKEN not in result.output


def test_request_missing_token() -> None:
    result = CliRunner().invoke(
        cli,
        ["request", "GET", "sheets", "--dry-run"],
        env={"SMARTSHEET_ACCESS_TOKEN": ""},
    )
    assert result.exit_code == 2
    assert "Missing access token." in result.output


def test_request_unsupported_file_type_lists_valid_types(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        cli,
        [
            "request",
            "POST",
            "sheets/import",
            "--file",
            str(tmp_path / "x.pdf"),
            "--file-type",
            "pdf",
            "--dry-run",
        ],
        env=_runner_env(),
    )
    assert result.exit_code == 2
    assert "csv, xlsx" in result.output


def test_request_missing_path_value() -> None:
    result = CliRunner().invoke(
        cli,
        ["--json", "request", "GET", "sheets/{sheet_id}", "--dry-run"],
        env=_runner_env(),
    )
    assert result.exit_code == 2
    payload = json.loads(result.output.strip())
    assert payload["ok"] is False
    assert payload["error"]["type"] == "MissingPathValueError"
    assert "sheet_id" in payload["error"]["message"]


def test_request_rejects_malformed_pairs() -> None:
    result = CliRunner().invoke(
        cli, ["request", "GET", "sheets", "--param", "novalue", "--dry-run"], env=_runner_env()
    )
    assert result.exit_code == 2
    assert "NAME=VALUE" in result.output


@respx.mock
def test_request_executes_through_httpx() -> None:
    route = respx.get("https://api.smartsheet.com/2.0/sheets/42").mock(
        return_value=httpx.Response(200, json={"id": 42, "name": "Plan"})
    )
    result = CliRunner().invoke(
        cli,
        ["--json", "request", "GET", "sheets/{sheet_id}", "-p", "sheet_id=42"],
        env=_runner_env(),
    )
    assert result.exit_code == 0, result.output
    assert route.called
    assert route.calls.last.request.headers["authorization"] == f"Bearer {TOKEN}"
    data = json.loads(result.output.strip())["data"]
    assert data == {"status": 200, "body": {"id": 42, "name": "Plan"}}
