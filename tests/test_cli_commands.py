from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from systemd_lsp import cli


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_help_lists_commands() -> None:
    result = CliRunner().invoke(cli.app, ["--help"])
    assert result.exit_code == 0
    assert "serve" in result.output
    assert "check" in result.output


def test_check_clean_file_exits_zero(tmp_path: Path, service_unit: str) -> None:
    path = _write(tmp_path, "demo.service", service_unit)
    result = CliRunner().invoke(cli.app, ["check", str(path)])
    assert result.exit_code == 0
    assert result.output == ""


def test_check_warnings_only_exits_zero(tmp_path: Path) -> None:
    path = _write(tmp_path, "demo.service", "[Service]\nExecStart=\n")
    result = CliRunner().invoke(cli.app, ["check", str(path)])
    assert result.exit_code == 0
    assert f"{path}:2:1: warning: Key 'ExecStart' has an empty value" in result.output
    assert f"{path}:2:1: warning: ExecStart should use absolute paths" in result.output


def test_check_errors_exit_one(tmp_path: Path) -> None:
    path = _write(tmp_path, "demo.service", "[Service]\nType=bogus\n")
    result = CliRunner().invoke(cli.app, ["check", str(path)])
    assert result.exit_code == 1
    assert "error: Invalid service type: 'bogus'" in result.output


def test_check_json_output(tmp_path: Path) -> None:
    path = _write(tmp_path, "broken.service", "[Unit\nDescription=x\n")
    result = CliRunner().invoke(cli.app, ["check", "--json", str(path)])
    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert payload["errors"] == []
    (finding,) = payload["findings"]
    assert finding["path"] == str(path)
    assert finding["severity"] == "error"
    assert (finding["line"], finding["col"], finding["end_col"]) == (1, 1, 2)
    assert finding["source"] == "systemd-lsp"


def test_check_missing_file_exits_two(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli.app, ["check", str(tmp_path / "absent.service")])
    assert result.exit_code == 2


def test_serve_rejects_unknown_log_level(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        cli.app, ["serve", "--log-level", "chatty", "--config", str(tmp_path / "none.toml")]
    )
    assert result.exit_code != 0
