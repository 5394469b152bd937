from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from a11ylint.cli.main import app
from a11ylint.diagnostics.catalog import RULE_CATALOG

pytestmark = pytest.mark.unit

runner = CliRunner()

_CLEAN_JSX = '<main>\n  <img src="a.png" alt="A cat" />\n  <button onClick={save}>Save</button>\n</main>\n'
_BROKEN_JSX = '<main>\n  <img src="a.png" />\n  <div role="foobar" />\n</main>\n'
_WARNING_ONLY_JSX = '<div tabIndex="3" />\n'


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_check_clean_file_exits_zero(tmp_path: Path) -> None:
    path = _write(tmp_path, "clean.jsx", _CLEAN_JSX)
    result = runner.invoke(app, ["check", str(path)])
    assert result.exit_code == 0
    assert result.stdout == ""


def test_check_reports_sorted_text_lines(tmp_path: Path) -> None:
    path = _write(tmp_path, "broken.jsx", _BROKEN_JSX)
    result = runner.invoke(app, ["check", str(path)])
    assert result.exit_code == 1
    lines = result.stdout.splitlines()
    assert lines == [
        f"DIAG path={path} location=2:2 severity=error rule=alt-text "
        "message=img elements must have an alt tag.",
        f"DIAG path={path} location=3:7 severity=error rule=aria-role "
        "message=Elements with ARIA roles must use a valid, non-abstract ARIA role.",
    ]


def test_warning_only_findings_exit_zero_unless_strict(tmp_path: Path) -> None:
    path = _write(tmp_path, "tabindex.jsx", _WARNING_ONLY_JSX)

    recommended = runner.invoke(app, ["check", str(path)])
    assert recommended.exit_code == 0
    assert "severity=warning rule=tabindex-no-positive" in recommended.stdout

    strict = runner.invoke(app, ["check", "--profile", "strict", str(path)])
    assert strict.exit_code == 1
    assert "severity=error rule=tabindex-no-positive" in strict.stdout


def test_check_json_output_contract(tmp_path: Path) -> None:
    path = _write(tmp_path, "broken.jsx", _BROKEN_JSX)
    result = runner.invoke(app, ["check", "--format", "json", str(path)])
    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert payload["schema_version"] == 1
    assert payload["profile"] == "recommended"
    assert payload["status"] == "fail"
    assert payload["exit_code"] == 1
    first = payload["diagnostics"][0]
    assert first == {
        "path": str(path),
        "rule": "alt-text",
        "severity": "error",
        "kind": "element",
        "message": "img elements must have an alt tag.",
        "tag": "img",
        "line": 2,
        "column": 2,
    }
    assert payload["diagnostics"][1]["attribute"] == "role"


def test_check_json_pass_status(tmp_path: Path) -> None:
    path = _write(tmp_path, "clean.jsx", _CLEAN_JSX)
    result = runner.invoke(app, ["check", "--format", "json", str(path)])
    payload = json.loads(result.stdout)
    assert payload["status"] == "pass"
    assert payload["diagnostics"] == []


def test_check_html_files_use_the_html_host(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "page.html",
        '<!doctype html>\n<html><body>\n<img src="a.png">\n<nav role="navigation"></nav>\n</body></html>\n',
    )
    result = runner.invoke(app, ["check", str(path)])
    assert result.exit_code == 1
    assert [line.split(" rule=")[1].split(" ")[0] for line in result.stdout.splitlines()] == [
        "alt-text"
    ]


def test_check_multiple_files_keeps_argument_order(tmp_path: Path) -> None:
    second = _write(tmp_path, "b.jsx", "<img />\n")
    first = _write(tmp_path, "a.jsx", '<div aria-foo="x" />\n')
    result = runner.invoke(app, ["check", str(second), str(first)])
    assert result.exit_code == 1
    paths = [line.split(" ")[1] for line in result.stdout.splitlines()]
    assert paths == [f"path={second}", f"path={first}"]


def test_check_unknown_profile_exits_two(tmp_path: Path) -> None:
    path = _write(tmp_path, "clean.jsx", _CLEAN_JSX)
    result = runner.invoke(app, ["check", "--profile", "pedantic", str(path)])
    assert result.exit_code == 2
    assert "E_CONFIG_PROFILE_UNKNOWN" in result.output


def test_check_missing_file_is_a_usage_error(tmp_path: Path) -> None:
    result = runner.invoke(app, ["check", str(tmp_path / "missing.jsx")])
    assert result.exit_code == 2


def test_check_undecodable_file_exits_two(tmp_path: Path) -> None:
    path = tmp_path / "binary.jsx"
    path.write_bytes(b"\xff\xfe<img />")
    result = runner.invoke(app, ["check", str(path)])
    assert result.exit_code == 2
    assert "unable to read" in result.output


def test_check_rejects_unknown_format(tmp_path: Path) -> None:
    path = _write(tmp_path, "clean.jsx", _CLEAN_JSX)
    result = runner.invoke(app, ["check", "--format", "xml", str(path)])
    assert result.exit_code == 2


def test_rules_command_lists_the_catalog() -> None:
    result = runner.invoke(app, ["rules"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert len(lines) == len(RULE_CATALOG)
    assert lines[0] == (
        "RULE name=alt-text severity=error profiles=recommended,strict "
        "summary=img elements and configured image components carry an alt attribute"
    )
    assert any(
        line.startswith("RULE name=tabindex-no-positive severity=warning ") for line in lines
    )
