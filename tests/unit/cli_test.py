"""Tests for the swift-lint command line."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from swift_lint.cli.app import app
from swift_lint.config import SEVERITY_ENV_VAR

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clear_severity_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(SEVERITY_ENV_VAR, raising=False)


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["lint"],
        ["correct"],
        ["rules"],
    ],
    ids=["root", "lint", "correct", "rules"],
)
def test_short_help_flag(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_lint_code_prints_xcode_line() -> None:
    result = runner.invoke(app, ["lint", "--code", "var url: URL = URL()"])

    assert result.exit_code == 0
    assert (
        "<stdin>:1:8: warning: Redundant Type Annotation Violation: "
        "Variables should not have redundant type annotation (redundant_type_annotation)"
    ) in result.output
    assert "Found 1 violation(s), 0 serious" in result.output


def test_lint_clean_code() -> None:
    result = runner.invoke(app, ["lint", "--code", "var url = URL()"])
    assert result.exit_code == 0
    assert "Found 0 violation(s)" in result.output


def test_lint_error_severity_fails() -> None:
    result = runner.invoke(app, ["lint", "--code", "let url: URL = URL()", "--severity", "error"])
    assert result.exit_code == 2
    assert ": error: " in result.output


def test_lint_severity_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SEVERITY_ENV_VAR, "error")
    result = runner.invoke(app, ["lint", "--code", "let url: URL = URL()"])
    assert result.exit_code == 2


def test_lint_invalid_severity() -> None:
    result = runner.invoke(app, ["lint", "--code", "let a = 1", "--severity", "fatal"])
    assert result.exit_code == 2


def test_lint_table_format(tmp_path: Path) -> None:
    file_path = tmp_path / "Model.swift"
    file_path.write_text("let url: URL = URL()\n", encoding="utf-8")

    result = runner.invoke(app, ["lint", str(file_path), "--format", "table"])

    assert result.exit_code == 0
    assert "(1 rows)" in result.output


def test_lint_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["lint", str(tmp_path / "missing.swift")])
    assert result.exit_code == 2


def test_correct_rewrites_file(tmp_path: Path) -> None:
    file_path = tmp_path / "Model.swift"
    file_path.write_text("let url: URL = URL()\n", encoding="utf-8")

    result = runner.invoke(app, ["correct", str(tmp_path)])

    assert result.exit_code == 0
    assert "Done correcting 1 file(s)." in result.output
    assert file_path.read_text(encoding="utf-8") == "let url = URL()\n"


def test_correct_dry_run(tmp_path: Path) -> None:
    file_path = tmp_path / "Model.swift"
    file_path.write_text("let url: URL = URL()\n", encoding="utf-8")

    result = runner.invoke(app, ["correct", str(file_path), "--dry-run"])

    assert result.exit_code == 0
    assert "Would correct" in result.output
    assert file_path.read_text(encoding="utf-8") == "let url: URL = URL()\n"


def test_rules_lists_rule() -> None:
    result = runner.invoke(app, ["rules", "--examples"])
    assert result.exit_code == 0
    assert "redundant_type_annotation" in result.output
    assert "@IBInspectable var color: UIColor = UIColor.white" in result.output


def test_rules_table_has_no_row_count() -> None:
    result = runner.invoke(app, ["rules"])
    assert result.exit_code == 0
    assert "redundant_type_annotation" in result.output
    assert "rows)" not in result.output
