from enum import Enum
from typing import Annotated

import typer
from rich.markup import escape

from swift_lint.cli._common import configure_logging, console, err_console, render_table
from swift_lint.config import load_configuration
from swift_lint.core.lint import run_lint
from swift_lint.models import Severity, StyleViolation


class OutputFormat(str, Enum):
    XCODE = "xcode"
    TABLE = "table"


def _xcode_line(violation: StyleViolation) -> str:
    return (
        f"{violation.location}: {violation.severity.value}: "
        f"{violation.rule_name} Violation: {violation.reason} ({violation.rule_id})"
    )


def lint(
    paths: Annotated[list[str] | None, typer.Argument(help="Swift files or directories to lint.")] = None,
    code: Annotated[str | None, typer.Option(help="Swift source string to lint instead of files.")] = None,
    severity: Annotated[
        str | None, typer.Option(help="Severity to report violations with (warning or error).")
    ] = None,
    output_format: Annotated[OutputFormat, typer.Option("--format", help="Output format.")] = OutputFormat.XCODE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Report redundant type annotations."""
    configure_logging(verbose)
    try:
        configuration = load_configuration(severity)
        report = run_lint(paths or ["."], configuration, code=code)
    except (ValueError, FileNotFoundError) as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from None

    if output_format is OutputFormat.TABLE:
        render_table(
            ["file", "line", "character", "severity", "rule"],
            [
                (v.location.file or "<stdin>", v.location.line, v.location.character, v.severity.value, v.rule_id)
                for v in report.violations
            ],
        )
    else:
        for violation in report.violations:
            console.print(escape(_xcode_line(violation)), highlight=False, soft_wrap=True)

    errors = sum(1 for v in report.violations if v.severity is Severity.ERROR)
    console.print(
        f"Done linting! Found {len(report.violations)} violation(s), {errors} serious "
        f"in {len(report.files) if code is None else 1} file(s)."
    )
    if report.has_errors:
        raise typer.Exit(code=2)
