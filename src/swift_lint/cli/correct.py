from typing import Annotated

import typer
from rich.markup import escape

from swift_lint.cli._common import configure_logging, console, err_console
from swift_lint.config import load_configuration
from swift_lint.core.lint import run_correct


def correct(
    paths: Annotated[list[str] | None, typer.Argument(help="Swift files or directories to correct.")] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Report corrections without writing files.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Remove redundant type annotations in place."""
    configure_logging(verbose)
    try:
        results = run_correct(paths or ["."], load_configuration(), dry_run=dry_run)
    except (ValueError, FileNotFoundError) as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from None

    verb = "Would correct" if dry_run else "Corrected"
    for result in results:
        console.print(
            f"[green]{verb}[/green] {escape(result.path)} ({len(result.corrections)} change(s))", soft_wrap=True
        )
    console.print(f"Done correcting {len(results)} file(s).")
