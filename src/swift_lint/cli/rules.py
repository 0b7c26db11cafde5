from typing import Annotated

import typer
from rich.markup import escape

from swift_lint.cli._common import console, render_table
from swift_lint.config import SeverityConfiguration
from swift_lint.rules import RULES


def rules(
    examples: Annotated[bool, typer.Option("--examples", help="Show each rule's examples.")] = False,
) -> None:
    """List available rules."""
    default_severity = SeverityConfiguration().severity.value
    render_table(
        ["identifier", "name", "kind", "opt-in", "severity"],
        [
            (d.identifier, d.name, d.kind, "yes" if d.opt_in else "no", default_severity)
            for d in (rule.description for rule in RULES.values())
        ],
        footer=False,
    )
    if not examples:
        return

    for rule in RULES.values():
        description = rule.description
        console.print(f"\n[bold]{description.identifier}[/bold]: {escape(description.description)}")
        console.print("[green]Non-triggering:[/green]")
        for example in description.non_triggering_examples:
            console.print(escape(example), highlight=False)
        console.print("[red]Triggering:[/red]")
        for example in description.triggering_examples:
            console.print(escape(example), highlight=False)
