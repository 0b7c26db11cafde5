import typer

from swift_lint.cli.correct import correct
from swift_lint.cli.lint import lint
from swift_lint.cli.rules import rules

app = typer.Typer(
    name="swift-lint",
    help="swift-lint — find and remove redundant type annotations in Swift sources.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("lint")(lint)
app.command("correct")(correct)
app.command("rules")(rules)


def main() -> None:
    app()
