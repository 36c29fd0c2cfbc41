"""CLI for ebcron - convert Unix cron expressions for AWS EventBridge."""

import logging
from typing import Annotated, Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ebcron import __version__
from ebcron.convert import convert, convert_schedule
from ebcron.cron_parse import CronParseError, parse_cron
from ebcron.gallery import EXAMPLES

app = typer.Typer(name="ebcron", help="Convert Unix cron expressions to AWS EventBridge format.", add_completion=False)
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"ebcron {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[Optional[bool], typer.Option("--version", "-v", callback=_version_callback, is_eager=True)] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Show debug logging")] = False,
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@app.command(name="convert")
def convert_cmd(
    expression: Annotated[str, typer.Argument(help="Unix cron expression (5 fields), quoted")],
    schedule: Annotated[bool, typer.Option("--schedule", "-s", help="Wrap as cron(...) schedule expression")] = False,
) -> None:
    """Convert a Unix cron expression to EventBridge format."""
    try:
        result = convert_schedule(expression) if schedule else convert(expression)
    except CronParseError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    print(result)


@app.command(name="validate")
def validate_cmd(expression: Annotated[str, typer.Argument(help="Unix cron expression (5 fields), quoted")]) -> None:
    """Check a Unix cron expression."""
    try:
        parse_cron(expression)
    except CronParseError as e:
        rprint(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(1)

    rprint(f"[green]✓[/green] Valid: {escape(expression.strip())}")


@app.command(name="examples")
def examples_cmd() -> None:
    """Show example conversions."""
    table = Table(title="Examples")
    table.add_column("Unix", style="cyan", no_wrap=True)
    table.add_column("EventBridge", style="green", no_wrap=True)
    table.add_column("Description")

    for example in EXAMPLES:
        table.add_row(escape(example.unix), escape(convert(example.unix)), example.description)

    console.print(table)


if __name__ == "__main__":
    app()
