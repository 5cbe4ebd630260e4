"""CLI entry point: typer app and subcommand registration."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="mentoring-calendar",
    help="Convert a markdown milestone table into an iCalendar file",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True, no_args_is_help=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Turn "Activity | Date or Date Range" tables into Opens/Closes events.

    [bold cyan]Examples:[/bold cyan]

      mentoring-calendar convert events.md -o timeline.ics

      mentoring-calendar convert events.md --timezone UTC+5:30 --format json

      mentoring-calendar preview events.md
    """
    if version:
        console.print(
            f"[bold cyan]mentoring-calendar[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)


# Import subcommands to register them
from .convert import convert as _convert  # noqa: F401, E402
from .preview import preview as _preview  # noqa: F401, E402
