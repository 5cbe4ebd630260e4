"""Preview command: show the normalized events as a table."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import check_exclusive, err_console, fail, input_path, resolve_config
from ..api import build_events, read_markdown
from ..exceptions import MentoringCalendarError
from ..formatters import RichFormatter
from ..logging_config import setup_logging


@app.command()
def preview(
    source: Optional[Path] = typer.Argument(
        None,
        help="Markdown file holding the timeline table (default: events.md)",
        dir_okay=False,
    ),
    timezone: Optional[str] = typer.Option(
        None, "--timezone", "-z",
        help="Timezone for the 00:01/23:00 windows",
    ),
    strict_timezone: bool = typer.Option(
        False, "--strict-timezone",
        help="Fail on an unknown timezone instead of falling back to UTC",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c",
        help="Configuration file path (TOML format)",
        exists=True, file_okay=True, dir_okay=False, readable=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress all but ERROR logging"),
):
    """Show the events a timeline would produce, without writing a calendar."""
    check_exclusive(verbose, quiet)
    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = resolve_config(
            config=config,
            timezone=timezone,
            strict_timezone=strict_timezone,
            verbose=verbose,
            quiet=quiet,
        )
        events = build_events(read_markdown(input_path(source, settings)), config=settings)
        RichFormatter().render(events, settings)

    except MentoringCalendarError as e:
        raise fail(e)

    except KeyboardInterrupt:
        logger.info("Preview interrupted by user")
        err_console.print("\n[yellow]Preview interrupted[/yellow]")
        raise typer.Exit(130)
