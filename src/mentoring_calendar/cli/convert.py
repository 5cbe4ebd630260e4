"""Convert command: markdown timeline to .ics (or json)."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from . import app
from ._common import check_exclusive, err_console, fail, input_path, resolve_config
from ..api import build_events, read_markdown
from ..exceptions import MentoringCalendarError
from ..export import write_calendar
from ..formatters import get_formatter
from ..logging_config import setup_logging


@app.command()
def convert(
    source: Optional[Path] = typer.Argument(
        None,
        help="Markdown file holding the timeline table (default: events.md)",
        dir_okay=False,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write to this file instead of stdout",
        dir_okay=False,
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: ics (default), json, rich",
    ),
    timezone: Optional[str] = typer.Option(
        None,
        "--timezone",
        "-z",
        help="Timezone for the 00:01/23:00 windows (IANA name or offset like UTC+5:30)",
    ),
    strict_timezone: bool = typer.Option(
        False,
        "--strict-timezone",
        help="Fail on an unknown timezone instead of falling back to UTC",
    ),
    calendar_name: Optional[str] = typer.Option(
        None,
        "--calendar-name",
        help="Calendar display name (X-WR-CALNAME)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress all but ERROR logging"),
):
    """Convert a markdown milestone table into calendar events."""
    check_exclusive(verbose, quiet)
    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = resolve_config(
            config=config,
            timezone=timezone,
            strict_timezone=strict_timezone,
            calendar_name=calendar_name,
            fmt=fmt,
            verbose=verbose,
            quiet=quiet,
        )
        logger.debug(f"Loaded settings: {settings}")

        markdown = read_markdown(input_path(source, settings))
        events = build_events(markdown, config=settings)

        if output is None:
            get_formatter(settings.output_format).render(events, settings)
            return

        if settings.output_format == "ics":
            write_calendar(output, events, config=settings)
        else:
            output.write_text(get_formatter(settings.output_format).format(events, settings), encoding="utf-8")

        if not quiet:
            err_console.print(f"[green]Wrote {len(events)} events to {escape(str(output))}[/green]")

    except (MentoringCalendarError, OSError) as e:
        raise fail(e)

    except KeyboardInterrupt:
        logger.info("Conversion interrupted by user")
        err_console.print("\n[yellow]Conversion interrupted[/yellow]")
        raise typer.Exit(130)
