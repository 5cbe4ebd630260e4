"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import CalendarConfig, load_config
from ..logging_config import get_logger

console = Console()
err_console = Console(stderr=True)

logger = get_logger(__name__)


def resolve_config(
    config: Optional[Path] = None,
    timezone: Optional[str] = None,
    strict_timezone: bool = False,
    calendar_name: Optional[str] = None,
    fmt: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> CalendarConfig:
    """Build configuration from CLI options."""
    overrides = {}
    if timezone is not None:
        overrides["timezone"] = timezone
    if strict_timezone:
        overrides["strict_timezone"] = True
    if calendar_name is not None:
        overrides["calendar_name"] = calendar_name
    if fmt is not None:
        overrides["output_format"] = fmt
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)


def input_path(source: Optional[Path], settings: CalendarConfig) -> Path:
    """The markdown file to read: explicit argument, else configured default."""
    return source if source is not None else Path(settings.input_path)


def check_exclusive(verbose: bool, quiet: bool) -> None:
    if verbose and quiet:
        err_console.print("[red]Error:[/red] --verbose and --quiet are mutually exclusive")
        raise typer.Exit(1)


def fail(error: Exception, code: int = 1) -> typer.Exit:
    """Print a known error once on stderr and return the Exit to raise."""
    logger.debug(f"{error.__class__.__name__}: {error}")
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    return typer.Exit(code)
