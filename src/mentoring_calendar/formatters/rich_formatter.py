"""Rich terminal formatter: a table preview of the events."""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ..config import CalendarConfig
from ..models import OPENS_PREFIX, NormalizedEvent
from .base import BaseFormatter


def _title_label(title: str) -> Text:
    # titles are user text, never markup
    if title.startswith(f"{OPENS_PREFIX}:"):
        return Text(title, style="green")
    return Text(title, style="red")


class RichFormatter(BaseFormatter):
    """Render events as a rich table."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def build_table(self, events: List[NormalizedEvent], config: CalendarConfig) -> Table:
        table = Table(
            title=f"[bold cyan]{escape(config.calendar_name or 'Timeline')}[/bold cyan] ({config.timezone})",
            show_lines=False,
        )
        table.add_column("#", justify="right", style="dim")
        table.add_column("Event")
        table.add_column("Date", style="cyan")
        table.add_column("Start")
        table.add_column("End")

        for i, event in enumerate(events, start=1):
            table.add_row(
                str(i),
                _title_label(event.title),
                event.start_time.strftime("%a %Y-%m-%d"),
                event.start_time.strftime("%H:%M"),
                event.end_time.strftime("%H:%M"),
            )
        return table

    def render(self, events: List[NormalizedEvent], config: CalendarConfig) -> None:
        if not events:
            self.console.print("[yellow]No timeline rows found.[/yellow]")
            return
        self.console.print(self.build_table(events, config))
        self.console.print(f"[bold green]{len(events)} events[/bold green]")

    def format(self, events: List[NormalizedEvent], config: CalendarConfig) -> str:
        with self.console.capture() as capture:
            self.render(events, config)
        return capture.get()
