"""iCalendar formatter."""

from typing import List

from ..config import CalendarConfig
from ..export import serialize_calendar
from ..models import NormalizedEvent
from .base import BaseFormatter


class IcsFormatter(BaseFormatter):
    """Render events as an iCalendar document."""

    def render(self, events: List[NormalizedEvent], config: CalendarConfig) -> None:
        print(self.format(events, config), end="")

    def format(self, events: List[NormalizedEvent], config: CalendarConfig) -> str:
        return serialize_calendar(events, config=config)
