"""JSON formatter."""

import json
from typing import List

from ..config import CalendarConfig
from ..models import NormalizedEvent
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render events as a JSON array of title/start/end objects."""

    def render(self, events: List[NormalizedEvent], config: CalendarConfig) -> None:
        print(self.format(events, config))

    def format(self, events: List[NormalizedEvent], config: CalendarConfig) -> str:
        data = {
            "timezone": config.timezone,
            "events": [e.to_dict() for e in events],
        }
        return json.dumps(data, indent=2)
