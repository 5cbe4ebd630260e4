"""Base formatter interface for timeline output rendering."""

from abc import ABC, abstractmethod
from typing import List

from ..config import CalendarConfig
from ..models import NormalizedEvent


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, events: List[NormalizedEvent], config: CalendarConfig) -> None:
        """Render events to stdout/stderr as appropriate."""

    @abstractmethod
    def format(self, events: List[NormalizedEvent], config: CalendarConfig) -> str:
        """Return formatted string representation of events."""
