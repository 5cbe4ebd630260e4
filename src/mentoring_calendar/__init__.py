"""
mentoring-calendar - markdown milestone tables to iCalendar

Reads ``| **Activity** | Date or Date Range |`` tables and produces
fixed-window "Opens:" / "Closes:" calendar markers.
"""

__version__ = "0.1.0"

from .api import build_events, convert, convert_file
from .config import CalendarConfig, load_config
from .exceptions import DateParseError, MentoringCalendarError
from .models import NormalizedEvent, RawRow
from .normalizer import parse_timeline

__all__ = [
    "convert",  # Main entry point: markdown -> .ics text
    "convert_file",
    "build_events",
    "parse_timeline",  # Core: markdown + tzinfo -> events
    "CalendarConfig",
    "load_config",
    "NormalizedEvent",
    "RawRow",
    "DateParseError",
    "MentoringCalendarError",
]
