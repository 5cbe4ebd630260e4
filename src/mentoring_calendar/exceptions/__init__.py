"""Exception hierarchy for mentoring-calendar."""

from .base import MentoringCalendarError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidTimezoneError,
)
from .timeline import (
    DateParseError,
    FileAccessError,
    TimelineError,
)

__all__ = [
    "MentoringCalendarError",
    "TimelineError",
    "DateParseError",
    "FileAccessError",
    "ConfigurationError",
    "InvalidConfigError",
    "InvalidTimezoneError",
]
