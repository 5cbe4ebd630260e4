"""Timeline-related exceptions: unreadable input, unparseable dates."""

from pathlib import Path
from typing import Dict, Optional

from .base import MentoringCalendarError


class TimelineError(MentoringCalendarError):
    """Base class for errors raised while converting a timeline."""
    pass


class DateParseError(TimelineError):
    """Raised when a date cell contains no recognizable calendar date."""

    def __init__(self, text: str, title: Optional[str] = None, reason: str = "no date found"):
        details: Dict[str, str] = {"reason": reason}
        if title is not None:
            details["title"] = title

        super().__init__(f"Unable to find valid date in: {text!r}", details=details)
        self.text = text
        self.title = title
        self.reason = reason


class FileAccessError(TimelineError):
    """Raised when the markdown input cannot be read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason
