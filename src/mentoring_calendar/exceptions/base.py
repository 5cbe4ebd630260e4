"""Base exception for mentoring-calendar.

Every error the package raises on purpose derives from
``MentoringCalendarError``. The CLI catches this type (and OSError when writing
``--output``), prints ``str(e)``
once on stderr and exits 1, so the message plus its ``details`` (the date
text, the row title, the config key) is all the user sees. Anything else
escaping is a bug and keeps its traceback.
"""

from typing import Dict, Optional


class MentoringCalendarError(Exception):
    """Base exception for all mentoring-calendar errors."""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message
