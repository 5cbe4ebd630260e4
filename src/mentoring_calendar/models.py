"""Data models for timeline rows and calendar events.

A ``RawRow`` only lives between extraction and normalization. A
``NormalizedEvent`` is what the calendar export consumes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time

OPENS_PREFIX = "Opens"
CLOSES_PREFIX = "Closes"

# Fixed marker windows, wall-clock in the caller's timezone.
OPENS_WINDOW: tuple[time, time] = (time(0, 1), time(1, 0))
CLOSES_WINDOW: tuple[time, time] = (time(23, 0), time(23, 59))


@dataclass(frozen=True)
class RawRow:
    """A ``| **Title** | Date text |`` row pulled out of markdown."""

    title: str
    date_text: str


@dataclass(frozen=True)
class NormalizedEvent:
    """A titled, timezone-aware calendar marker.

    Attributes:
        title: Display title, prefixed with ``Opens:`` or ``Closes:``
        start_time: Window start (aware datetime)
        end_time: Window end, strictly after ``start_time`` on the same day
    """

    title: str
    start_time: datetime
    end_time: datetime

    def __post_init__(self) -> None:
        if self.start_time >= self.end_time:
            raise ValueError(
                f"start_time must precede end_time for {self.title!r}: "
                f"{self.start_time.isoformat()} >= {self.end_time.isoformat()}"
            )

    def to_dict(self) -> dict[str, str]:
        return {
            "title": self.title,
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
        }
