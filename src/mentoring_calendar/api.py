"""Public API for mentoring-calendar.

Example:
    >>> from mentoring_calendar import convert
    >>>
    >>> ics_text = convert(open("events.md").read(), timezone="Asia/Kolkata")
    >>>
    >>> # Events only, no serialization
    >>> events = build_events(markdown, timezone="UTC")
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

from .config import CalendarConfig, load_config
from .exceptions import FileAccessError
from .export import UidFactory, serialize_calendar
from .logging_config import get_logger
from .models import NormalizedEvent
from .normalizer import parse_timeline

logger = get_logger(__name__)


def read_markdown(path: Path) -> str:
    """Read a markdown timeline.

    Raises:
        FileAccessError: If the file is missing or unreadable
    """
    path = Path(path)
    if not path.is_file():
        raise FileAccessError(path, "file not found")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(path, str(e))


def build_events(
    markdown: str,
    config: Optional[CalendarConfig] = None,
    **overrides,
) -> list[NormalizedEvent]:
    """Normalize every milestone row of ``markdown``.

    Args:
        markdown: Markdown document holding the timeline table
        config: Explicit configuration; loaded from files/env when None
        **overrides: Config overrides (e.g. ``timezone="UTC"``) applied on load

    Returns:
        Events in document order

    Raises:
        DateParseError: If any row's date text cannot be parsed
    """
    if config is None:
        config = load_config(**overrides)
    events = parse_timeline(markdown, config.tz, header_labels=config.header_labels)
    logger.debug(f"Built {len(events)} events in {config.timezone}")
    return events


def convert(
    markdown: str,
    config: Optional[CalendarConfig] = None,
    now: Optional[datetime] = None,
    uid_factory: Optional[UidFactory] = None,
    **overrides,
) -> str:
    """Convert a markdown timeline straight to iCalendar text."""
    if config is None:
        config = load_config(**overrides)
    events = build_events(markdown, config=config)
    return serialize_calendar(events, config=config, now=now, uid_factory=uid_factory)


def convert_file(
    path: Path,
    config: Optional[CalendarConfig] = None,
    **overrides,
) -> str:
    """Read ``path`` and convert it to iCalendar text."""
    return convert(read_markdown(path), config=config, **overrides)
