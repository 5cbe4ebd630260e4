"""Row normalization: raw table rows to fixed-window calendar events.

A date cell is either a single deadline or a range joined by an en dash
(``–``, U+2013). A plain hyphen never separates a range.

    single  ->  "Closes: <title>"  23:00-23:59 on the date
    range   ->  "Opens: <title>"   00:01-01:00 on the start date
                "Closes: <title>"  23:00-23:59 on the end date

Conversion is all-or-nothing: the first row that fails to parse aborts the
whole timeline.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, tzinfo
from typing import Iterable, Optional

from .dates import extract_year, parse_date
from .extractor import DEFAULT_HEADER_LABELS, iter_rows
from .logging_config import get_logger
from .models import CLOSES_PREFIX, CLOSES_WINDOW, OPENS_PREFIX, OPENS_WINDOW, NormalizedEvent, RawRow

logger = get_logger(__name__)

RANGE_RE = re.compile(r"(.+?)\s+–\s+(.+)")


def split_range(date_text: str) -> Optional[tuple[str, str]]:
    """Split a range cell into (start, end) text, or None for a single date."""
    m = RANGE_RE.match(date_text)
    if m is None:
        return None
    return m.group(1).strip(), m.group(2).strip()


def inherit_year(start_text: str, end_text: str) -> str:
    """Append the end's year to a start that has none.

    ``January 7 – January 20, 2026`` reads as two dates in 2026. Only this
    direction is inferred.
    """
    if extract_year(start_text) is not None:
        return start_text
    year = extract_year(end_text)
    if year is None:
        return start_text
    return f"{start_text}, {year}"


def _window(day: date, bounds: tuple[time, time], tz: tzinfo) -> tuple[datetime, datetime]:
    start, end = bounds
    return datetime.combine(day, start, tzinfo=tz), datetime.combine(day, end, tzinfo=tz)


def opens_event(title: str, day: date, tz: tzinfo) -> NormalizedEvent:
    """00:01-01:00 marker for the day a window opens."""
    start, end = _window(day, OPENS_WINDOW, tz)
    return NormalizedEvent(title=f"{OPENS_PREFIX}: {title}", start_time=start, end_time=end)


def closes_event(title: str, day: date, tz: tzinfo) -> NormalizedEvent:
    """23:00-23:59 marker for a deadline or the day a window closes."""
    start, end = _window(day, CLOSES_WINDOW, tz)
    return NormalizedEvent(title=f"{CLOSES_PREFIX}: {title}", start_time=start, end_time=end)


def normalize_row(title: str, date_text: str, tz: tzinfo) -> list[NormalizedEvent]:
    """Turn one table row into its calendar events.

    Args:
        title: Bold first-cell text
        date_text: Second-cell text
        tz: Zone all windows are placed in

    Returns:
        One event for a single date, two (opens, closes) for a range

    Raises:
        DateParseError: If any date in the cell cannot be parsed. A cell
            containing an en dash is never retried as a single date.
    """
    parts = split_range(date_text)
    if parts is not None:
        start_text, end_text = parts
        start_text = inherit_year(start_text, end_text)
        start_day = parse_date(start_text, title=title)
        end_day = parse_date(end_text, title=title)
        logger.debug(f"{title!r}: range {start_day.isoformat()} -> {end_day.isoformat()}")
        return [opens_event(title, start_day, tz), closes_event(title, end_day, tz)]

    day = parse_date(date_text, title=title)
    logger.debug(f"{title!r}: deadline {day.isoformat()}")
    return [closes_event(title, day, tz)]


def normalize(rows: Iterable[RawRow], tz: tzinfo) -> list[NormalizedEvent]:
    """Normalize every row, preserving document order."""
    events: list[NormalizedEvent] = []
    for row in rows:
        events.extend(normalize_row(row.title, row.date_text, tz))
    return events


def parse_timeline(
    markdown: str,
    tz: tzinfo,
    header_labels: Iterable[str] = DEFAULT_HEADER_LABELS,
) -> list[NormalizedEvent]:
    """Extract and normalize every milestone row in a markdown document.

    Example:
        >>> from datetime import timezone
        >>> md = "| **Mentorship Ends** | Friday, May 29, 2026 |"
        >>> [e.title for e in parse_timeline(md, timezone.utc)]
        ['Closes: Mentorship Ends']
    """
    events = normalize(iter_rows(markdown, header_labels), tz)
    logger.info(f"Normalized {len(events)} events")
    return events
