"""Date extraction from free-form milestone text.

Date cells are written for humans, e.g.::

    Tuesday, February 10, 2026, 11AM PST (19:00 UTC)

Parsing happens in two steps. First the first ``[Weekday, ]Month day, year``
span is cut out of the text; times, zone names and parentheticals around it
are dropped. The span is then tried against ``DATE_FORMATS`` in order, fullest
form first, and the first format that parses wins.

Zone annotations in the text are discarded. Every date is placed in the
timezone chosen by the caller, even when the cell says "PST".
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from .exceptions import DateParseError

# Fullest form first; a shorter format must not win on a prefix of a
# longer one.
DATE_FORMATS: tuple[str, ...] = (
    "%A, %B %d, %Y",  # Tuesday, February 10, 2026
    "%A, %b %d, %Y",  # Tuesday, Feb 10, 2026
    "%B %d, %Y",  # February 10, 2026
    "%b %d, %Y",  # Feb 10, 2026
)

WEEKDAYS = "Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday"
MONTHS = (
    "Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?"
    "|Aug(?:ust)?|Sep(?:tember)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?"
)

DATE_TEXT_RE = re.compile(
    rf"(?:\b(?:{WEEKDAYS}),\s+)?\b(?:{MONTHS})\s+\d{{1,2}},\s+\d{{4}}\b",
    re.IGNORECASE,
)
YEAR_RE = re.compile(r"\d{4}")


def find_date_text(raw: str) -> Optional[str]:
    """Return the first date-shaped span in ``raw``, or None."""
    m = DATE_TEXT_RE.search(raw)
    return m.group(0) if m else None


def extract_year(text: str) -> Optional[str]:
    """Return the first 4-digit run in ``text``, or None."""
    m = YEAR_RE.search(text)
    return m.group(0) if m else None


def parse_date(raw: str, title: Optional[str] = None) -> date:
    """Parse the calendar date embedded in ``raw``.

    Args:
        raw: Date cell text, noise included
        title: Row title, carried into the error for diagnosis

    Returns:
        The calendar date

    Raises:
        DateParseError: If no date-shaped span exists, or the span matches
            none of ``DATE_FORMATS``
    """
    clean = find_date_text(raw)
    if clean is None:
        raise DateParseError(raw, title=title, reason="no month/day/year found")

    # strptime treats each format space as \s+, so runs of blanks still match
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(clean, fmt).date()
        except ValueError:
            continue

    raise DateParseError(raw, title=title, reason=f"{clean!r} matches no accepted date format")
