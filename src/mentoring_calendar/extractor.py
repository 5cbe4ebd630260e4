"""Markdown table row extraction.

Only rows shaped like ``| **Title** | Date text |`` are kept. Headings,
prose, separator rows and plain (non-bold) header rows fall through the
filter silently.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from .logging_config import get_logger
from .models import RawRow

logger = get_logger(__name__)

TABLE_ROW_RE = re.compile(r"^\|\s*\*\*(.+?)\*\*\s*\|\s*(.+?)\s*\|")

DEFAULT_HEADER_LABELS: tuple[str, ...] = ("Activity",)


def match_row(line: str) -> Optional[RawRow]:
    """Return the row captured from ``line``, or None if it is not a table row."""
    m = TABLE_ROW_RE.match(line)
    if m is None:
        return None
    return RawRow(title=m.group(1).strip(), date_text=m.group(2).strip())


def is_header(title: str, header_labels: Iterable[str] = DEFAULT_HEADER_LABELS) -> bool:
    """Case-insensitive match of ``title`` against known header labels."""
    folded = title.casefold()
    return any(folded == label.casefold() for label in header_labels)


def iter_rows(
    markdown: str,
    header_labels: Iterable[str] = DEFAULT_HEADER_LABELS,
) -> Iterator[RawRow]:
    """Yield table rows from ``markdown`` in document order.

    Args:
        markdown: Full markdown document
        header_labels: Titles treated as the table's own header row

    Yields:
        RawRow for every qualifying line
    """
    labels = tuple(header_labels)
    for lineno, line in enumerate(markdown.splitlines(), start=1):
        row = match_row(line)
        if row is None:
            continue
        if is_header(row.title, labels):
            logger.debug(f"Skipping header row at line {lineno}: {row.title!r}")
            continue
        yield row
