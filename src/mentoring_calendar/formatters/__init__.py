"""Output formatters for mentoring-calendar."""

from .base import BaseFormatter
from .ics_formatter import IcsFormatter
from .json_formatter import JsonFormatter
from .rich_formatter import RichFormatter


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "ics", "json", "rich"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "ics": IcsFormatter,
        "json": JsonFormatter,
        "rich": RichFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "IcsFormatter",
    "JsonFormatter",
    "RichFormatter",
    "get_formatter",
]
