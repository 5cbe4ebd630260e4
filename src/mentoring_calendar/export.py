"""iCalendar export of normalized events.

Each event gets a fresh UID and is stamped with the export time. Events in
an IANA zone keep their TZID and the calendar carries the matching
VTIMEZONE blocks; fixed-offset times are written in UTC because a bare
offset has no TZID a calendar client could look up.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterable, Optional
from zoneinfo import ZoneInfo

from icalendar import Calendar, Event

from .config import CalendarConfig
from .logging_config import get_logger
from .models import NormalizedEvent

logger = get_logger(__name__)

UidFactory = Callable[[], str]


def _new_uid() -> str:
    return str(uuid.uuid4())


def _portable(dt: datetime) -> datetime:
    if isinstance(dt.tzinfo, ZoneInfo):
        return dt
    return dt.astimezone(timezone.utc)


def build_calendar(
    events: Iterable[NormalizedEvent],
    config: Optional[CalendarConfig] = None,
    now: Optional[datetime] = None,
    uid_factory: Optional[UidFactory] = None,
) -> Calendar:
    """Build a VCALENDAR holding one VEVENT per normalized event.

    Args:
        events: Normalized events, in the order they should be written
        config: Supplies PRODID, DESCRIPTION and calendar name
        now: Stamp for DTSTAMP/CREATED/LAST-MODIFIED (default: current UTC time)
        uid_factory: Callable returning a unique id per event (default: uuid4)

    Returns:
        icalendar.Calendar ready for ``to_ical()``
    """
    config = config or CalendarConfig()
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    uid_factory = uid_factory or _new_uid

    cal = Calendar()
    cal.add("prodid", config.prod_id)
    cal.add("version", "2.0")
    cal.add("method", "PUBLISH")
    if config.calendar_name:
        cal.add("x-wr-calname", config.calendar_name)

    count = 0
    for evt in events:
        event = Event()
        event.add("uid", uid_factory())
        event.add("dtstamp", now)
        event.add("created", now)
        event.add("last-modified", now)
        event.add("dtstart", _portable(evt.start_time))
        event.add("dtend", _portable(evt.end_time))
        event.add("summary", evt.title)
        event.add("description", config.description)
        cal.add_component(event)
        count += 1

    cal.add_missing_timezones()
    logger.debug(f"Built calendar with {count} events")
    return cal


def serialize_calendar(
    events: Iterable[NormalizedEvent],
    config: Optional[CalendarConfig] = None,
    now: Optional[datetime] = None,
    uid_factory: Optional[UidFactory] = None,
) -> str:
    """Serialize events to iCalendar text (CRLF line endings)."""
    cal = build_calendar(events, config=config, now=now, uid_factory=uid_factory)
    return cal.to_ical().decode("utf-8")


def write_calendar(
    path: Path,
    events: Iterable[NormalizedEvent],
    config: Optional[CalendarConfig] = None,
    now: Optional[datetime] = None,
    uid_factory: Optional[UidFactory] = None,
) -> Path:
    """Write events to an .ics file and return its path."""
    data = build_calendar(events, config=config, now=now, uid_factory=uid_factory).to_ical()
    path = Path(path)
    path.write_bytes(data)
    logger.info(f"Wrote {path} ({len(data)} bytes)")
    return path
