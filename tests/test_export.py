"""Tests for iCalendar export."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest
from icalendar import Calendar

from mentoring_calendar.config import CalendarConfig
from mentoring_calendar.export import build_calendar, serialize_calendar, write_calendar
from mentoring_calendar.normalizer import parse_timeline

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def _uids(*values):
    it = iter(values)
    return lambda: next(it)


@pytest.fixture
def events(ist):
    md = (
        "| **Applications** | January 26 – February 10, 2026 |\n"
        "| **Mentorship Ends** | Friday, May 29, 2026 |\n"
    )
    return parse_timeline(md, ist)


class TestBuildCalendar:
    def test_calendar_properties(self, events):
        cal = build_calendar(events, CalendarConfig(calendar_name="LFX"), now=NOW)
        assert str(cal["prodid"]) == "-//LFX Mentorship//Timeline//EN"
        assert str(cal["version"]) == "2.0"
        assert str(cal["method"]) == "PUBLISH"
        assert str(cal["x-wr-calname"]) == "LFX"

    def test_one_vevent_per_event(self, events):
        cal = build_calendar(events, now=NOW, uid_factory=_uids("u1", "u2", "u3"))
        vevents = cal.walk("VEVENT")
        assert [str(v["summary"]) for v in vevents] == [
            "Opens: Applications",
            "Closes: Applications",
            "Closes: Mentorship Ends",
        ]
        assert [str(v["uid"]) for v in vevents] == ["u1", "u2", "u3"]
        assert all(str(v["description"]) == "Generated from LFX Timeline" for v in vevents)

    def test_times_round_trip(self, events):
        text = serialize_calendar(events, now=NOW)
        parsed = Calendar.from_ical(text)
        for vevent, event in zip(parsed.walk("VEVENT"), events):
            assert vevent.decoded("dtstart") == event.start_time
            assert vevent.decoded("dtend") == event.end_time
            assert vevent.decoded("dtstamp") == NOW

    def test_default_uids_unique(self, events):
        cal = build_calendar(events, now=NOW)
        uids = [str(v["uid"]) for v in cal.walk("VEVENT")]
        assert len(set(uids)) == len(uids)


class TestSerialize:
    def test_fixed_offset_written_in_utc(self, events):
        text = serialize_calendar(events, now=NOW)
        # 2026-01-26 00:01 at +05:30 is 2026-01-25 18:31 UTC
        assert "DTSTART:20260125T183100Z" in text
        assert "DTSTAMP:20260101T120000Z" in text

    def test_named_zone_keeps_tzid(self):
        tz = ZoneInfo("Asia/Kolkata")
        events = parse_timeline("| **Ends** | May 29, 2026 |", tz)
        text = serialize_calendar(events, now=NOW)
        assert "TZID=Asia/Kolkata" in text
        assert "BEGIN:VTIMEZONE" in text

    def test_crlf_lines(self, events):
        text = serialize_calendar(events, now=NOW)
        assert text.startswith("BEGIN:VCALENDAR\r\n")
        assert text.rstrip().endswith("END:VCALENDAR")

    def test_empty(self):
        text = serialize_calendar([], now=NOW)
        assert "BEGIN:VEVENT" not in text


class TestWriteCalendar:
    def test_writes_file(self, tmp_path, events):
        path = write_calendar(tmp_path / "timeline.ics", events, now=NOW)
        assert path.read_bytes().startswith(b"BEGIN:VCALENDAR")
        assert len(Calendar.from_ical(path.read_bytes()).walk("VEVENT")) == 3
