"""Tests for the exception hierarchy."""

from pathlib import Path

from mentoring_calendar.exceptions import (
    ConfigurationError,
    DateParseError,
    FileAccessError,
    InvalidConfigError,
    InvalidTimezoneError,
    MentoringCalendarError,
    TimelineError,
)


class TestHierarchy:
    def test_timeline_errors(self):
        assert issubclass(DateParseError, TimelineError)
        assert issubclass(FileAccessError, TimelineError)
        assert issubclass(TimelineError, MentoringCalendarError)

    def test_config_errors(self):
        assert issubclass(InvalidConfigError, ConfigurationError)
        assert issubclass(InvalidTimezoneError, ConfigurationError)
        assert issubclass(ConfigurationError, MentoringCalendarError)


class TestDateParseError:
    def test_names_text_and_title(self):
        e = DateParseError("sometime next year", title="Kickoff")
        message = str(e)
        assert "'sometime next year'" in message
        assert "title=Kickoff" in message

    def test_without_title(self):
        e = DateParseError("soon")
        assert e.title is None
        assert "title" not in e.details


class TestOtherErrors:
    def test_file_access(self):
        e = FileAccessError(Path("events.md"), "file not found")
        assert str(e) == "Cannot access file: events.md (filepath=events.md, reason=file not found)"

    def test_invalid_config(self):
        e = InvalidConfigError("timezone", "", "empty")
        assert e.details == {"key": "timezone", "value": "", "reason": "empty"}

    def test_base_without_details(self):
        assert str(MentoringCalendarError("boom")) == "boom"
