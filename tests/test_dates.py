"""Tests for date extraction and parsing."""

from datetime import date

import pytest

from mentoring_calendar.dates import DATE_FORMATS, extract_year, find_date_text, parse_date
from mentoring_calendar.exceptions import DateParseError


class TestFindDateText:
    def test_strips_time_and_zone_noise(self):
        raw = "Tuesday, February 10, 2026, 11AM PST (19:00 UTC)"
        assert find_date_text(raw) == "Tuesday, February 10, 2026"

    def test_without_weekday(self):
        assert find_date_text("Deadline: March 3, 2026 at noon") == "March 3, 2026"

    def test_abbreviated_month(self):
        assert find_date_text("Fri, Feb 6, 2026") == "Feb 6, 2026"

    def test_first_match_wins(self):
        assert find_date_text("March 3, 2026 or April 4, 2026") == "March 3, 2026"

    def test_no_date(self):
        assert find_date_text("sometime next year") is None
        assert find_date_text("March 2026") is None


class TestExtractYear:
    def test_found(self):
        assert extract_year("January 20, 2026, 11AM") == "2026"

    def test_missing(self):
        assert extract_year("January 7") is None


class TestParseDate:
    def test_noise_stripping(self):
        raw = "Tuesday, February 10, 2026, 11AM PST (19:00 UTC)"
        assert parse_date(raw) == date(2026, 2, 10)

    @pytest.mark.parametrize(
        "raw",
        [
            "Tuesday, February 10, 2026",
            "Tuesday, Feb 10, 2026",
            "February 10, 2026",
            "Feb 10, 2026",
            "february 10,  2026",
        ],
    )
    def test_accepted_forms(self, raw):
        assert parse_date(raw) == date(2026, 2, 10)

    def test_no_date_shape(self):
        with pytest.raises(DateParseError) as exc_info:
            parse_date("sometime next year", title="Kickoff")
        assert exc_info.value.text == "sometime next year"
        assert exc_info.value.title == "Kickoff"
        assert "sometime next year" in str(exc_info.value)

    def test_shape_but_no_format(self):
        with pytest.raises(DateParseError) as exc_info:
            parse_date("February 30, 2026")
        assert "matches no accepted date format" in exc_info.value.reason

    def test_formats_fullest_first(self):
        assert DATE_FORMATS[0] == "%A, %B %d, %Y"
        assert DATE_FORMATS[-1] == "%b %d, %Y"
        assert isinstance(DATE_FORMATS, tuple)
