"""Tests for the convert and preview commands."""

import importlib
import json

import pytest
from typer.testing import CliRunner

from mentoring_calendar import __version__
from mentoring_calendar.cli import app

runner = CliRunner()


@pytest.fixture
def events_md(isolated_config, timeline_md):
    path = isolated_config / "events.md"
    path.write_text(timeline_md, encoding="utf-8")
    return path


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestConvert:
    def test_ics_to_stdout(self, events_md):
        result = runner.invoke(app, ["convert", str(events_md), "--timezone", "UTC"])
        assert result.exit_code == 0
        assert "BEGIN:VCALENDAR" in result.stdout
        assert result.stdout.count("BEGIN:VEVENT") == 6

    def test_default_input_path(self, events_md):
        result = runner.invoke(app, ["convert", "-z", "UTC"])
        assert result.exit_code == 0
        assert "SUMMARY:Closes: Mentorship Ends" in result.stdout

    def test_json(self, events_md):
        result = runner.invoke(app, ["convert", str(events_md), "-z", "UTC+5:30", "-f", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["events"][0] == {
            "title": "Opens: Mentee Applications Open",
            "start_time": "2026-01-26T00:01:00+05:30",
            "end_time": "2026-01-26T01:00:00+05:30",
        }

    def test_output_file(self, events_md, tmp_path):
        out = tmp_path / "timeline.ics"
        result = runner.invoke(
            app, ["convert", str(events_md), "-z", "UTC", "-o", str(out), "--calendar-name", "LFX"]
        )
        assert result.exit_code == 0
        text = out.read_text(encoding="utf-8")
        assert text.startswith("BEGIN:VCALENDAR")
        assert "X-WR-CALNAME:LFX" in text

    def test_parse_error_exits_1(self, isolated_config):
        path = isolated_config / "events.md"
        path.write_text("| **Kickoff** | sometime next year |\n", encoding="utf-8")
        result = runner.invoke(app, ["convert", str(path), "-z", "UTC"])
        assert result.exit_code == 1
        assert "Unable to find valid date" in result.output
        assert "BEGIN:VCALENDAR" not in result.output
        assert result.output.count("Unable to find valid date") == 1

    def test_missing_file(self, isolated_config):
        result = runner.invoke(app, ["convert", "missing.md"])
        assert result.exit_code == 1
        assert "Cannot access file" in result.output

    def test_strict_timezone(self, events_md):
        result = runner.invoke(app, ["convert", str(events_md), "-z", "Mars/Base", "--strict-timezone"])
        assert result.exit_code == 1
        assert "Unknown timezone" in result.output

    def test_zone_directory_falls_back_to_utc(self, events_md):
        result = runner.invoke(app, ["convert", str(events_md), "-z", "America", "-f", "json"])
        assert result.exit_code == 0
        assert "2026-01-26T00:01:00+00:00" in result.stdout

    def test_bad_format(self, events_md):
        result = runner.invoke(app, ["convert", str(events_md), "-f", "xml"])
        assert result.exit_code == 1

    def test_verbose_and_quiet(self, events_md):
        result = runner.invoke(app, ["convert", str(events_md), "-v", "-q"])
        assert result.exit_code == 1


class TestPreview:
    def test_table(self, events_md):
        result = runner.invoke(app, ["preview", str(events_md), "-z", "UTC"])
        assert result.exit_code == 0
        assert "Mentorship Ends" in result.output
        assert "BEGIN:VCALENDAR" not in result.output

    def test_strict_timezone(self, events_md):
        result = runner.invoke(app, ["preview", str(events_md), "-z", "America", "--strict-timezone"])
        assert result.exit_code == 1
        assert "Unknown timezone" in result.output

    def test_verbose_and_quiet(self, events_md):
        result = runner.invoke(app, ["preview", str(events_md), "-v", "-q"])
        assert result.exit_code == 1

    def test_interrupted(self, events_md, monkeypatch):
        preview_module = importlib.import_module("mentoring_calendar.cli.preview")

        def interrupt(*args, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr(preview_module, "build_events", interrupt)
        result = runner.invoke(app, ["preview", str(events_md), "-z", "UTC"])
        assert result.exit_code == 130
