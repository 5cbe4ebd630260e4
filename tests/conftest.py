"""Shared test fixtures for mentoring-calendar."""

import sys
from datetime import timedelta, timezone
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


TIMELINE_MD = """\
### Timeline

| Activity | Date |
|---|---|
| **Mentee Applications Open** | Monday, January 26 – Tuesday, February 10, 2026, 11AM PST (19:00 UTC) |
| **Application Review** | February 11 – February 24, 2026 |
| **Mentee Selection Announced** | Wednesday, February 25, 2026 |
| **Mentorship Ends** | Friday, May 29, 2026, 5PM PDT |

Schedules may change.
"""


@pytest.fixture
def timeline_md():
    """Milestone table with prose, a heading, a header row and four rows."""
    return TIMELINE_MD


@pytest.fixture
def ist():
    """Fixed UTC+5:30 offset."""
    return timezone(timedelta(hours=5, minutes=30))


@pytest.fixture
def utc():
    return timezone.utc


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Keep config discovery away from the real home/cwd/environment."""
    import os

    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("MENTORING_CALENDAR_"):
            monkeypatch.delenv(key)
    return work
