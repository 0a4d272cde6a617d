"""
Tests for display formatting.
"""
import pytest

from prep_assistant.services.formatting import format_date_range, format_instant


def test_format_instant_utc():
    """Test a UTC timestamp is formatted for display."""
    assert format_instant("2026-02-21T15:00:00Z", "UTC") == "Sat, Feb 21, 03:00 PM"


def test_format_instant_converts_timezone():
    """Test timestamps are shown in the display timezone."""
    assert format_instant("2026-02-21T15:00:00Z", "America/New_York") == "Sat, Feb 21, 10:00 AM"


def test_format_instant_naive_is_utc():
    """Test a timestamp without offset is taken as UTC."""
    assert format_instant("2026-02-22T17:30:00", "UTC") == "Sun, Feb 22, 05:30 PM"


def test_format_instant_unknown_timezone_falls_back_to_utc():
    """Test an unknown timezone name does not break formatting."""
    assert format_instant("2026-02-21T15:00:00Z", "Not/AZone") == "Sat, Feb 21, 03:00 PM"


def test_format_date_range():
    """Test a start/end pair is joined with a dash."""
    assert (
        format_date_range("2026-02-21T15:00:00Z", "2026-02-21T16:00:00Z", "UTC")
        == "Sat, Feb 21, 03:00 PM – Sat, Feb 21, 04:00 PM"
    )


def test_format_date_range_without_end():
    """Test a missing end shows the start only."""
    assert format_date_range("2026-02-21T15:00:00Z", None, "UTC") == "Sat, Feb 21, 03:00 PM"


def test_format_date_range_all_day():
    """Test a date-only value is accepted."""
    assert format_date_range("2026-02-21", tz_name="UTC") == "Sat, Feb 21, 12:00 AM"


@pytest.mark.parametrize("start", ["", None])
def test_format_date_range_missing_start(start):
    """Test a missing start gives an empty string."""
    assert format_date_range(start, "2026-02-21T16:00:00Z") == ""


@pytest.mark.parametrize(
    "start, end",
    [
        ("next tuesday", None),
        ("2026-13-45T99:00:00Z", None),
        ("2026-02-21T15:00:00Z", "later"),
    ],
)
def test_format_date_range_unparseable_returns_raw_start(start, end):
    """Test unparseable values degrade to the raw start string."""
    assert format_date_range(start, end, "UTC") == start
