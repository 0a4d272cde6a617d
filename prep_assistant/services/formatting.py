"""
Display formatting helpers.
"""
from datetime import timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import parser as dtparse

from prep_assistant.config import get_settings

RANGE_SEPARATOR = " – "


def _display_zone(tz_name: str | None) -> ZoneInfo | timezone:
    name = tz_name or get_settings().display_timezone
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


def format_instant(value: str, tz_name: str | None = None) -> str:
    """
    Format an ISO 8601 timestamp like ``Sat, Feb 21, 03:00 PM``.
    
    Naive values are taken as UTC. Raises ValueError when the value does not
    parse.
    """
    dt = dtparse.isoparse(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(_display_zone(tz_name))
    return f"{dt:%a, %b} {dt.day}, {dt:%I:%M %p}"


def format_date_range(start: str | None, end: str | None = None, tz_name: str | None = None) -> str:
    """
    Format a start/end pair for display.
    
    A missing start gives an empty string. If either value fails to parse the
    raw start string is returned unchanged.
    """
    if not start:
        return ""
    try:
        start_str = format_instant(start, tz_name)
        end_str = format_instant(end, tz_name) if end else ""
    except (ValueError, OverflowError):
        return start
    return f"{start_str}{RANGE_SEPARATOR}{end_str}" if end_str else start_str

