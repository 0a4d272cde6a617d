"""
Free-text event filtering.
"""
from collections.abc import Iterable, Sequence
from typing import Any

from prep_assistant.schemas.event import Attendee, Event


def attendee_text(attendee: Any) -> list[str]:
    """
    Searchable strings for one attendee entry.
    
    Accepts normalized attendees, raw provider dicts and plain email strings.
    Anything else contributes nothing.
    """
    if isinstance(attendee, Attendee):
        return [s for s in (attendee.name, attendee.email) if s]
    if isinstance(attendee, dict):
        return [
            s for s in (attendee.get("name"), attendee.get("email"))
            if isinstance(s, str) and s
        ]
    if isinstance(attendee, str):
        return [attendee]
    return []


def searchable_fields(event: Event) -> list[str]:
    """Title followed by every attendee name and email, lower-cased."""
    fields = [event.title or ""]
    for attendee in event.attendees:
        fields.extend(attendee_text(attendee))
    return [f.lower() for f in fields]


def matches(event: Event, query: str) -> bool:
    """Whether the event's title or one of its attendees contains the query."""
    if not query:
        return True
    needle = query.lower()
    return any(needle in field for field in searchable_fields(event))


def filter_events(events: Sequence[Event] | Iterable[Event], query: str | None) -> list[Event]:
    """
    Keep the events matching a free-text query, in their original order.
    
    Matching is a plain case-insensitive substring test; an empty query
    keeps everything.
    """
    query = query or ""
    return [event for event in events if matches(event, query)]
