"""
Events Provider client.
"""
import logging
from typing import Any

from prep_assistant.clients.base import BaseProviderClient
from prep_assistant.schemas.event import DEFAULT_TITLE, Attendee, Event

logger = logging.getLogger(__name__)

UPCOMING_EVENTS_PATH = "/api/events/upcoming"


def _time_value(raw: dict[str, Any], nested_key: str, flat_key: str) -> str | None:
    nested = raw.get(nested_key)
    if isinstance(nested, dict):
        value = nested.get("dateTime") or nested.get("date")
        if value:
            return str(value)
    elif isinstance(nested, str) and nested:
        return nested
    value = raw.get(flat_key)
    return str(value) if value else None


def _normalize_attendees(raw: Any) -> tuple[Attendee, ...]:
    if not isinstance(raw, list):
        return ()
    
    attendees = []
    for entry in raw:
        if isinstance(entry, str) and entry:
            attendees.append(Attendee(email=entry))
        elif isinstance(entry, dict) and isinstance(entry.get("email"), str) and entry["email"]:
            name = entry.get("name") or entry.get("displayName")
            attendees.append(
                Attendee(email=entry["email"], name=name if isinstance(name, str) else None)
            )
        else:
            logger.debug("Skipping malformed attendee entry: %r", entry)
    return tuple(attendees)


def normalize_event(raw: Any) -> Event | None:
    """
    Turn one provider event into an ``Event``.
    
    Accepts the calendar-API shape (``summary``, ``start.dateTime``,
    ``htmlLink``) as well as the flat shape (``title``, ``startTime``,
    ``link``). Returns None when the entry has no usable id.
    """
    if not isinstance(raw, dict):
        return None
    
    event_id = raw.get("id") or raw.get("eventId")
    if not isinstance(event_id, str) or not event_id:
        return None
    
    description = raw.get("description")
    return Event(
        id=event_id,
        title=raw.get("summary") or raw.get("title") or DEFAULT_TITLE,
        description=description if isinstance(description, str) and description else None,
        start_time=_time_value(raw, "start", "startTime") or "",
        end_time=_time_value(raw, "end", "endTime"),
        attendees=_normalize_attendees(raw.get("attendees")),
        link=raw.get("htmlLink") or raw.get("link"),
    )


class EventSourceClient(BaseProviderClient):
    """Fetches upcoming events from the Events Provider."""
    
    provider = "Events provider"
    fallback_error = "Failed to load events"
    
    async def fetch_upcoming_events(self) -> list[Event]:
        """
        Fetch the upcoming events in provider order.
        
        Raises:
            FetchError: When the provider is unreachable or answers with an error
        """
        data = await self._request("GET", UPCOMING_EVENTS_PATH)
        raw_events = data.get("events") if isinstance(data, dict) else None
        if not isinstance(raw_events, list):
            return []
        
        events: list[Event] = []
        seen: set[str] = set()
        for raw in raw_events:
            event = normalize_event(raw)
            if event is None:
                logger.warning("Dropping event without an id: %r", raw)
                continue
            if event.id in seen:
                logger.warning("Dropping duplicate event %s", event.id)
                continue
            seen.add(event.id)
            events.append(event)
        
        return events
