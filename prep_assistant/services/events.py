"""
Static upcoming-events catalogue backing the Events Provider.

Nothing here talks to a real calendar. Adjust the dates, descriptions and
attendees to suit your testing needs.
"""
import logging

from prep_assistant.schemas.event import (
    EventTime,
    ProviderAttendee,
    ProviderEvent,
)

logger = logging.getLogger(__name__)

CALENDAR_EVENT_URL = "https://calendar.google.com/event?eid={event_id}"

CANDIDATE = ProviderAttendee(email="candidate@example.com", name="Sam Candidate")

# Times are ISO 8601 strings in UTC.
UPCOMING_EVENTS: tuple[ProviderEvent, ...] = (
    ProviderEvent(
        id="evt-1",
        summary="Product Design Interview",
        description="Discuss product design process and past projects.",
        start=EventTime(date_time="2026-02-21T15:00:00Z"),
        end=EventTime(date_time="2026-02-21T16:00:00Z"),
        attendees=[
            ProviderAttendee(email="recruiter@acme.com", name="Alex Recruiter"),
            CANDIDATE,
        ],
        html_link=CALENDAR_EVENT_URL.format(event_id="evt-1"),
    ),
    ProviderEvent(
        id="evt-2",
        summary="Engineering Deep Dive",
        description="Technical discussion about system architecture and coding standards.",
        start=EventTime(date_time="2026-02-22T17:30:00Z"),
        end=EventTime(date_time="2026-02-22T18:30:00Z"),
        attendees=[
            ProviderAttendee(email="techlead@acme.com", name="Taylor Techlead"),
            CANDIDATE,
        ],
        html_link=CALENDAR_EVENT_URL.format(event_id="evt-2"),
    ),
    ProviderEvent(
        id="evt-3",
        summary="HR & Culture Fit Interview",
        description="Assess candidate alignment with company values and culture.",
        start=EventTime(date_time="2026-02-23T14:00:00Z"),
        end=EventTime(date_time="2026-02-23T14:45:00Z"),
        attendees=[
            ProviderAttendee(email="hr@acme.com", name="Harper HR"),
            CANDIDATE,
        ],
        html_link=CALENDAR_EVENT_URL.format(event_id="evt-3"),
    ),
)


class EventCatalogue:
    """Read-only source of upcoming events."""
    
    def __init__(self, events: tuple[ProviderEvent, ...] = UPCOMING_EVENTS):
        self._events = events
    
    def list_upcoming(self) -> list[ProviderEvent]:
        """Return the upcoming events in catalogue order."""
        logger.debug("Serving %d upcoming events", len(self._events))
        return list(self._events)


def get_event_catalogue() -> EventCatalogue:
    """Dependency returning the default catalogue."""
    return EventCatalogue()
