"""
Pydantic schemas package.
"""
from prep_assistant.schemas.event import (
    Attendee,
    Event,
    EventTime,
    ProviderAttendee,
    ProviderEvent,
    UpcomingEventsResponse,
)
from prep_assistant.schemas.brief import (
    Brief,
    ErrorResponse,
    GenerateBriefRequest,
)

__all__ = [
    "Attendee",
    "Event",
    "EventTime",
    "ProviderAttendee",
    "ProviderEvent",
    "UpcomingEventsResponse",
    "Brief",
    "ErrorResponse",
    "GenerateBriefRequest",
]
