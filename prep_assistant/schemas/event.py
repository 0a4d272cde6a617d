"""
Event-related Pydantic schemas.

``ProviderEvent`` is the calendar-API shape served by the Events Provider.
``Event`` is the normalized, display-ready record the pages work with.
"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_TITLE = "(No title)"


class EventTime(BaseModel):
    """Start or end of a provider event; timed events carry ``dateTime``."""
    model_config = ConfigDict(populate_by_name=True)
    
    date_time: str | None = Field(None, alias="dateTime")
    date: str | None = None


class ProviderAttendee(BaseModel):
    """Attendee as served by the provider."""
    email: str
    name: str | None = None


class ProviderEvent(BaseModel):
    """Event as served by the Events Provider."""
    model_config = ConfigDict(populate_by_name=True)
    
    id: str
    summary: str
    description: str | None = None
    start: EventTime
    end: EventTime | None = None
    attendees: list[ProviderAttendee] = []
    html_link: str | None = Field(None, alias="htmlLink")


class UpcomingEventsResponse(BaseModel):
    """Events Provider success body."""
    events: list[ProviderEvent]


class Attendee(BaseModel):
    """Meeting participant."""
    model_config = ConfigDict(frozen=True)
    
    email: str
    name: str | None = None
    
    @property
    def display_name(self) -> str:
        return self.name or self.email


class Event(BaseModel):
    """Normalized meeting record."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
    
    id: str = Field(..., min_length=1)
    title: str = DEFAULT_TITLE
    description: str | None = None
    start_time: str
    end_time: str | None = None
    attendees: tuple[Attendee, ...] = ()
    link: str | None = None
