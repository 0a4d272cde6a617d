"""
Events Provider router.
"""
from fastapi import APIRouter, Depends

from prep_assistant.schemas.event import UpcomingEventsResponse
from prep_assistant.services.events import EventCatalogue, get_event_catalogue

router = APIRouter(prefix="/events", tags=["Events"])


@router.get(
    "/upcoming",
    response_model=UpcomingEventsResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
async def list_upcoming_events(
    catalogue: EventCatalogue = Depends(get_event_catalogue),
) -> UpcomingEventsResponse:
    """List upcoming calendar events."""
    return UpcomingEventsResponse(events=catalogue.list_upcoming())
