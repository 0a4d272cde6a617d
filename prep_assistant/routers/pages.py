"""
HTML pages: landing, meetings list and brief generation.

The pages reach the providers through the same clients any other consumer
would use, and build their view state with the reducers in
``prep_assistant.state``.
"""
import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from prep_assistant.clients import BriefGeneratorClient, EventSourceClient
from prep_assistant.config import get_settings
from prep_assistant.dependencies import (
    get_brief_generator_client,
    get_event_source_client,
)
from prep_assistant.exceptions import PrepAssistantError
from prep_assistant.services.formatting import format_date_range
from prep_assistant.state import (
    BriefFailed,
    BriefReceived,
    BriefRequested,
    EventLookupFailed,
    EventLookupStarted,
    EventLookupSucceeded,
    EventsFailed,
    EventsLoaded,
    EventsRequested,
    GenerateState,
    MeetingsState,
    ProfileUrlChanged,
    QueryChanged,
    reduce_generate,
    reduce_meetings,
)

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
MAX_ATTENDEE_PILLS = 3

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["date_range"] = format_date_range
templates.env.globals["max_attendee_pills"] = MAX_ATTENDEE_PILLS

router = APIRouter(include_in_schema=False)


def _render(request: Request, name: str, **context) -> HTMLResponse:
    context.setdefault("app_name", get_settings().app_name)
    return templates.TemplateResponse(request, name, context)


async def _load_event(state: GenerateState, client: EventSourceClient) -> GenerateState:
    """Look up the selected event in the fetched collection."""
    if not state.event_id:
        return state

    state = reduce_generate(state, EventLookupStarted())
    try:
        events = await client.fetch_upcoming_events()
    except PrepAssistantError as e:
        return reduce_generate(state, EventLookupFailed(e.message))

    found = next((ev for ev in events if ev.id == state.event_id), None)
    if found is None:
        logger.info("Event %s not found among upcoming events", state.event_id)
    return reduce_generate(state, EventLookupSucceeded(found))


@router.get("/", response_class=HTMLResponse)
async def home(request: Request) -> HTMLResponse:
    """Landing page."""
    return _render(request, "index.html")


@router.get("/meetings", response_class=HTMLResponse)
async def meetings(
    request: Request,
    q: str = Query(""),
    client: EventSourceClient = Depends(get_event_source_client),
) -> HTMLResponse:
    """Upcoming meetings, filtered by title or attendee."""
    state = reduce_meetings(MeetingsState(), QueryChanged(q))
    state = reduce_meetings(state, EventsRequested())

    try:
        events = await client.fetch_upcoming_events()
    except PrepAssistantError as e:
        state = reduce_meetings(state, EventsFailed(e.message))
    else:
        state = reduce_meetings(state, EventsLoaded(tuple(events)))

    return _render(request, "meetings.html", state=state)


@router.get("/generate", response_class=HTMLResponse)
async def generate_page(
    request: Request,
    event_id: str | None = Query(None, alias="eventId"),
    client: EventSourceClient = Depends(get_event_source_client),
) -> HTMLResponse:
    """Brief generation form for an event."""
    state = await _load_event(GenerateState(event_id=event_id or None), client)
    return _render(request, "generate.html", state=state)


@router.post("/generate", response_class=HTMLResponse)
async def generate_submit(
    request: Request,
    event_id: str = Form("", alias="eventId"),
    profile_url: str = Form("", alias="profileUrl"),
    events_client: EventSourceClient = Depends(get_event_source_client),
    brief_client: BriefGeneratorClient = Depends(get_brief_generator_client),
) -> HTMLResponse:
    """Submit a generation request and show the brief or the error."""
    state = GenerateState(event_id=event_id or None)
    state = reduce_generate(state, ProfileUrlChanged(profile_url))
    state = await _load_event(state, events_client)

    state = reduce_generate(state, BriefRequested())
    request_id = state.pending_request
    if request_id is not None:
        try:
            brief = await brief_client.request_brief(state.event_id, state.profile_url or None)
        except PrepAssistantError as e:
            state = reduce_generate(state, BriefFailed(request_id, e.message))
        else:
            state = reduce_generate(state, BriefReceived(request_id, brief))

    return _render(request, "generate.html", state=state)
