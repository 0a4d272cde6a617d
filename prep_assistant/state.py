"""
View state for the meetings and generate pages.

Each page holds an immutable state value. Actions describe what happened
(a request started, a response arrived, the user typed) and a pure reducer
maps ``(state, action)`` to the next state.

Generation requests are numbered by the reducer. Only the response to the
most recent request is applied; responses to superseded requests are
dropped, so the result shown always belongs to the last submission.
"""
from dataclasses import dataclass, replace

from prep_assistant.schemas.brief import Brief
from prep_assistant.schemas.event import Event
from prep_assistant.services.filtering import filter_events


# Meetings page

@dataclass(frozen=True)
class MeetingsState:
    """State of the meetings list page."""
    loading: bool = False
    error: str | None = None
    events: tuple[Event, ...] = ()
    query: str = ""

    @property
    def visible_events(self) -> list[Event]:
        return filter_events(self.events, self.query)

    @property
    def is_empty(self) -> bool:
        """Loaded without error but nothing matches the query."""
        return not self.loading and not self.error and not self.visible_events


@dataclass(frozen=True)
class EventsRequested:
    pass


@dataclass(frozen=True)
class EventsLoaded:
    events: tuple[Event, ...]


@dataclass(frozen=True)
class EventsFailed:
    message: str


@dataclass(frozen=True)
class QueryChanged:
    query: str


MeetingsAction = EventsRequested | EventsLoaded | EventsFailed | QueryChanged


def reduce_meetings(state: MeetingsState, action: MeetingsAction) -> MeetingsState:
    """Apply an action to the meetings page state."""
    if isinstance(action, EventsRequested):
        return replace(state, loading=True, error=None)
    if isinstance(action, EventsLoaded):
        return replace(state, loading=False, error=None, events=tuple(action.events))
    if isinstance(action, EventsFailed):
        return replace(state, loading=False, error=action.message, events=())
    if isinstance(action, QueryChanged):
        return replace(state, query=action.query or "")
    raise TypeError(f"Unknown meetings action: {action!r}")


# Generate page

@dataclass(frozen=True)
class GenerateState:
    """State of the brief generation page."""
    event_id: str | None = None
    profile_url: str = ""
    event: Event | None = None
    loading_event: bool = False
    event_error: str | None = None
    generating: bool = False
    error: str | None = None
    brief: Brief | None = None
    pending_request: int | None = None
    last_request: int = 0


@dataclass(frozen=True)
class EventLookupStarted:
    pass


@dataclass(frozen=True)
class EventLookupSucceeded:
    event: Event | None


@dataclass(frozen=True)
class EventLookupFailed:
    message: str


@dataclass(frozen=True)
class ProfileUrlChanged:
    profile_url: str


@dataclass(frozen=True)
class BriefRequested:
    pass


@dataclass(frozen=True)
class BriefReceived:
    request_id: int
    brief: Brief


@dataclass(frozen=True)
class BriefFailed:
    request_id: int
    message: str


GenerateAction = (
    EventLookupStarted
    | EventLookupSucceeded
    | EventLookupFailed
    | ProfileUrlChanged
    | BriefRequested
    | BriefReceived
    | BriefFailed
)


def reduce_generate(state: GenerateState, action: GenerateAction) -> GenerateState:
    """Apply an action to the generate page state."""
    if isinstance(action, EventLookupStarted):
        return replace(state, loading_event=True, event_error=None)
    if isinstance(action, EventLookupSucceeded):
        return replace(state, loading_event=False, event=action.event)
    if isinstance(action, EventLookupFailed):
        return replace(state, loading_event=False, event=None, event_error=action.message)
    if isinstance(action, ProfileUrlChanged):
        return replace(state, profile_url=action.profile_url or "")
    if isinstance(action, BriefRequested):
        if not state.event_id:
            return replace(state, error="Missing eventId")
        request_id = state.last_request + 1
        return replace(
            state,
            generating=True,
            error=None,
            brief=None,
            pending_request=request_id,
            last_request=request_id,
        )
    if isinstance(action, (BriefReceived, BriefFailed)):
        if action.request_id != state.pending_request:
            return state
        if isinstance(action, BriefReceived):
            return replace(state, generating=False, pending_request=None, brief=action.brief)
        return replace(state, generating=False, pending_request=None, error=action.message)
    raise TypeError(f"Unknown generate action: {action!r}")
