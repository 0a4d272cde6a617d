"""
Tests for event filtering.
"""
from types import SimpleNamespace

import pytest

from prep_assistant.schemas.event import Attendee, Event
from prep_assistant.services.filtering import attendee_text, filter_events

QUERIES = [
    "",
    "interview",
    "INTERVIEW",
    "design",
    "alex",
    "acme.com",
    "techlead@",
    "sam candidate",
    "hr & culture",
    " ",
    "nothing-matches",
    "interview alex",
]


def _contains(event: Event, query: str) -> bool:
    needle = query.lower()
    if needle in event.title.lower():
        return True
    return any(
        needle in (a.name or "").lower() or needle in a.email.lower()
        for a in event.attendees
    )


def test_empty_query_returns_everything(sample_events):
    """Test the empty query is the identity."""
    assert filter_events(sample_events, "") == sample_events
    assert filter_events(sample_events, None) == sample_events


@pytest.mark.parametrize("query", QUERIES)
def test_result_is_ordered_subsequence(sample_events, query):
    """Test filtering never reorders or invents events."""
    result = filter_events(sample_events, query)
    
    positions = [sample_events.index(ev) for ev in result]
    assert positions == sorted(positions)


@pytest.mark.parametrize("query", QUERIES)
def test_retained_iff_title_or_attendee_contains_query(sample_events, query):
    """Test exactly the events containing the query are kept."""
    result = filter_events(sample_events, query)
    
    for event in sample_events:
        assert (event in result) == _contains(event, query)


def test_case_insensitive(sample_events):
    """Test matching ignores case on both sides."""
    assert [ev.id for ev in filter_events(sample_events, "eNgInEeRiNg")] == ["evt-2"]


def test_matches_attendee_name_and_email(sample_events):
    """Test attendees match by name or by email."""
    assert [ev.id for ev in filter_events(sample_events, "Alex Recruiter")] == ["evt-1"]
    assert [ev.id for ev in filter_events(sample_events, "recruiter@acme")] == ["evt-1"]
    assert [ev.id for ev in filter_events(sample_events, "@acme.com")] == ["evt-1", "evt-2"]


def test_query_does_not_span_fields(sample_events):
    """Test a query straddling the title and an attendee does not match."""
    assert filter_events(sample_events, "interview alex") == []


def test_no_match(sample_events):
    """Test an unmatched query gives an empty list."""
    assert filter_events(sample_events, "zzz") == []


def test_accepts_any_iterable(sample_events):
    """Test generators and tuples are filtered the same way."""
    assert filter_events(tuple(sample_events), "deep") == [sample_events[1]]
    assert filter_events((ev for ev in sample_events), "deep") == [sample_events[1]]


def test_attendee_text_handles_every_shape():
    """Test malformed attendee entries contribute nothing."""
    assert attendee_text(Attendee(email="a@b.c", name="Ann")) == ["Ann", "a@b.c"]
    assert attendee_text(Attendee(email="a@b.c")) == ["a@b.c"]
    assert attendee_text({"email": "a@b.c", "name": None}) == ["a@b.c"]
    assert attendee_text({"name": 42}) == []
    assert attendee_text("a@b.c") == ["a@b.c"]
    assert attendee_text(42) == []
    assert attendee_text(None) == []
    assert attendee_text(["a@b.c"]) == []


def test_malformed_attendees_do_not_break_filtering():
    """Test events carrying unvalidated attendee entries still filter."""
    event = SimpleNamespace(
        title="Sync",
        attendees=(None, 7, {"email": "ops@acme.com"}, "lead@acme.com"),
    )
    
    assert filter_events([event], "ops@") == [event]
    assert filter_events([event], "lead@") == [event]
    assert filter_events([event], "7") == []
