"""
Test fixtures and configuration.
"""
from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from prep_assistant.main import app
from prep_assistant.schemas.event import Attendee, Event

PROVIDER_BASE_URL = "http://provider.test"


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test client for the application."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    
    app.dependency_overrides.clear()


@pytest.fixture
def mock_provider() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Build an HTTP client whose requests are answered by a handler function."""
    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=httpx.MockTransport(handler),
            base_url=PROVIDER_BASE_URL,
        )
    
    return factory


@pytest.fixture
def sample_events() -> list[Event]:
    """A small normalized event list."""
    return [
        Event(
            id="evt-1",
            title="Product Design Interview",
            start_time="2026-02-21T15:00:00Z",
            end_time="2026-02-21T16:00:00Z",
            attendees=(
                Attendee(email="recruiter@acme.com", name="Alex Recruiter"),
                Attendee(email="candidate@example.com", name="Sam Candidate"),
            ),
        ),
        Event(
            id="evt-2",
            title="Engineering Deep Dive",
            start_time="2026-02-22T17:30:00Z",
            attendees=(Attendee(email="techlead@acme.com"),),
        ),
        Event(
            id="evt-3",
            title="HR & Culture Fit Interview",
            start_time="2026-02-23T14:00:00Z",
            attendees=(),
        ),
    ]
