"""
FastAPI dependencies for the provider clients.
"""
from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from prep_assistant.clients import (
    BriefGeneratorClient,
    EventSourceClient,
    create_http_client,
)
from prep_assistant.config import Settings, get_settings


async def get_http_client(
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """Yield an HTTP client pointed at the providers, closing it afterwards."""
    async with create_http_client(settings, app=request.app) as http:
        yield http


async def get_event_source_client(
    http=Depends(get_http_client),
) -> AsyncGenerator[EventSourceClient, None]:
    yield EventSourceClient(http)


async def get_brief_generator_client(
    http=Depends(get_http_client),
) -> AsyncGenerator[BriefGeneratorClient, None]:
    yield BriefGeneratorClient(http)
