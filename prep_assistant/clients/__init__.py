"""
Provider clients package.
"""
from prep_assistant.clients.base import BaseProviderClient, create_http_client
from prep_assistant.clients.events import EventSourceClient, normalize_event
from prep_assistant.clients.briefs import BriefGeneratorClient

__all__ = [
    "BaseProviderClient",
    "create_http_client",
    "EventSourceClient",
    "normalize_event",
    "BriefGeneratorClient",
]
