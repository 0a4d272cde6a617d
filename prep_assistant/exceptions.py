"""
Application exceptions.

Every error raised by the provider clients and services derives from
``PrepAssistantError``. The API layer turns them into ``{"error": ...}``
responses; the pages catch them and show the message.
"""
from fastapi import status


class PrepAssistantError(Exception):
    """Base error carrying a human-readable message and an HTTP status."""
    
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
    
    def __str__(self) -> str:
        return self.message


class FetchError(PrepAssistantError):
    """Transport failure or non-success response from a provider."""
    
    status_code = status.HTTP_502_BAD_GATEWAY
    
    def __init__(self, message: str, upstream_status: int | None = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class ValidationError(PrepAssistantError):
    """A required request field is missing or invalid."""
    
    status_code = status.HTTP_400_BAD_REQUEST
