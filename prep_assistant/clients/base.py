"""
Base provider client.
"""
import logging
from typing import Any

import httpx

from prep_assistant.config import Settings, get_settings
from prep_assistant.exceptions import FetchError

logger = logging.getLogger(__name__)

# Base URL used when the providers are served by this same application.
IN_PROCESS_BASE_URL = "http://prep-assistant.internal"


def create_http_client(
    settings: Settings | None = None,
    app: Any = None,
) -> httpx.AsyncClient:
    """
    Build the HTTP client the provider clients share.
    
    Args:
        settings: Application settings; defaults to the cached instance
        app: ASGI app to call in-process when no provider base URL is set
        
    Returns:
        An unopened httpx.AsyncClient; the caller owns closing it
    """
    settings = settings or get_settings()
    timeout = httpx.Timeout(settings.provider_timeout_seconds)
    
    if settings.provider_base_url:
        return httpx.AsyncClient(base_url=settings.provider_base_url, timeout=timeout)
    
    if app is None:
        raise ValueError("provider_base_url is not set and no app was given")
    
    return httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url=IN_PROCESS_BASE_URL,
        timeout=timeout,
    )


class BaseProviderClient:
    """Shared request and error handling for provider clients."""
    
    provider: str = ""
    fallback_error: str = "Request failed"
    
    def __init__(self, http: httpx.AsyncClient):
        self.http = http
    
    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """
        Send a request and return the decoded JSON body.
        
        Args:
            method: HTTP method
            path: Path relative to the client's base URL
            **kwargs: Passed through to httpx
            
        Returns:
            Decoded JSON body of a 2xx response
            
        Raises:
            FetchError: On transport failure, non-2xx status or a body that
                is not JSON
        """
        try:
            response = await self.http.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            logger.warning("%s timed out: %s", self.provider, e)
            raise FetchError(f"{self.provider} did not respond in time") from e
        except httpx.HTTPError as e:
            logger.warning("%s request failed: %s", self.provider, e)
            raise FetchError(f"{self.fallback_error}: {e}" if str(e) else self.fallback_error) from e
        
        try:
            data = response.json()
        except ValueError:
            data = None
        
        if not response.is_success:
            message = self.fallback_error
            if isinstance(data, dict) and isinstance(data.get("error"), str) and data["error"]:
                message = data["error"]
            logger.warning(
                "%s returned %s: %s", self.provider, response.status_code, message
            )
            raise FetchError(message, upstream_status=response.status_code)
        
        if data is None:
            logger.warning("%s returned a body that is not JSON", self.provider)
            raise FetchError(self.fallback_error, upstream_status=response.status_code)
        
        return data
