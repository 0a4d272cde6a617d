"""
Brief Provider client.
"""
import logging

from prep_assistant.clients.base import BaseProviderClient
from prep_assistant.exceptions import FetchError, ValidationError
from prep_assistant.schemas.brief import Brief

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate"


class BriefGeneratorClient(BaseProviderClient):
    """Requests prep briefs from the Brief Provider."""
    
    provider = "Brief provider"
    fallback_error = "Failed to generate"
    
    async def request_brief(self, event_id: str | None, profile_url: str | None = None) -> Brief:
        """
        Request a prep brief for an event.
        
        Args:
            event_id: Event to brief; required
            profile_url: Candidate profile URL, passed through as given
            
        Returns:
            The generated Brief
            
        Raises:
            ValidationError: When event_id is empty, before any request is sent
            FetchError: When the provider is unreachable or answers with an error
        """
        if not event_id:
            raise ValidationError("Missing eventId")
        
        payload = {"eventId": event_id}
        if profile_url:
            payload["profileUrl"] = profile_url
        
        logger.info("Requesting brief for event %s", event_id)
        data = await self._request("POST", GENERATE_PATH, json=payload)
        
        try:
            return Brief.model_validate(data)
        except ValueError as e:
            logger.warning("Brief provider returned an unexpected body: %s", e)
            raise FetchError(self.fallback_error) from e
