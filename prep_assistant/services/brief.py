"""
Prep brief generation service.

This is a stand-in for a real generation backend: the company and candidate
sections are canned text and only the event id and profile URL vary.
"""
import logging
import re
from urllib.parse import urlsplit

from prep_assistant.config import get_settings
from prep_assistant.exceptions import ValidationError
from prep_assistant.schemas.brief import Brief

logger = logging.getLogger(__name__)

COMPANY_INFO = (
    "Acme Corp is a global leader in widget technology, founded in 2005 and "
    "now serving millions of customers worldwide."
)

CANDIDATE_SUMMARY = (
    "Sam Candidate has five years of experience in software engineering, "
    "specialising in cloud-native applications and microservices. Past roles "
    "include developing scalable APIs and mentoring junior developers."
)

SUBJECT_TEMPLATE = "Interview prep for event {event_id}"

EMAIL_TEMPLATE = """Hi Team,

Here is the prep brief for our upcoming interview:

• Event ID: {event_id}
• LinkedIn URL: {profile_url}

Company Info:
{company_info}

Candidate Summary:
{candidate_summary}

Let’s ensure we cover both technical depth and cultural fit during the conversation.

Best regards,
Interview Prep Bot"""

# C0 and C1 controls plus the Unicode line and paragraph separators.
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f\u2028\u2029]")


def sanitize_profile_url(value: str | None, strict: bool = False) -> str | None:
    """
    Clean a user-supplied profile URL before it is embedded in a brief.
    
    Args:
        value: Raw value from the request, possibly missing
        strict: Reject anything that is not an absolute http(s) URL
        
    Returns:
        The cleaned URL, or None when nothing usable is left
        
    Raises:
        ValidationError: In strict mode, when the value is not an http(s) URL
    """
    if value is None:
        return None
    
    cleaned = _CONTROL_CHARS.sub("", value).strip()
    if not cleaned:
        return None
    
    if strict:
        parts = urlsplit(cleaned)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValidationError("profileUrl must be an http(s) URL")
    
    return cleaned


class BriefService:
    """Composes prep briefs for events."""
    
    def __init__(
        self,
        placeholder: str | None = None,
        strict_profile_urls: bool | None = None,
    ):
        settings = get_settings()
        self.placeholder = (
            placeholder if placeholder is not None else settings.profile_url_placeholder
        )
        self.strict_profile_urls = (
            strict_profile_urls
            if strict_profile_urls is not None
            else settings.strict_profile_urls
        )
    
    def generate_brief(self, event_id: str | None, profile_url: str | None = None) -> Brief:
        """Generate a brief for an event."""
        if not event_id:
            raise ValidationError("eventId is required")
        
        url = sanitize_profile_url(profile_url, strict=self.strict_profile_urls)
        logger.info("Generating brief for event %s (profile url: %s)", event_id, bool(url))
        
        return Brief(
            subject=SUBJECT_TEMPLATE.format(event_id=event_id),
            company_info=COMPANY_INFO,
            candidate_summary=CANDIDATE_SUMMARY,
            email_body=EMAIL_TEMPLATE.format(
                event_id=event_id,
                profile_url=url or self.placeholder,
                company_info=COMPANY_INFO,
                candidate_summary=CANDIDATE_SUMMARY,
            ),
        )


def get_brief_service() -> BriefService:
    """Dependency returning a brief service configured from settings."""
    return BriefService()
