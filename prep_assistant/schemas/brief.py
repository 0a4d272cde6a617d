"""
Brief-related Pydantic schemas.
"""
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Brief(BaseModel):
    """Generated interview prep brief."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
    
    subject: str
    company_info: str
    candidate_summary: str
    email_body: str


class GenerateBriefRequest(BaseModel):
    """Request to generate a brief for an event."""
    model_config = ConfigDict(populate_by_name=True)
    
    event_id: str | None = Field(None, alias="eventId")
    # ``linkedinUrl`` is what older front ends send.
    profile_url: str | None = Field(
        None,
        validation_alias=AliasChoices("profileUrl", "linkedinUrl", "profile_url"),
    )


class ErrorResponse(BaseModel):
    """Error body returned by the JSON API."""
    error: str
