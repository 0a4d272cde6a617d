"""
Brief Provider router.
"""
from fastapi import APIRouter, Body, Depends

from prep_assistant.schemas.brief import Brief, ErrorResponse, GenerateBriefRequest
from prep_assistant.services.brief import BriefService, get_brief_service

router = APIRouter(tags=["Briefs"])


@router.post(
    "/generate",
    response_model=Brief,
    response_model_by_alias=True,
    responses={400: {"model": ErrorResponse}},
)
async def generate_brief(
    payload: GenerateBriefRequest | None = Body(None),
    service: BriefService = Depends(get_brief_service),
) -> Brief:
    """Generate an interview prep brief for an event."""
    payload = payload or GenerateBriefRequest()
    return service.generate_brief(payload.event_id, payload.profile_url)
