"""Support assistant endpoint."""

import logging

from fastapi import APIRouter

from .....core.domain import LANGUAGE_CONFIG, detect_user_language
from ..deps import check_query_length, get_template_selector
from ..models import ErrorResponse, SupportRequest, SupportResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/support", tags=["support"])


@router.post(
    "/respond",
    response_model=SupportResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Query too long"},
        503: {"model": ErrorResponse, "description": "Corpus unavailable"},
    },
)
async def respond(request: SupportRequest) -> SupportResponse:
    """Select the response template for a user's question."""
    check_query_length(request.query)
    selector = get_template_selector()
    language = detect_user_language(request.language)
    notice = None
    if request.language and language != request.language:
        notice = LANGUAGE_CONFIG.fallback_behavior

    match = selector.match_template(request.query, request.role, request.context)
    if match is not None:
        template = match.document
        return SupportResponse(
            template_id=template.id,
            category=template.category,
            response=template.content,
            matched=True,
            language=language,
            notice=notice,
        )

    template = selector.select_template(request.query, request.role, request.context)
    logger.info("No template matched for role %s; using fallback", request.role)
    return SupportResponse(
        template_id=template.id if template else None,
        category=template.category if template else None,
        response=selector.get_template_response(request.query, request.role, request.context),
        matched=False,
        language=language,
        notice=notice,
    )
