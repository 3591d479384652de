"""REST API endpoint for writing suggestions."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from .schemas import ErrorResponse, SuggestionRequest
from .service import SuggestionError, SuggestionService

logger = logging.getLogger(__name__)

router = APIRouter()

GENERIC_ERROR = "Error processing request"


def get_suggestion_service(request: Request) -> SuggestionService:
    """Dependency to access the shared suggestion service."""
    service = getattr(request.app.state, "suggestion_service", None)
    if service is None:  # pragma: no cover - app factory always sets it
        raise RuntimeError("Suggestion service is not configured")
    return service


@router.post(
    "/suggestions",
    response_model=list[str],
    responses={
        422: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def create_suggestions(
    payload: SuggestionRequest | None = None,
    service: SuggestionService = Depends(get_suggestion_service),
):
    """Return improvement suggestions for the submitted text."""
    content = payload.content if payload is not None else None
    if service.settings.require_content and not isinstance(content, str):
        return JSONResponse(
            status_code=422,
            content={"error": "Field 'content' must be a string"},
        )

    try:
        return await service.asuggest(content)
    except SuggestionError:
        logger.exception("Gemini API error while generating suggestions")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": GENERIC_ERROR},
        )


__all__ = ["router", "get_suggestion_service"]
