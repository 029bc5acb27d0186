from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError

from meetnotes.dependencies import get_completion_service, get_settings
from meetnotes.schemas.common import ErrorResponse
from meetnotes.schemas.summarize import SummarizeRequest, SummarizeResponse
from meetnotes.services.summary.llm_utils import CompletionService
from meetnotes.services.summary.orchestrator import process_summary_request
from meetnotes.utils.config import Settings
from meetnotes.utils.errors import InputValidationError

router = APIRouter(
    prefix="/api",
    tags=["summarize"],
)


def _parse_request(payload: Dict[str, Any]) -> SummarizeRequest:
    try:
        return SummarizeRequest.model_validate(payload)
    except ValidationError as e:
        fields = {error["loc"][0] for error in e.errors() if error["loc"]}
        if fields == {"instruction"}:
            raise InputValidationError("instruction must be a string")
        raise InputValidationError("transcript is required")


@router.post(
    "/summarize",
    response_model=SummarizeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def handle_summarize(
    payload: Dict[str, Any] = Body(...),
    settings: Settings = Depends(get_settings),
    completion: CompletionService = Depends(get_completion_service),
):
    """Summarizes a meeting transcript with the configured model."""
    request = _parse_request(payload)
    summary = await process_summary_request(request, settings, completion)
    return SummarizeResponse(summary=summary)
