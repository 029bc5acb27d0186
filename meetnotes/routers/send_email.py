from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError

from meetnotes.dependencies import get_mail_relay, get_settings
from meetnotes.schemas.common import ErrorResponse
from meetnotes.schemas.email import SendEmailRequest, SendEmailResponse
from meetnotes.services.email.orchestrator import process_email_request
from meetnotes.services.email.smtp_utils import MailRelay
from meetnotes.utils.config import Settings
from meetnotes.utils.errors import InputValidationError

router = APIRouter(
    prefix="/api",
    tags=["email"],
)


@router.post(
    "/send-email",
    response_model=SendEmailResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def handle_send_email(
    payload: Dict[str, Any] = Body(...),
    settings: Settings = Depends(get_settings),
    relay: MailRelay = Depends(get_mail_relay),
):
    """Renders a markdown summary and emails it to the given recipients."""
    try:
        request = SendEmailRequest.model_validate(payload)
    except ValidationError as e:
        fields = {error["loc"][0] for error in e.errors() if error["loc"]}
        if fields == {"subject"}:
            raise InputValidationError("subject must be a single line of text")
        raise InputValidationError("Recipients and body are required")

    await process_email_request(request, settings, relay)
    return SendEmailResponse()
