import logging

from meetnotes.schemas.email import EmailEnvelope, SendEmailRequest
from meetnotes.services.email.render import render_markdown
from meetnotes.services.email.smtp_utils import MailRelay
from meetnotes.utils.config import Settings
from meetnotes.utils.errors import ConfigError


def compose_envelope(request: SendEmailRequest, settings: Settings) -> EmailEnvelope:
    """Renders the markdown body and fills in sender and subject defaults."""
    html = render_markdown(request.body)
    text = request.body if settings.email_body_mode == "multipart" else None

    return EmailEnvelope(
        sender=settings.sender_address,
        recipients=list(request.recipients),
        subject=request.subject or settings.default_subject,
        html=html,
        text=text,
    )


async def process_email_request(
    request: SendEmailRequest,
    settings: Settings,
    relay: MailRelay,
) -> None:
    """
    Sends a summary to its recipients with a single relay attempt.

    Raises:
        ConfigError: If relay credentials are not configured.
        UpstreamError: If the relay fails to accept the message.
    """
    if not settings.gmail_user or not settings.gmail_pass:
        logging.error("Email requested but relay credentials are not configured.")
        raise ConfigError("GMAIL_USER/GMAIL_PASS not set")

    envelope = compose_envelope(request, settings)
    await relay.send(envelope)
    logging.info(f"Email sent to {len(envelope.recipients)} recipient(s)")
