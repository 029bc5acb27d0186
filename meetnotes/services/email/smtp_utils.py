import asyncio
import logging
import smtplib
import ssl
from email.message import EmailMessage
from typing import Protocol

from meetnotes.schemas.email import EmailEnvelope
from meetnotes.utils.config import Settings
from meetnotes.utils.errors import UpstreamError


class MailRelay(Protocol):
    async def send(self, envelope: EmailEnvelope) -> None: ...


def build_mime_message(envelope: EmailEnvelope) -> EmailMessage:
    """
    Builds the MIME message for an envelope.

    With a text body the result is multipart/alternative (plain text first,
    HTML second); otherwise it is a single text/html part.
    """
    msg = EmailMessage()
    msg["From"] = envelope.sender
    msg["To"] = ", ".join(envelope.recipients)
    msg["Subject"] = envelope.subject

    if envelope.text:
        msg.set_content(envelope.text)
        msg.add_alternative(envelope.html, subtype="html")
    else:
        msg.set_content(envelope.html, subtype="html")

    return msg


def _relay_error_message(error: Exception) -> str:
    """Returns the relay's own message for SMTP reply errors, else str(error)."""
    if isinstance(error, smtplib.SMTPResponseException):
        smtp_error = error.smtp_error
        if isinstance(smtp_error, bytes):
            smtp_error = smtp_error.decode("utf-8", errors="replace")
        return f"{error.smtp_code} {smtp_error}"
    return str(error) or type(error).__name__


class SMTPRelay:
    """Authenticated SMTP relay (Gmail by default). One connection per send."""

    def __init__(self, settings: Settings):
        self._host = settings.smtp_host
        self._port = settings.smtp_port
        self._use_ssl = settings.smtp_use_ssl
        self._username = settings.gmail_user
        self._password = settings.gmail_pass

    def _deliver(self, message: EmailMessage) -> None:
        context = ssl.create_default_context()
        if self._use_ssl:
            with smtplib.SMTP_SSL(self._host, self._port, context=context) as smtp:
                smtp.login(self._username, self._password)
                smtp.send_message(message)
        else:
            with smtplib.SMTP(self._host, self._port) as smtp:
                smtp.starttls(context=context)
                smtp.login(self._username, self._password)
                smtp.send_message(message)

    async def send(self, envelope: EmailEnvelope) -> None:
        """
        Sends the envelope. The blocking SMTP exchange runs in a worker thread.

        Raises:
            UpstreamError: If the relay rejects the login or the message, or
                cannot be reached.
        """
        message = build_mime_message(envelope)

        logging.info(
            f"Sending email via {self._host}:{self._port} "
            f"to {len(envelope.recipients)} recipient(s)"
        )
        try:
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPException, OSError) as e:
            logging.error(f"Mail relay send failed: {type(e).__name__}: {e}")
            raise UpstreamError(_relay_error_message(e)) from e


class LoggingMailRelay:
    """Logs the envelope instead of sending it. Used when MOCK_EMAIL_SENDS is enabled."""

    async def send(self, envelope: EmailEnvelope) -> None:
        logging.info(
            f"MOCK email to {', '.join(envelope.recipients)}: "
            f"subject={envelope.subject!r}, html_chars={len(envelope.html)}"
        )
