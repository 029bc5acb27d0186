import re
from typing import Any, List, Optional

from pydantic import BaseModel, Field, StrictStr, field_validator

# Recipients may arrive separated by commas or line breaks.
_RECIPIENT_SEPARATORS = re.compile(r"[,\r\n]")


class SendEmailRequest(BaseModel):
    """
    Payload for distributing a summary. ``body`` is markdown and is rendered
    to HTML before sending.
    """

    recipients: List[StrictStr] = Field(..., min_length=1)
    subject: Optional[StrictStr] = None
    body: StrictStr = Field(..., min_length=1)

    @field_validator("recipients", mode="before")
    @classmethod
    def normalize_recipients(cls, value: Any) -> Any:
        """Accepts "a@x.com, b@y.com" as well as a list; drops blank entries."""
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            return value
        recipients = []
        for item in value:
            if not isinstance(item, str):
                recipients.append(item)
                continue
            for address in _RECIPIENT_SEPARATORS.split(item):
                address = address.strip()
                if address:
                    recipients.append(address)
        return recipients

    @field_validator("subject")
    @classmethod
    def single_line_subject(cls, value: Optional[str]) -> Optional[str]:
        # Header values cannot carry CR/LF
        if value is None:
            return value
        value = value.strip()
        if "\r" in value or "\n" in value:
            raise ValueError("subject must be a single line of text")
        return value


class SendEmailResponse(BaseModel):
    message: str = "Email sent"


class EmailEnvelope(BaseModel):
    """A fully composed message, ready to hand to the mail relay."""

    sender: str
    recipients: List[str]
    subject: str
    html: str
    text: Optional[str] = None
