from typing import Optional

from pydantic import BaseModel, Field, StrictStr


class SummarizeRequest(BaseModel):
    """
    Payload for a summary request. The transcript is embedded verbatim in the
    user prompt; the instruction replaces the default one when given.
    """

    transcript: StrictStr = Field(..., min_length=1)
    instruction: Optional[StrictStr] = None


class SummarizeResponse(BaseModel):
    summary: str
