import logging

from meetnotes.schemas.summarize import SummarizeRequest
from meetnotes.services.summary.llm_utils import CompletionService, build_messages
from meetnotes.utils.config import Settings
from meetnotes.utils.errors import ConfigError


async def process_summary_request(
    request: SummarizeRequest,
    settings: Settings,
    completion: CompletionService,
) -> str:
    """
    Builds the prompt for a validated request and returns the model's summary.

    Returns an empty string when the provider returns no choices.

    Raises:
        ConfigError: If the Groq API key is not configured.
        UpstreamError: If the completion service reports a failure.
    """
    if not settings.groq_api_key and not settings.mock_llm_calls:
        logging.error("Summary requested but GROQ_API_KEY is not configured.")
        raise ConfigError("GROQ_API_KEY not set")

    messages = build_messages(request.transcript, request.instruction)

    logging.info(
        f"Generating summary: transcript_chars={len(request.transcript)}, "
        f"custom_instruction={bool(request.instruction)}"
    )
    summary = await completion.complete(messages)

    if not summary:
        logging.warning("The AI model returned an empty summary.")
    return summary
