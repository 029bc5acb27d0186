import logging
import uuid
from pathlib import Path
from typing import Any, Optional, Protocol

import openai

from meetnotes.utils.config import Settings
from meetnotes.utils.errors import UpstreamError
from meetnotes.utils.llm_utils import extract_metadata, extract_text_from_response
from meetnotes.utils.posthog_client import get_openai_client, get_posthog_kwargs

# Constants
PROMPT_FILE_PATH = Path(__file__).with_name("prompt.md")
DEFAULT_INSTRUCTION = (
    "Summarize clearly with key points, decisions, risks, and action items."
)


class CompletionService(Protocol):
    async def complete(self, messages: list[dict[str, str]]) -> str: ...


def load_system_prompt() -> str:
    """Loads the system prompt from the prompt file."""
    try:
        return PROMPT_FILE_PATH.read_text(encoding="utf-8")
    except FileNotFoundError:
        logging.error("Summary prompt file not found.")
        raise


def create_user_content(transcript: str, instruction: Optional[str] = None) -> str:
    """
    Creates the user prompt. The transcript goes last, inside triple quotes,
    so it cannot be read as part of the instruction.
    """
    return (
        f"Instruction: {instruction or DEFAULT_INSTRUCTION}\n"
        "\n"
        "Transcript:\n"
        f'"""{transcript}"""\n'
    )


def build_messages(
    transcript: str, instruction: Optional[str] = None
) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": load_system_prompt()},
        {"role": "user", "content": create_user_content(transcript, instruction)},
    ]


class GroqCompletionService:
    """
    Chat completions against Groq's OpenAI-compatible endpoint.

    One non-streaming request per call. Provider failures are raised as
    UpstreamError carrying the provider's raw response text.
    """

    def __init__(self, settings: Settings, client: Any = None):
        self._settings = settings
        self._client = client

    def _get_client(self) -> Any:
        # Built lazily: AsyncOpenAI refuses to construct without an API key.
        if self._client is None:
            self._client = get_openai_client(self._settings)
        return self._client

    async def complete(self, messages: list[dict[str, str]]) -> str:
        client = self._get_client()
        trace_id = str(uuid.uuid4())

        try:
            response = await client.chat.completions.create(
                model=self._settings.groq_model,
                temperature=self._settings.summary_temperature,
                messages=messages,
                **get_posthog_kwargs(
                    self._settings,
                    trace_id,
                    {"$ai_span_name": "meeting_summary"},
                ),
            )
        except openai.APIStatusError as e:
            logging.error(
                f"Groq returned status {e.status_code} for trace {trace_id}"
            )
            raise UpstreamError(f"Groq error: {e.response.text}") from e
        except openai.APIConnectionError as e:
            logging.error(f"Could not reach Groq for trace {trace_id}: {e}")
            raise UpstreamError(f"Groq error: {e}") from e

        logging.info(f"Groq completion finished: {extract_metadata(response)}")
        return extract_text_from_response(response)


class MockCompletionService:
    """
    Returns a mock summary containing the full prompt that would have been
    sent to the AI model. Used when MOCK_LLM_CALLS is enabled.
    """

    async def complete(self, messages: list[dict[str, str]]) -> str:
        logging.info("Generating MOCK summary with full prompt.")
        prompt = "\n\n".join(
            f"[{message['role']}]\n{message['content']}" for message in messages
        )
        return f"""
---
# MOCK SUMMARY
---
This is a mock response. If this were a real request, the following prompt would be sent to the AI model:
---
{prompt}
"""
