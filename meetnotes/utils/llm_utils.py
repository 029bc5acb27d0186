"""Utility functions for working with OpenAI SDK chat completion responses."""

from typing import Any, Dict


def extract_text_from_response(response: Any) -> str:
    """
    Extract text content from an OpenAI Chat Completions API response.

    The Chat Completions API structure is:
    {
        "choices": [{
            "message": {
                "content": "..."
            }
        }]
    }

    Args:
        response: The response object from OpenAI SDK chat.completions.create()

    Returns:
        The first choice's text, or empty string if the provider returned none
    """
    if (
        not hasattr(response, "choices")
        or not response.choices
        or len(response.choices) == 0
    ):
        return ""

    choice = response.choices[0]
    if not hasattr(choice, "message"):
        return ""

    message = choice.message
    if not hasattr(message, "content") or not message.content:
        return ""

    return message.content


def extract_metadata(response: Any) -> Dict[str, Any]:
    """Extracts model and token usage from a completion response for logging."""
    usage_obj = getattr(response, "usage", None)
    usage = None
    if usage_obj:
        if hasattr(usage_obj, "model_dump"):
            usage = usage_obj.model_dump()
        else:
            usage = {
                "prompt_tokens": getattr(usage_obj, "prompt_tokens", None),
                "completion_tokens": getattr(usage_obj, "completion_tokens", None),
                "total_tokens": getattr(usage_obj, "total_tokens", None),
            }

    metadata = {
        "model": getattr(response, "model", ""),
        "usage": usage,
    }
    response_id = getattr(response, "id", "")
    if response_id:
        metadata["response_id"] = response_id
    return metadata
