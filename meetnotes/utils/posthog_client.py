"""Posthog client utility for OpenAI LLM analytics."""

from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING, Any

from meetnotes.utils.config import Settings

if TYPE_CHECKING:
    from posthog import Posthog

# Global Posthog client instance
_posthog_client: Optional[Posthog] = None


def get_posthog_client(settings: Settings) -> Optional[Posthog]:
    """Get or initialize the Posthog client."""
    global _posthog_client

    if _posthog_client is None:
        # Only enable PostHog in staging and production
        if settings.app_env not in ["staging", "prod", "production"]:
            return None

        if not settings.posthog_api_key:
            return None

        try:
            from posthog import Posthog

            _posthog_client = Posthog(
                project_api_key=settings.posthog_api_key,
                host=settings.posthog_api_url,
            )
        except Exception as e:
            logging.error(f"Failed to initialize Posthog client: {e}")
            return None

    return _posthog_client


def get_openai_client(settings: Settings) -> Any:
    """
    Get an AsyncOpenAI client pointed at the Groq endpoint.
    Wraps with Posthog for automatic LLM analytics if enabled.

    Retries are disabled: each summary request makes exactly one completion call.
    """
    posthog_client = get_posthog_client(settings)

    if not posthog_client:
        from openai import AsyncOpenAI

        return AsyncOpenAI(
            api_key=settings.groq_api_key,
            base_url=settings.groq_api_base_url,
            max_retries=0,
        )

    from posthog.ai.openai import AsyncOpenAI

    return AsyncOpenAI(
        api_key=settings.groq_api_key,
        base_url=settings.groq_api_base_url,
        max_retries=0,
        posthog_client=posthog_client,
    )


def get_posthog_kwargs(
    settings: Settings, trace_id: str, properties: dict[str, Any]
) -> dict[str, Any]:
    """
    Get Posthog-specific keyword arguments for OpenAI client calls.
    Returns an empty dict if Posthog is disabled.
    """
    posthog_client = get_posthog_client(settings)
    if not posthog_client:
        return {}

    return {
        "posthog_distinct_id": trace_id,
        "posthog_trace_id": trace_id,
        "posthog_properties": properties,
    }


def shutdown_posthog() -> None:
    """Shutdown the Posthog client."""
    global _posthog_client
    if _posthog_client:
        try:
            _posthog_client.shutdown()
        except Exception as e:
            logging.error(f"Error shutting down Posthog client: {e}")
        finally:
            _posthog_client = None
