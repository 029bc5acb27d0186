"""FastAPI dependencies for configuration and the two outbound capabilities.

Tests substitute fakes through ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends

from meetnotes.services.email.smtp_utils import LoggingMailRelay, MailRelay, SMTPRelay
from meetnotes.services.summary.llm_utils import (
    CompletionService,
    GroqCompletionService,
    MockCompletionService,
)
from meetnotes.utils.config import Settings


@lru_cache
def get_settings() -> Settings:
    """Process-wide configuration, read from the environment once."""
    return Settings()


def get_completion_service(
    settings: Settings = Depends(get_settings),
) -> CompletionService:
    if settings.mock_llm_calls:
        return MockCompletionService()
    return GroqCompletionService(settings)


def get_mail_relay(settings: Settings = Depends(get_settings)) -> MailRelay:
    if settings.mock_email_sends:
        return LoggingMailRelay()
    return SMTPRelay(settings)
