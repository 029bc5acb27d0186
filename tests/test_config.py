import pytest
from pydantic import ValidationError

from meetnotes.utils.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("GROQ_MODEL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.groq_model == "llama3-70b-8192"
    assert settings.groq_api_base_url == "https://api.groq.com/openai/v1"
    assert settings.summary_temperature == 0.2
    assert settings.email_body_mode == "multipart"
    assert settings.default_subject == "Meeting Summary"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk_env")
    monkeypatch.setenv("GROQ_MODEL", "llama-3.3-70b-versatile")
    monkeypatch.setenv("EMAIL_BODY_MODE", "html")
    settings = Settings(_env_file=None)
    assert settings.groq_api_key == "gsk_env"
    assert settings.groq_model == "llama-3.3-70b-versatile"
    assert settings.email_body_mode == "html"


def test_invalid_body_mode(monkeypatch):
    monkeypatch.setenv("EMAIL_BODY_MODE", "pdf")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_are_immutable(settings):
    with pytest.raises(ValidationError):
        settings.groq_api_key = "other"


def test_sender_address(settings):
    assert settings.sender_address == "notes@example.com"
    updated = settings.model_copy(update={"mail_from": "minutes@example.com"})
    assert updated.sender_address == "minutes@example.com"
