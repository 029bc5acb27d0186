import smtplib

import pytest
from fastapi.testclient import TestClient

from meetnotes.dependencies import get_completion_service, get_mail_relay, get_settings
from meetnotes.main import app
from meetnotes.utils.config import Settings


class FakeCompletionService:
    """Records every prompt and answers with a canned reply or error."""

    def __init__(self, reply="## Summary\n- Shipping Friday", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def complete(self, messages):
        self.calls.append(messages)
        if self.error:
            raise self.error
        return self.reply


class FakeMailRelay:
    def __init__(self, error=None):
        self.error = error
        self.sent = []

    async def send(self, envelope):
        if self.error:
            raise self.error
        self.sent.append(envelope)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        app_env="test",
        groq_api_key="test-groq-key",
        gmail_user="notes@example.com",
        gmail_pass="app-password",
    )


@pytest.fixture
def completion():
    return FakeCompletionService()


@pytest.fixture
def relay():
    return FakeMailRelay()


@pytest.fixture
def client(settings, completion, relay):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_completion_service] = lambda: completion
    app.dependency_overrides[get_mail_relay] = lambda: relay
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def override_settings(settings):
    """Swaps in a copy of the test settings with some fields changed."""

    def _override(**changes):
        app.dependency_overrides[get_settings] = lambda: settings.model_copy(
            update=changes
        )

    return _override


class FakeSMTP:
    """Stands in for smtplib.SMTP and SMTP_SSL; keeps every connection it opens."""

    instances = []
    login_error = None
    connect_error = None

    def __init__(self, host, port, context=None):
        if FakeSMTP.connect_error:
            raise FakeSMTP.connect_error
        self.host = host
        self.port = port
        self.context = context
        self.started_tls = False
        self.logged_in = None
        self.messages = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self, context=None):
        self.started_tls = True

    def login(self, user, password):
        if FakeSMTP.login_error:
            raise FakeSMTP.login_error
        self.logged_in = (user, password)

    def send_message(self, message):
        self.messages.append(message)


@pytest.fixture
def fake_smtp(monkeypatch):
    FakeSMTP.instances = []
    FakeSMTP.login_error = None
    FakeSMTP.connect_error = None
    monkeypatch.setattr(smtplib, "SMTP_SSL", FakeSMTP)
    monkeypatch.setattr(smtplib, "SMTP", FakeSMTP)
    return FakeSMTP

