from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App Environment
    app_env: str = "prod"
    log_format: Literal["text", "json"] = "text"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Groq (OpenAI-compatible chat completions)
    groq_api_key: str = ""
    groq_model: str = "llama3-70b-8192"
    groq_api_base_url: str = "https://api.groq.com/openai/v1"
    summary_temperature: float = 0.2
    # Mock LLM calls
    mock_llm_calls: bool = False

    # PostHog Configuration
    posthog_api_key: str = ""
    posthog_api_url: str = "https://us.i.posthog.com"

    # Mail relay
    gmail_user: str = ""
    gmail_pass: str = ""
    mail_from: str = ""
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    smtp_use_ssl: bool = True
    # "multipart" sends the raw markdown as text/plain next to the HTML part
    email_body_mode: Literal["multipart", "html"] = "multipart"
    default_subject: str = "Meeting Summary"
    # Log outgoing mail instead of sending it
    mock_email_sends: bool = False

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True
    )

    @property
    def sender_address(self) -> str:
        return self.mail_from or self.gmail_user
