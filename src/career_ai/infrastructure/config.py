"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "anthropic/claude-3-haiku"


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    openrouter_api_key: SecretStr | None = None
    openrouter_base_url: str = DEFAULT_BASE_URL
    ai_model: str = DEFAULT_MODEL
    app_referer: str = "http://localhost:3000"
    app_title: str = "AI Resume Job Application"
    ai_request_timeout: float = Field(default=60.0, gt=0)
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()


@dataclass(frozen=True, slots=True)
class GatewayConfig:
    """Connection parameters for the model provider.

    Built once at startup and handed to the transport; nothing mutates it
    afterwards.  An empty ``api_key`` is allowed here so the process can boot
    without one; the transport refuses to send until it is set.
    """

    api_key: str = field(default="", repr=False)
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    referer: str = "http://localhost:3000"
    title: str = "AI Resume Job Application"
    timeout: float = 60.0

    @classmethod
    def from_settings(cls, settings: Settings) -> GatewayConfig:
        key = settings.openrouter_api_key
        return cls(
            api_key=key.get_secret_value() if key else "",
            base_url=settings.openrouter_base_url.rstrip("/"),
            model=settings.ai_model,
            referer=settings.app_referer,
            title=settings.app_title,
            timeout=settings.ai_request_timeout,
        )
