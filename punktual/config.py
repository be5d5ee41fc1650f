"""Centralized configuration loaded from environment variables."""

from __future__ import annotations

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://punktual.co"


class Settings(BaseSettings):
    """Application-wide settings sourced from .env / environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── General ──────────────────────────────────────────────────────
    punktual_env: str = "development"
    punktual_log_level: str = "INFO"

    # ── Public URLs ──────────────────────────────────────────────────
    next_public_base_url: str = DEFAULT_BASE_URL

    # ── Short links ──────────────────────────────────────────────────
    short_link_api_url: str = ""
    csrf_token_url: str = ""
    short_link_timeout: float = 10.0

    # ── API Server ───────────────────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    @field_validator("next_public_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/") or DEFAULT_BASE_URL

    # ── Derived ──────────────────────────────────────────────────────
    @property
    def base_url(self) -> str:
        """Public site URL used for tracked redirects and attribution links."""
        return self.next_public_base_url

    @property
    def short_link_endpoint(self) -> str:
        """Endpoint that creates short links."""
        return self.short_link_api_url or f"{self.base_url}/api/create-short-link"

    @property
    def csrf_endpoint(self) -> str:
        """Endpoint that issues CSRF tokens for the short-link API."""
        return self.csrf_token_url or f"{self.base_url}/api/csrf-token"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the singleton Settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
