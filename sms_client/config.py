"""Client-side configuration for the provider endpoint and HTTP transport."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, Field


DEFAULT_API_BASE_URL = "https://api.twilio.com"
DEFAULT_API_VERSION = "2010-04-01"
DEFAULT_TIMEOUT_SECONDS = 15.0


def _env_float(name: str, fallback: float) -> float:
    try:
        return float(os.getenv(name, str(fallback)))
    except (TypeError, ValueError):
        return fallback


class ClientSettings(BaseModel):
    """Provider endpoint and transport settings, read from the environment."""

    api_base_url: str = Field(default_factory=lambda: os.getenv("TWILIO_API_BASE_URL", DEFAULT_API_BASE_URL))
    api_version: str = Field(default_factory=lambda: os.getenv("TWILIO_API_VERSION", DEFAULT_API_VERSION))
    # Applies to the shared transport; the client itself has no timeout
    timeout_seconds: float = Field(
        default_factory=lambda: _env_float("SMS_HTTP_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)
    )

    def messages_url(self, account_sid: str) -> str:
        """Return the message-resource URL for an account."""
        base = self.api_base_url.rstrip("/")
        return f"{base}/{self.api_version}/Accounts/{account_sid}/Messages"


@lru_cache(maxsize=1)
def get_client_settings() -> ClientSettings:
    """Get cached client settings instance."""
    return ClientSettings()
