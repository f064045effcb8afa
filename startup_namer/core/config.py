"""
Application configuration using pydantic-settings.
All environment variables are validated and typed.
"""

import os
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Gemini (not validated up front, a missing key surfaces as a generation error)
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash-lite"

    # GoDaddy registrar lookup, both required by the domain gateway
    godaddy_api_key: str | None = None
    godaddy_api_secret: str | None = None
    godaddy_base_url: str = "https://api.ote-godaddy.com"

    # Gateway used by the name generator; defaults to this server
    gateway_url: str | None = None

    # Web server
    web_host: str = "0.0.0.0"
    web_port: int = 8080

    name_count: int = 5
    log_level: str = "INFO"

    @field_validator("godaddy_api_key", "godaddy_api_secret", "gateway_url", mode="before")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        cleaned = str(value).strip()
        return cleaned or None

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return str(value).strip().upper()

    @property
    def resolved_gateway_url(self) -> str:
        """Gateway base URL, falling back to the local web server."""
        if self.gateway_url:
            return self.gateway_url.rstrip("/")

        host = self.web_host.strip().strip("[]")
        if host in ("", "0.0.0.0"):
            host = "127.0.0.1"
        elif host == "::":
            host = "::1"

        if ":" in host:
            host = f"[{host}]"
        return f"http://{host}:{self.web_port}"

    model_config = {
        "env_file": os.path.join(
            os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), ".env"
        ),
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton settings instance
settings = Settings()
