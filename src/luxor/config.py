"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Server settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    unsplash_access_key: str = ""
    unsplash_base_url: str = "https://api.unsplash.com"
    unsplash_utm_source: str = "Luxor Project"
    default_per_page: int = 12
    max_per_page: int = 30
    cors_allowed_origins: str | None = None
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


class ClientSettings(BaseSettings):
    """Settings for the Luxor API client."""

    api_url: str = "http://localhost:8000/api"
    identity_path: Path = Path.home() / ".config" / "luxor" / "identity.json"
    request_timeout_seconds: float = 10.0

    model_config = SettingsConfigDict(
        env_prefix="LUXOR_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse CORS origins from env; '*' or empty allows any origin."""
    if raw is None:
        return ["*"]
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ["*"]
    origins = [chunk.strip().rstrip("/") for chunk in cleaned.split(",")]
    return [origin for origin in origins if origin] or ["*"]
