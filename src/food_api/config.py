"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    food_backend: Literal["memory", "supabase"] = "memory"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "foods"
    seed_data: bool = True
    api_versions: str = "1.0,2.0,3.0"
    max_page_count: int = 100
    cors_allowed_origins: str = "*"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def normalize_api_version(raw: str) -> str | None:
    """Normalize a version like ``3`` or ``v3.0`` to ``3.0``."""
    cleaned = raw.strip().lower().removeprefix("v")
    major, _, minor = cleaned.partition(".")
    if not major.isdigit():
        return None
    if not minor:
        minor = "0"
    if not minor.isdigit():
        return None
    return f"{int(major)}.{int(minor)}"


def parse_api_versions(raw: str) -> tuple[str, ...]:
    """Parse the supported API versions from env."""
    versions: list[str] = []
    for chunk in raw.split(","):
        version = normalize_api_version(chunk) if chunk.strip() else None
        if version and version not in versions:
            versions.append(version)
    if not versions:
        raise ValueError("At least one API version must be configured")
    return tuple(versions)


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return []
    cleaned = raw.strip()
    if cleaned == "*":
        return ["*"]
    return [chunk.strip() for chunk in cleaned.split(",") if chunk.strip()]
