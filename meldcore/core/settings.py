"""Application settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the API and logging.

    The normalizers and the resolver are pure and never read these.
    """

    service_name: str = Field(default="meld-core")
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")
    # Root of the active vault, listed by the API when no snapshot is posted.
    vault_dir: Path = Field(default=Path("/tmp/vault"))

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return application settings instance."""
    return Settings()


__all__ = ["Settings", "get_settings"]
