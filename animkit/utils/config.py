"""Application configuration."""
from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from .env and environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    default_backend: str = "react"
    copy_feedback_seconds: float = 2.0
    clipboard_command: str = Field(
        default="",
        validation_alias=AliasChoices("CLIPBOARD_COMMAND", "ANIMKIT_CLIPBOARD"),
    )
    log_level: str = "INFO"


settings = Settings()
