"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    fallback_calories: int = Field(default=120, ge=0)
    quantity_max_digits: int = Field(default=2, ge=1)
    history_max_entries: int | None = Field(default=50, ge=0)
    estimate_delay_seconds: float = Field(default=0.0, ge=0)
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
