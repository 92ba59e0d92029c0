"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: str = "supabase"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    seed_sample_data: bool = True
    openai_api_key: str
    openai_model: str = "gpt-4o"
    openai_timeout_seconds: float = 30.0
    generation_timeout_seconds: float = 30.0
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
