"""
Chefly - Configuration and settings.

All settings are read from the environment (or a local .env file).
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.

    Required: OpenAI key plus Supabase URL and service role key.
    Everything else has a sensible default.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # OpenAI (or any OpenAI-compatible gateway)
    openai_api_key: str
    openai_base_url: str | None = None

    # Supabase - the pipeline writes plans for arbitrary users, so it
    # runs with the service role key
    supabase_url: str
    supabase_service_role_key: str

    # Application
    chefly_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    default_language: Literal["es", "en"] = "es"

    # Prompt logging
    # CHEFLY_LOG_PROMPTS=1 - log to local files (dev only)
    chefly_log_prompts: bool = False

    # Text generation
    text_model: str = "gpt-4.1-mini"
    text_temperature: float = 0.9  # repeated calls should differ
    text_max_tokens: int = 16000
    chefly_ai_timeout_seconds: float = 120.0

    # Image generation
    image_model: str = "gpt-image-1"
    image_size: str = "1024x1024"
    chefly_generate_images: bool = True
    chefly_image_timeout_seconds: float = 60.0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


class _SettingsProxy:
    """Lazy proxy for settings to avoid loading .env at import time."""

    _instance: Settings | None = None

    def __getattr__(self, name: str):
        if self._instance is None:
            self._instance = get_settings()
        return getattr(self._instance, name)


settings = _SettingsProxy()
