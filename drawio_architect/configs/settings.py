"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from drawio_architect.configs.base import BaseSettings
from drawio_architect.configs.gemini import GeminiSettings
from drawio_architect.configs.generation import GenerationSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    generation: GenerationSettings = Field(default_factory=GenerationSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from drawio_architect.configs import get_settings
        settings = get_settings()
    """
    return Settings()
