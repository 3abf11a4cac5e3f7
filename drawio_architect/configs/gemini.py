"""
Gemini configuration settings.

Credential and model selection for the Google Gemini completion service.

Dependencies: pydantic_settings
System role: Completion gateway configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiSettings(BaseSettings):
    """Settings for the Gemini text generation service."""

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(
        default="",
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"),
        description="Google API key for Gemini access (required at startup)",
    )
    analysis_model: str = Field(
        default="gemini-2.5-flash",
        description="Model used to analyze documents into diagram descriptions",
    )
    generation_model: str = Field(
        default="gemini-2.5-flash",
        description="Model used to generate Draw.io XML from a description",
    )
    timeout_seconds: float | None = Field(
        default=None,
        description="Per-request timeout for Gemini calls (None uses the SDK default)",
    )
