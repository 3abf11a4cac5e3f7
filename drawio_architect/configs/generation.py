"""
Diagram generation configuration settings.

Retry policy, upload limits and presentation defaults for the
generation pipeline.

Dependencies: pydantic_settings
System role: Generation orchestrator configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DESCRIPTION = (
    "A flowchart for a user login process with a start, credential check, "
    "dashboard on success, error on failure, and end points."
)


class GenerationSettings(BaseSettings):
    """Settings for the analyze/generate pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="DIAGRAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    service_max_attempts: int = Field(
        default=1,
        ge=1,
        description="Attempts per Gemini call on ServiceError (1 disables retry)",
    )
    retry_wait_seconds: float = Field(
        default=2.0,
        ge=0.0,
        description="Initial exponential backoff between service retries",
    )
    max_upload_bytes: int = Field(
        default=25 * 1024 * 1024,
        description="Maximum accepted document upload size in bytes (default 25MB)",
    )
    default_description: str = Field(
        default=DEFAULT_DESCRIPTION,
        description="Sample diagram description offered before any analysis runs",
    )
