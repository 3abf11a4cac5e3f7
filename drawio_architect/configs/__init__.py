"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from drawio_architect.configs.gemini import GeminiSettings
from drawio_architect.configs.generation import GenerationSettings
from drawio_architect.configs.settings import Settings, get_settings

__all__ = ["GeminiSettings", "GenerationSettings", "Settings", "get_settings"]
