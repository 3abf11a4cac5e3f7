"""
Dependency injection container.

Factory functions for FastAPI dependencies. The orchestrator owns the
process-wide generation state, so one instance is cached and shared.

Dependencies: drawio_architect.configs, drawio_architect.core, drawio_architect.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from drawio_architect.application.services import DiagramService
from drawio_architect.boundary.gemini.completion_gateway import GeminiCompletionGateway
from drawio_architect.configs import Settings, get_settings
from drawio_architect.core.document_processing.text_extraction import TextExtractionAdapter
from drawio_architect.core.generation.orchestrator import GenerationOrchestrator


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._gateway = None
        self._text_extractor = None
        self._orchestrator = None
        self._diagram_service = None

    @property
    def settings(self) -> Settings:
        """Get application settings."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def gateway(self) -> GeminiCompletionGateway:
        """Get cached Gemini gateway (raises ConfigurationError without a key)."""
        if self._gateway is None:
            gemini = self.settings.gemini
            self._gateway = GeminiCompletionGateway(
                api_key=gemini.api_key,
                timeout_seconds=gemini.timeout_seconds,
            )
        return self._gateway

    @property
    def text_extractor(self) -> TextExtractionAdapter:
        """Get cached text extraction adapter."""
        if self._text_extractor is None:
            self._text_extractor = TextExtractionAdapter()
        return self._text_extractor

    @property
    def orchestrator(self) -> GenerationOrchestrator:
        """Get the process-wide generation orchestrator."""
        if self._orchestrator is None:
            settings = self.settings
            self._orchestrator = GenerationOrchestrator(
                gateway=self.gateway,
                text_extractor=self.text_extractor,
                analysis_model=settings.gemini.analysis_model,
                generation_model=settings.gemini.generation_model,
                service_max_attempts=settings.generation.service_max_attempts,
                retry_wait_seconds=settings.generation.retry_wait_seconds,
            )
        return self._orchestrator

    @property
    def diagram_service(self) -> DiagramService:
        """Get cached diagram service."""
        if self._diagram_service is None:
            self._diagram_service = DiagramService(
                orchestrator=self.orchestrator,
                default_description=self.settings.generation.default_description,
            )
        return self._diagram_service

    def clear(self) -> None:
        """Clear all cached instances."""
        self._gateway = None
        self._text_extractor = None
        self._orchestrator = None
        self._diagram_service = None


@lru_cache
def get_service_cache() -> ServiceCache:
    """Get the process-wide service cache."""
    return ServiceCache()


def get_settings_dependency() -> Settings:
    """
    Get application settings.

    Returns:
        Settings: Application settings instance
    """
    return get_settings()


def get_diagram_service() -> DiagramService:
    """
    Get diagram service instance.

    Returns:
        DiagramService: Service bound to the shared orchestrator
    """
    return get_service_cache().diagram_service
