"""Diagram service layer.

Coordinates between the API layer and the generation orchestrator and
converts orchestrator state into response models.

Dependencies: logging, orchestrator, models
System role: Service layer for the diagram feature
"""

import logging

from drawio_architect.core.generation.orchestrator import GenerationOrchestrator
from drawio_architect.core.generation.state import GenerationState, GenerationStatus
from drawio_architect.models.diagram import (
    AnalysisResponse,
    DiagramResponse,
    GenerationStateResponse,
)
from drawio_architect.models.source_input import DocumentSource, SourceInput, TextSource

logger = logging.getLogger(__name__)


class DiagramService:
    """Service exposing the analyze/generate entry points."""

    def __init__(
        self,
        orchestrator: GenerationOrchestrator,
        default_description: str | None = None,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            orchestrator: Process-wide generation orchestrator
            default_description: Description offered before any analysis runs
        """
        self._orchestrator = orchestrator
        self._default_description = default_description

    async def analyze_document(self, document: DocumentSource | None) -> AnalysisResponse:
        """Analyze an uploaded document into an editable description."""
        description = await self._orchestrator.request_analysis(document)
        return AnalysisResponse(description=description)

    async def generate_diagram(self, description: str) -> DiagramResponse:
        """Generate Draw.io XML from a description."""
        xml = await self._orchestrator.request_generation(description)
        return DiagramResponse(xml=xml)

    async def generate_from_source(self, source: SourceInput) -> str:
        """
        Run the whole pipeline for one input.

        Documents are analyzed first and the derived description is used
        unedited; text goes straight to generation.

        Args:
            source: TextSource or DocumentSource

        Returns:
            str: Recovered mxGraphModel XML
        """
        if isinstance(source, TextSource):
            description = source.content
        else:
            logger.info(f"{__name__}:generate_from_source - Analyzing {source.filename}")
            description = await self._orchestrator.request_analysis(source)
        return await self._orchestrator.request_generation(description)

    def get_state(self) -> GenerationStateResponse:
        """Return a display snapshot of the orchestrator state."""
        return self.to_response(self._orchestrator.state)

    def to_response(self, state: GenerationState) -> GenerationStateResponse:
        """Convert a state snapshot into its API model."""
        description = state.description
        if description is None and state.status == GenerationStatus.IDLE:
            description = self._default_description

        return GenerationStateResponse(
            status=state.status.value,
            busy=state.busy,
            artifact=state.artifact,
            error=state.error_message,
            error_kind=state.error_kind,
            description=description,
        )
