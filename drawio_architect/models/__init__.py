"""Domain and API models."""

from drawio_architect.models.diagram import (
    AnalysisResponse,
    DiagramResponse,
    ErrorResponse,
    GenerateDiagramRequest,
    GenerationStateResponse,
)
from drawio_architect.models.source_input import DocumentSource, SourceInput, TextSource

__all__ = [
    "AnalysisResponse",
    "DiagramResponse",
    "DocumentSource",
    "ErrorResponse",
    "GenerateDiagramRequest",
    "GenerationStateResponse",
    "SourceInput",
    "TextSource",
]
