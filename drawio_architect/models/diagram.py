"""
Diagram domain models and schemas.

Request/response schemas for document analysis and Draw.io generation.

Dependencies: pydantic
System role: Diagram API contracts
"""

from pydantic import BaseModel, Field


class GenerateDiagramRequest(BaseModel):
    """Request schema for diagram generation."""

    description: str = Field(description="Natural language description of the diagram")


class AnalysisResponse(BaseModel):
    """Response schema for document analysis."""

    description: str = Field(
        description="Derived diagram description, ready to edit and generate from"
    )


class DiagramResponse(BaseModel):
    """Response schema for diagram generation."""

    xml: str = Field(description="Draw.io mxGraphModel XML")


class GenerationStateResponse(BaseModel):
    """Snapshot of the generation state machine for display."""

    status: str = Field(description="idle, analyzing, generating, ready or failed")
    busy: bool = Field(description="True while a phase is in flight")
    artifact: str | None = Field(default=None, description="Latest diagram XML when ready")
    error: str | None = Field(default=None, description="Human-readable failure cause")
    error_kind: str | None = Field(default=None, description="Failure kind, e.g. MalformedResponse")
    description: str | None = Field(
        default=None,
        description="Editable description derived by the last analysis",
    )


class ErrorResponse(BaseModel):
    """Error body returned by diagram endpoints."""

    detail: str
    kind: str
