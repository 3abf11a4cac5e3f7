"""Draw.io diagram endpoints.

Routes:
- POST /diagrams/analyze - Analyze an uploaded document into a diagram description
- POST /diagrams/generate - Generate Draw.io XML from a description
- GET /diagrams/state - Current generation state for display

Domain errors propagate to the handlers registered in api.errors.

Dependencies: drawio_architect.application.services.diagram_service
System role: Diagram generation HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile

from drawio_architect.api.deps import get_diagram_service, get_settings_dependency
from drawio_architect.application.services.diagram_service import DiagramService
from drawio_architect.configs import Settings
from drawio_architect.core.exceptions import UploadTooLargeError
from drawio_architect.models.diagram import (
    AnalysisResponse,
    DiagramResponse,
    ErrorResponse,
    GenerateDiagramRequest,
    GenerationStateResponse,
)
from drawio_architect.models.source_input import DocumentSource

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/diagrams", tags=["diagrams"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    responses={**ERROR_RESPONSES, 413: {"model": ErrorResponse}, 415: {"model": ErrorResponse}},
)
async def analyze_document(
    file: UploadFile | None = File(default=None),
    diagram_service: DiagramService = Depends(get_diagram_service),
    settings: Settings = Depends(get_settings_dependency),
) -> AnalysisResponse:
    """Analyze a .pdf/.docx/.txt document and derive an editable description.

    Args:
        file: Uploaded document (multipart field "file")
        diagram_service: Injected diagram service
        settings: Application settings (upload limit)

    Returns:
        AnalysisResponse: Single-paragraph diagram description

    Raises:
        UploadTooLargeError: Upload exceeds the configured size limit
    """
    document = None
    if file is not None:
        content = await file.read()
        max_bytes = settings.generation.max_upload_bytes
        if len(content) > max_bytes:
            logger.warning(
                f"{__name__}:analyze_document - Upload too large "
                f"filename={file.filename}, bytes={len(content)}"
            )
            raise UploadTooLargeError(max_bytes, size=len(content), filename=file.filename)
        document = DocumentSource(
            content=content,
            filename=file.filename,
            media_type=file.content_type,
        )

    return await diagram_service.analyze_document(document)


@router.post("/generate", response_model=DiagramResponse, responses=ERROR_RESPONSES)
async def generate_diagram(
    request: GenerateDiagramRequest,
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> DiagramResponse:
    """Generate Draw.io XML from a natural language description."""
    return await diagram_service.generate_diagram(request.description)


@router.get("/state", response_model=GenerationStateResponse)
async def get_generation_state(
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> GenerationStateResponse:
    """Return the current generation state (busy flag, artifact or error)."""
    return diagram_service.get_state()
