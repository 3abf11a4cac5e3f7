"""
Exception handlers for the HTTP API.

Maps the domain exception hierarchy onto status codes and a stable
{"detail", "kind"} body.

Dependencies: fastapi, drawio_architect.core.exceptions
System role: Error translation between core and HTTP
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from drawio_architect.core.exceptions import (
    DiagramArchitectError,
    EmptyExtractedTextError,
    EmptyPromptError,
    ExtractionFailedError,
    GenerationInProgressError,
    MalformedResponseError,
    MissingInputError,
    ServiceError,
    UnsupportedFormatError,
    UploadTooLargeError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[DiagramArchitectError], int] = {
    MissingInputError: 400,
    EmptyPromptError: 400,
    EmptyExtractedTextError: 400,
    ExtractionFailedError: 400,
    UnsupportedFormatError: 415,
    UploadTooLargeError: 413,
    GenerationInProgressError: 409,
    ServiceError: 502,
    MalformedResponseError: 502,
}


def status_for(error: DiagramArchitectError) -> int:
    """Resolve the HTTP status for a domain error (500 when unmapped)."""
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return status_code
    return 500


async def diagram_error_handler(request: Request, exc: DiagramArchitectError) -> JSONResponse:
    """Render a domain error as JSON."""
    status_code = status_for(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log(
        f"{__name__}:diagram_error_handler - {request.method} {request.url.path} "
        f"{exc.kind}: {exc}"
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "kind": exc.kind},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install domain exception handlers on the application."""
    app.add_exception_handler(DiagramArchitectError, diagram_error_handler)
