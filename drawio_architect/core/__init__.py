"""
Core business logic module.

Contains the exception hierarchy, text extraction, prompt composition,
response recovery and the generation state machine. Only the exception
hierarchy is re-exported here; boundary adapters import it, so the
package root stays free of orchestrator imports.
"""

from drawio_architect.core.exceptions import (
    ConfigurationError,
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

__all__ = [
    "ConfigurationError",
    "DiagramArchitectError",
    "EmptyExtractedTextError",
    "EmptyPromptError",
    "ExtractionFailedError",
    "GenerationInProgressError",
    "MalformedResponseError",
    "MissingInputError",
    "ServiceError",
    "UnsupportedFormatError",
    "UploadTooLargeError",
]
