"""
Exception hierarchy for Draw.io Architect.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DiagramArchitectError(Exception):
    """Base exception for all Draw.io Architect errors."""

    kind: str = "DiagramArchitectError"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(DiagramArchitectError):
    """Raised at startup when required configuration is missing or invalid."""

    kind = "Configuration"


# ---------------------------------------------------------------------------
# Pre-flight validation
# ---------------------------------------------------------------------------


class MissingInputError(DiagramArchitectError):
    """Raised when an analysis is requested without a document."""

    kind = "MissingInput"

    def __init__(
        self,
        message: str = "Please select a file to analyze.",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)


class EmptyPromptError(DiagramArchitectError):
    """Raised when a generation is requested with a blank description."""

    kind = "EmptyPrompt"

    def __init__(
        self,
        message: str = "Please enter or generate a description for the diagram.",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)


def format_byte_size(size: int) -> str:
    """Render a byte count as MB, KB or bytes, whichever is whole."""
    if size >= 1024 * 1024:
        return f"{size / (1024 * 1024):g}MB"
    if size >= 1024:
        return f"{size / 1024:g}KB"
    return f"{size} bytes"


class UploadTooLargeError(DiagramArchitectError):
    """Raised when an uploaded document exceeds the configured size limit."""

    kind = "UploadTooLarge"

    def __init__(
        self,
        max_bytes: int,
        size: int | None = None,
        filename: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize upload size rejection.

        Args:
            max_bytes: Configured upload limit
            size: Size of the rejected upload
            filename: Name of the rejected upload
            details: Additional context
        """
        details = details or {}
        details["max_bytes"] = max_bytes
        if size is not None:
            details["size"] = size
        if filename:
            details["filename"] = filename
        super().__init__(
            f"File too large. Maximum size is {format_byte_size(max_bytes)}.",
            details,
        )


class GenerationInProgressError(DiagramArchitectError):
    """Raised when a request arrives while another phase is still running."""

    kind = "GenerationInProgress"

    def __init__(self, active_status: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize single-flight rejection.

        Args:
            active_status: Status of the phase currently in flight
            details: Additional context
        """
        details = details or {}
        details["active_status"] = active_status
        super().__init__(
            f"A request is already in progress ({active_status}); try again when it finishes.",
            details,
        )


# ---------------------------------------------------------------------------
# Text extraction
# ---------------------------------------------------------------------------


class DocumentExtractionError(DiagramArchitectError):
    """Base exception for document text extraction errors."""

    def __init__(
        self,
        message: str,
        filename: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document extraction error.

        Args:
            message: Error message
            filename: Name of the document that failed
            details: Additional context
        """
        details = details or {}
        if filename:
            details["filename"] = filename
        super().__init__(message, details)


class UnsupportedFormatError(DocumentExtractionError):
    """Raised when no extractor recognizes the document format."""

    kind = "UnsupportedFormat"

    def __init__(
        self,
        filename: str | None = None,
        media_type: str | None = None,
        supported_suffixes: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if media_type:
            details["media_type"] = media_type
        message = "Unsupported file type."
        if supported_suffixes:
            *head, last = supported_suffixes
            accepted = f"{', '.join(head)} or {last}" if head else last
            message = f"{message} Please upload a {accepted} file."
        super().__init__(
            message,
            filename,
            details,
        )


class ExtractionFailedError(DocumentExtractionError):
    """Raised when a recognized document cannot be decoded."""

    kind = "ExtractionFailed"

    def __init__(
        self,
        message: str,
        filename: str | None = None,
        file_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if file_type:
            details["file_type"] = file_type
        super().__init__(message, filename, details)


class EmptyExtractedTextError(DocumentExtractionError):
    """Raised when a document yields no usable text."""

    kind = "EmptyExtractedText"

    def __init__(
        self,
        filename: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            "Could not extract text from the document or the document is empty.",
            filename,
            details,
        )


# ---------------------------------------------------------------------------
# Completion service and response recovery
# ---------------------------------------------------------------------------


class ServiceError(DiagramArchitectError):
    """Raised when the completion service call fails."""

    kind = "ServiceError"

    def __init__(
        self,
        message: str,
        model: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize service error.

        Args:
            message: Human-readable cause
            model: Model the failing request targeted
            details: Additional context
        """
        details = details or {}
        if model:
            details["model"] = model
        super().__init__(message, details)


class MalformedResponseError(DiagramArchitectError):
    """Raised when no delimited diagram can be recovered from a response."""

    kind = "MalformedResponse"

    def __init__(
        self,
        message: str = (
            "The AI returned an invalid format. "
            "Please try rephrasing your request or be more specific."
        ),
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
