"""Google Gemini boundary."""

from drawio_architect.boundary.gemini.completion_gateway import (
    CompletionGateway,
    CompletionOptions,
    GeminiCompletionGateway,
)

__all__ = ["CompletionGateway", "CompletionOptions", "GeminiCompletionGateway"]
