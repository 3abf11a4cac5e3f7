"""
Completion gateway for Google Gemini.

Sends a prompt to Gemini and returns the raw response text. The gateway
knows nothing about diagrams; callers decide what the text means.

Dependencies: google.genai, asyncio
System role: External text generation boundary
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from google import genai
from google.genai import types

from drawio_architect.core.exceptions import ConfigurationError, ServiceError
from drawio_architect.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CompletionOptions:
    """Per-call completion options.

    Attributes:
        model: Model identifier, e.g. gemini-2.5-flash
        low_elaboration: Disable extended reasoning for a faster, terser answer
    """

    model: str
    low_elaboration: bool = False


class CompletionGateway(Protocol):
    """Protocol for prompt-in, text-out completion services."""

    async def complete(self, prompt_text: str, options: CompletionOptions) -> str:
        """Return the raw response text or raise ServiceError."""
        ...


class GeminiCompletionGateway:
    """CompletionGateway backed by the google-genai SDK."""

    def __init__(
        self,
        api_key: str,
        timeout_seconds: float | None = None,
        client: "genai.Client | None" = None,
    ) -> None:
        """Initialize the gateway with an injected credential.

        Args:
            api_key: Google API key for Gemini access
            timeout_seconds: Optional per-request timeout
            client: Pre-built client (tests); built from api_key when omitted

        Raises:
            ConfigurationError: If api_key is empty
        """
        if not api_key:
            raise ConfigurationError(
                "API_KEY environment variable not set.",
                details={"setting": "GEMINI_API_KEY"},
            )

        if client is None:
            http_options = None
            if timeout_seconds:
                http_options = types.HttpOptions(timeout=int(timeout_seconds * 1000))
            client = genai.Client(api_key=api_key, http_options=http_options)

        self._client = client
        logger.info(f"{__name__}:__init__ - Gemini client initialized")

    async def complete(self, prompt_text: str, options: CompletionOptions) -> str:
        """
        Send a prompt to Gemini.

        Args:
            prompt_text: Fully composed prompt, sent verbatim
            options: Model selection and elaboration mode

        Returns:
            str: Raw response text (empty string when the model returned none)

        Raises:
            ServiceError: On any SDK, transport or quota failure
        """
        config = None
        if options.low_elaboration:
            config = types.GenerateContentConfig(
                thinking_config=types.ThinkingConfig(thinking_budget=0),
            )

        logger.info(
            f"{__name__}:complete - START model={options.model}, "
            f"prompt_len={len(prompt_text)}, low_elaboration={options.low_elaboration}"
        )
        try:
            response = await asyncio.to_thread(
                self._client.models.generate_content,
                model=options.model,
                contents=prompt_text,
                config=config,
            )
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:complete - FAILED at Gemini API call - {type(e).__name__}: {e}",
                e,
                model=options.model,
            )
            raise ServiceError(
                str(e) or type(e).__name__,
                model=options.model,
                details={"error_type": type(e).__name__},
            ) from e

        text = response.text or ""
        logger.info(f"{__name__}:complete - END response_len={len(text)}")
        return text
