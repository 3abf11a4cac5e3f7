"""Generation orchestrator.

Sequences the two Gemini phases behind a single-flight state machine:

    analyze:  document -> extract text -> analysis prompt -> Gemini -> description
    generate: description -> Draw.io prompt -> Gemini -> recovered XML

    IDLE/READY/FAILED --analyze-->  ANALYZING --ok--> IDLE(description)
                                              --err--> FAILED(error)
    IDLE/READY/FAILED --generate--> GENERATING --ok--> READY(xml)
                                               --err--> FAILED(error)

Only one phase may be in flight. A request arriving while ANALYZING or
GENERATING is rejected before any collaborator runs. The Gemini call is the
only suspend point of each phase, so admission (check + transition) happens
synchronously and cannot interleave with another request on the event loop.

Dependencies: tenacity, gateway, prompting, text extraction, response extractor
System role: Main orchestrator for diagram generation
"""

import asyncio
import logging
from collections.abc import Callable

from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from drawio_architect.boundary.gemini.completion_gateway import (
    CompletionGateway,
    CompletionOptions,
)
from drawio_architect.core.document_processing.text_extraction import TextExtractionAdapter
from drawio_architect.core.exceptions import (
    EmptyExtractedTextError,
    EmptyPromptError,
    GenerationInProgressError,
    MissingInputError,
    ServiceError,
)
from drawio_architect.core.generation.state import GenerationState
from drawio_architect.core.prompting.composer import build_analysis_prompt, build_artifact_prompt
from drawio_architect.core.response_extractor import extract_drawio_xml
from drawio_architect.models.source_input import DocumentSource
from drawio_architect.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

StateListener = Callable[[GenerationState], None]


class GenerationOrchestrator:
    """Single-flight state machine over the analyze and generate phases."""

    def __init__(
        self,
        gateway: CompletionGateway,
        text_extractor: TextExtractionAdapter | None = None,
        analysis_model: str = "gemini-2.5-flash",
        generation_model: str = "gemini-2.5-flash",
        service_max_attempts: int = 1,
        retry_wait_seconds: float = 2.0,
    ) -> None:
        """Initialize orchestrator with its collaborators.

        Args:
            gateway: Completion service boundary
            text_extractor: Document text adapter (default PDF/DOCX/text variants)
            analysis_model: Model for the analysis phase
            generation_model: Model for the XML generation phase
            service_max_attempts: Attempts per Gemini call on ServiceError
            retry_wait_seconds: Initial exponential backoff between attempts
        """
        self._gateway = gateway
        self._text_extractor = text_extractor or TextExtractionAdapter()
        self._analysis_model = analysis_model
        self._generation_model = generation_model
        self._service_max_attempts = max(1, service_max_attempts)
        self._retry_wait_seconds = retry_wait_seconds
        self._state = GenerationState.idle()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> GenerationState:
        """Current state snapshot."""
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a callback invoked with every new state.

        Args:
            listener: Callable receiving the new GenerationState

        Returns:
            Callable[[], None]: Unsubscribe function
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def request_analysis(self, document: DocumentSource | None) -> str:
        """
        Analyze a document into an editable diagram description.

        Args:
            document: Uploaded document

        Returns:
            str: Derived description (also kept on the IDLE state)

        Raises:
            MissingInputError: No document supplied (state unchanged)
            GenerationInProgressError: Another phase is in flight (state unchanged)
            UnsupportedFormatError, ExtractionFailedError, EmptyExtractedTextError,
            ServiceError: After transitioning to FAILED
        """
        if document is None:
            raise MissingInputError()

        self._admit(GenerationState.analyzing())
        logger.info(
            f"{__name__}:request_analysis - START filename={document.filename}, "
            f"bytes={len(document.content)}"
        )

        try:
            document_text = self._text_extractor.extract(document)
            if not document_text.strip():
                raise EmptyExtractedTextError(filename=document.filename)

            prompt = build_analysis_prompt(document_text)
            raw = await self._complete(prompt, CompletionOptions(model=self._analysis_model))

            description = raw.strip()
            if not description:
                raise ServiceError(
                    "the model returned an empty response", model=self._analysis_model
                )
        except ServiceError as e:
            error = _with_phase(e, "Failed to analyze document")
            self._record_failure(error)
            raise error from e
        except asyncio.CancelledError:
            self._record_failure(ServiceError("Failed to analyze document: request was cancelled"))
            raise
        except Exception as e:
            self._record_failure(e)
            raise

        self._transition(GenerationState.idle(description=description))
        logger.info(f"{__name__}:request_analysis - END description_len={len(description)}")
        return description

    async def request_generation(self, description: str) -> str:
        """
        Generate Draw.io XML from a description.

        Args:
            description: Natural language description, embedded verbatim

        Returns:
            str: Recovered mxGraphModel XML (also kept on the READY state)

        Raises:
            EmptyPromptError: Blank description (state unchanged)
            GenerationInProgressError: Another phase is in flight (state unchanged)
            ServiceError, MalformedResponseError: After transitioning to FAILED
        """
        if not description or not description.strip():
            raise EmptyPromptError()

        self._admit(GenerationState.generating(description))
        logger.info(f"{__name__}:request_generation - START description_len={len(description)}")

        try:
            prompt = build_artifact_prompt(description)
            raw = await self._complete(
                prompt,
                CompletionOptions(model=self._generation_model, low_elaboration=True),
            )
            artifact = extract_drawio_xml(raw)
        except ServiceError as e:
            error = _with_phase(e, "Failed to generate diagram")
            self._record_failure(error, description)
            raise error from e
        except asyncio.CancelledError:
            self._record_failure(
                ServiceError("Failed to generate diagram: request was cancelled"), description
            )
            raise
        except Exception as e:
            self._record_failure(e, description)
            raise

        self._transition(GenerationState.ready(artifact, description))
        logger.info(f"{__name__}:request_generation - END xml_len={len(artifact)}")
        return artifact

    def _admit(self, next_state: GenerationState) -> None:
        """Reject when busy, otherwise enter the busy state. Must not await."""
        current = self._state
        if current.busy:
            logger.warning(
                f"{__name__}:_admit - Rejected {next_state.status.value} "
                f"while {current.status.value}"
            )
            raise GenerationInProgressError(current.status.value)
        self._transition(next_state)

    def _record_failure(self, error: Exception, description: str | None = None) -> None:
        """Enter FAILED with the given cause."""
        log_exception_with_context(
            logger,
            f"{__name__}:_record_failure - FAILED {type(error).__name__}: {error}",
            error,
            phase=self._state.status.value,
            description=description,
        )
        self._transition(GenerationState.failed(error, description))

    async def _complete(self, prompt: str, options: CompletionOptions) -> str:
        """Call the gateway, retrying ServiceError up to the configured attempts."""
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._service_max_attempts),
            wait=wait_exponential(multiplier=self._retry_wait_seconds, max=30),
            retry=retry_if_exception_type(ServiceError),
            reraise=True,
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:_complete - Retry {retry_state.attempt_number}/"
                f"{self._service_max_attempts} after service error"
            ),
        )
        async for attempt in retrying:
            with attempt:
                return await self._gateway.complete(prompt, options)
        raise ServiceError("Completion retries exhausted", model=options.model)

    def _transition(self, new_state: GenerationState) -> None:
        self._state = new_state
        logger.debug(f"{__name__}:_transition - status={new_state.status.value}")
        for listener in list(self._listeners):
            try:
                listener(new_state)
            except Exception:
                logger.exception(f"{__name__}:_transition - State listener failed")


def _with_phase(error: ServiceError, phase: str) -> ServiceError:
    """Prefix a gateway error with the phase that was running."""
    return ServiceError(f"{phase}: {error.message}", details=dict(error.details))
