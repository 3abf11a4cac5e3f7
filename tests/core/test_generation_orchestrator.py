"""
Tests for the generation orchestrator state machine.

Covers phase transitions, failure recording, single-flight admission,
retry behavior and state listeners. The completion gateway is mocked.
"""

import asyncio
from unittest.mock import MagicMock

import pytest

from drawio_architect.boundary.gemini.completion_gateway import CompletionOptions
from drawio_architect.core.exceptions import (
    EmptyExtractedTextError,
    EmptyPromptError,
    GenerationInProgressError,
    MalformedResponseError,
    MissingInputError,
    ServiceError,
    UnsupportedFormatError,
)
from drawio_architect.core.generation import GenerationOrchestrator, GenerationStatus
from drawio_architect.models.source_input import DocumentSource


class TestGenerationPhase:
    """Test description to diagram generation."""

    def test_initial_state_is_idle(self, orchestrator) -> None:
        """Should start idle with nothing recorded."""
        state = orchestrator.state

        assert state.status == GenerationStatus.IDLE
        assert state.artifact is None
        assert state.error is None
        assert not state.busy

    @pytest.mark.asyncio
    async def test_generation_reaches_ready(self, orchestrator, mock_gateway, login_flow_xml) -> None:
        """Should store the recovered XML and keep the description."""
        mock_gateway.complete.return_value = f"```xml\n{login_flow_xml}\n```"

        xml = await orchestrator.request_generation("A login flow")

        assert xml == login_flow_xml
        assert orchestrator.state.status == GenerationStatus.READY
        assert orchestrator.state.artifact == login_flow_xml
        assert orchestrator.state.description == "A login flow"
        assert orchestrator.state.error is None

    @pytest.mark.asyncio
    async def test_generation_uses_generation_model_with_low_elaboration(
        self, orchestrator, mock_gateway
    ) -> None:
        """Should request a terse answer from the generation model."""
        await orchestrator.request_generation("A login flow")

        prompt, options = mock_gateway.complete.call_args.args
        assert '"A login flow"' in prompt
        assert options == CompletionOptions(model="generation-model", low_elaboration=True)

    @pytest.mark.asyncio
    async def test_malformed_response_fails(self, orchestrator, mock_gateway) -> None:
        """Should enter FAILED when the response has no diagram."""
        mock_gateway.complete.return_value = "Sure, here's your diagram: ..."

        with pytest.raises(MalformedResponseError):
            await orchestrator.request_generation("A login flow")

        state = orchestrator.state
        assert state.status == GenerationStatus.FAILED
        assert state.artifact is None
        assert state.error_kind == "MalformedResponse"
        assert state.description == "A login flow"

    @pytest.mark.asyncio
    async def test_service_error_is_prefixed_with_phase(self, orchestrator, mock_gateway) -> None:
        """Should report which phase failed."""
        mock_gateway.complete.side_effect = ServiceError("quota exceeded", model="generation-model")

        with pytest.raises(ServiceError) as exc_info:
            await orchestrator.request_generation("A login flow")

        assert exc_info.value.message == "Failed to generate diagram: quota exceeded"
        assert orchestrator.state.status == GenerationStatus.FAILED
        assert orchestrator.state.error_message == "Failed to generate diagram: quota exceeded"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("description", ["", "   ", "\n\t"])
    async def test_blank_description_leaves_state_unchanged(
        self, orchestrator, mock_gateway, description
    ) -> None:
        """Should reject blank descriptions before any call."""
        with pytest.raises(EmptyPromptError):
            await orchestrator.request_generation(description)

        assert orchestrator.state.status == GenerationStatus.IDLE
        mock_gateway.complete.assert_not_called()

    @pytest.mark.asyncio
    async def test_new_request_clears_previous_artifact(
        self, orchestrator, mock_gateway, minimal_xml
    ) -> None:
        """Should drop the previous diagram once a new phase starts."""
        await orchestrator.request_generation("first")
        assert orchestrator.state.artifact == minimal_xml

        mock_gateway.complete.return_value = "no diagram"
        with pytest.raises(MalformedResponseError):
            await orchestrator.request_generation("second")

        assert orchestrator.state.artifact is None

    @pytest.mark.asyncio
    async def test_failed_state_accepts_new_request(self, orchestrator, mock_gateway, minimal_xml) -> None:
        """Should allow retrying after a failure."""
        mock_gateway.complete.return_value = "no diagram"
        with pytest.raises(MalformedResponseError):
            await orchestrator.request_generation("flow")

        mock_gateway.complete.return_value = minimal_xml
        assert await orchestrator.request_generation("flow") == minimal_xml
        assert orchestrator.state.status == GenerationStatus.READY


class TestAnalysisPhase:
    """Test document to description analysis."""

    @pytest.mark.asyncio
    async def test_analysis_returns_to_idle_with_description(
        self, orchestrator, mock_gateway, docx_source
    ) -> None:
        """Should trim the response and offer it as the editable description."""
        mock_gateway.complete.return_value = "  A login flowchart with a decision.  \n"

        description = await orchestrator.request_analysis(docx_source)

        assert description == "A login flowchart with a decision."
        assert orchestrator.state.status == GenerationStatus.IDLE
        assert orchestrator.state.description == description
        assert orchestrator.state.artifact is None

    @pytest.mark.asyncio
    async def test_analysis_prompt_carries_document_text(
        self, orchestrator, mock_gateway, docx_source
    ) -> None:
        """Should embed the extracted text and use the analysis model."""
        mock_gateway.complete.return_value = "description"

        await orchestrator.request_analysis(docx_source)

        prompt, options = mock_gateway.complete.call_args.args
        assert "Credentials are checked against the directory." in prompt
        assert options == CompletionOptions(model="analysis-model")

    @pytest.mark.asyncio
    async def test_analysis_clears_previous_artifact(
        self, orchestrator, mock_gateway, text_source
    ) -> None:
        """Should not keep a diagram from an earlier generation."""
        await orchestrator.request_generation("first")
        mock_gateway.complete.return_value = "description"

        await orchestrator.request_analysis(text_source)

        assert orchestrator.state.artifact is None

    @pytest.mark.asyncio
    async def test_missing_document_leaves_state_unchanged(self, orchestrator, mock_gateway) -> None:
        """Should reject a missing document before any transition."""
        with pytest.raises(MissingInputError):
            await orchestrator.request_analysis(None)

        assert orchestrator.state.status == GenerationStatus.IDLE
        mock_gateway.complete.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_document_fails_without_service_call(
        self, orchestrator, mock_gateway
    ) -> None:
        """Should fail with EmptyExtractedText and never reach the gateway."""
        with pytest.raises(EmptyExtractedTextError):
            await orchestrator.request_analysis(DocumentSource(content=b"", filename="empty.pdf"))

        assert orchestrator.state.status == GenerationStatus.FAILED
        assert orchestrator.state.error_kind == "EmptyExtractedText"
        mock_gateway.complete.assert_not_called()

    @pytest.mark.asyncio
    async def test_whitespace_only_document_fails(self, orchestrator, mock_gateway) -> None:
        """Should treat whitespace-only text as empty."""
        source = DocumentSource(content=b"  \n\t ", filename="blank.txt")

        with pytest.raises(EmptyExtractedTextError):
            await orchestrator.request_analysis(source)

        mock_gateway.complete.assert_not_called()

    @pytest.mark.asyncio
    async def test_unsupported_document_fails(self, orchestrator) -> None:
        """Should record unsupported formats as a failure."""
        source = DocumentSource(content=b"\x89PNG", filename="image.png", media_type="image/png")

        with pytest.raises(UnsupportedFormatError):
            await orchestrator.request_analysis(source)

        assert orchestrator.state.error_kind == "UnsupportedFormat"

    @pytest.mark.asyncio
    async def test_service_error_is_prefixed_with_phase(
        self, orchestrator, mock_gateway, text_source
    ) -> None:
        """Should report analysis failures with the analysis prefix."""
        mock_gateway.complete.side_effect = ServiceError("network down")

        with pytest.raises(ServiceError) as exc_info:
            await orchestrator.request_analysis(text_source)

        assert exc_info.value.message == "Failed to analyze document: network down"
        assert orchestrator.state.status == GenerationStatus.FAILED

    @pytest.mark.asyncio
    async def test_empty_model_answer_is_a_service_error(
        self, orchestrator, mock_gateway, text_source
    ) -> None:
        """Should not offer an empty description."""
        mock_gateway.complete.return_value = "   "

        with pytest.raises(ServiceError):
            await orchestrator.request_analysis(text_source)

        assert orchestrator.state.status == GenerationStatus.FAILED


class TestSingleFlight:
    """Test rejection of overlapping requests."""

    @pytest.mark.asyncio
    async def test_generation_rejected_while_analyzing(
        self, orchestrator, mock_gateway, text_source
    ) -> None:
        """Should reject a second request without touching the in-flight one."""
        release = asyncio.Event()

        async def slow_complete(prompt_text, options):
            await release.wait()
            return "A short description"

        mock_gateway.complete.side_effect = slow_complete

        analysis = asyncio.create_task(orchestrator.request_analysis(text_source))
        await asyncio.sleep(0)
        assert orchestrator.state.status == GenerationStatus.ANALYZING

        with pytest.raises(GenerationInProgressError) as exc_info:
            await orchestrator.request_generation("anything")

        assert exc_info.value.details["active_status"] == "analyzing"
        assert orchestrator.state.status == GenerationStatus.ANALYZING

        release.set()
        assert await analysis == "A short description"
        assert orchestrator.state.status == GenerationStatus.IDLE
        assert mock_gateway.complete.await_count == 1

    @pytest.mark.asyncio
    async def test_second_generation_rejected_while_generating(
        self, orchestrator, mock_gateway, minimal_xml
    ) -> None:
        """Should allow only one generation in flight."""
        release = asyncio.Event()

        async def slow_complete(prompt_text, options):
            await release.wait()
            return minimal_xml

        mock_gateway.complete.side_effect = slow_complete

        first = asyncio.create_task(orchestrator.request_generation("first"))
        await asyncio.sleep(0)

        with pytest.raises(GenerationInProgressError):
            await orchestrator.request_generation("second")

        release.set()
        assert await first == minimal_xml
        assert orchestrator.state.description == "first"

    @pytest.mark.asyncio
    async def test_cancelled_request_fails_and_frees_orchestrator(
        self, orchestrator, mock_gateway
    ) -> None:
        """Should not stay busy after the in-flight call is cancelled."""
        never = asyncio.Event()

        async def hanging_complete(prompt_text, options):
            await never.wait()

        mock_gateway.complete.side_effect = hanging_complete

        task = asyncio.create_task(orchestrator.request_generation("flow"))
        await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert orchestrator.state.status == GenerationStatus.FAILED
        assert not orchestrator.state.busy


class TestRetry:
    """Test service error retries."""

    @pytest.mark.asyncio
    async def test_service_error_retried_when_configured(self, mock_gateway, minimal_xml) -> None:
        """Should succeed on a later attempt."""
        mock_gateway.complete.side_effect = [ServiceError("busy"), minimal_xml]
        orchestrator = GenerationOrchestrator(
            gateway=mock_gateway, service_max_attempts=2, retry_wait_seconds=0
        )

        assert await orchestrator.request_generation("flow") == minimal_xml
        assert mock_gateway.complete.await_count == 2

    @pytest.mark.asyncio
    async def test_single_attempt_by_default(self, orchestrator, mock_gateway) -> None:
        """Should not retry with the default configuration."""
        mock_gateway.complete.side_effect = ServiceError("busy")

        with pytest.raises(ServiceError):
            await orchestrator.request_generation("flow")

        assert mock_gateway.complete.await_count == 1

    @pytest.mark.asyncio
    async def test_malformed_response_is_not_retried(self, mock_gateway) -> None:
        """Should only retry the service call, not response recovery."""
        mock_gateway.complete.return_value = "no diagram"
        orchestrator = GenerationOrchestrator(
            gateway=mock_gateway, service_max_attempts=3, retry_wait_seconds=0
        )

        with pytest.raises(MalformedResponseError):
            await orchestrator.request_generation("flow")

        assert mock_gateway.complete.await_count == 1


class TestListeners:
    """Test state change notifications."""

    @pytest.mark.asyncio
    async def test_listener_sees_every_transition(self, orchestrator) -> None:
        """Should notify busy and terminal states in order."""
        seen = []
        orchestrator.subscribe(lambda state: seen.append(state.status))

        await orchestrator.request_generation("flow")

        assert seen == [GenerationStatus.GENERATING, GenerationStatus.READY]

    @pytest.mark.asyncio
    async def test_unsubscribe(self, orchestrator) -> None:
        """Should stop notifying after unsubscribe."""
        seen = []
        unsubscribe = orchestrator.subscribe(lambda state: seen.append(state.status))
        unsubscribe()

        await orchestrator.request_generation("flow")

        assert seen == []

    @pytest.mark.asyncio
    async def test_failing_listener_does_not_break_transitions(self, orchestrator) -> None:
        """Should keep running when a listener raises."""
        broken = MagicMock(side_effect=RuntimeError("boom"))
        seen = []
        orchestrator.subscribe(broken)
        orchestrator.subscribe(lambda state: seen.append(state.status))

        await orchestrator.request_generation("flow")

        assert orchestrator.state.status == GenerationStatus.READY
        assert broken.call_count == 2
        assert seen == [GenerationStatus.GENERATING, GenerationStatus.READY]
