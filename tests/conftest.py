"""
Shared test fixtures and configuration for entire test suite.

Provides: mocked completion gateway, orchestrator wiring, sample documents
Dependencies: pytest, unittest.mock, python-docx
System role: Test infrastructure and fixture management
"""

import io
import logging
from unittest.mock import AsyncMock

import pytest
from docx import Document

from drawio_architect.core.generation.orchestrator import GenerationOrchestrator
from drawio_architect.models.source_input import DocumentSource

MINIMAL_XML = (
    '<mxGraphModel><root><mxCell id="0"/><mxCell id="1" parent="0"/></root></mxGraphModel>'
)

LOGIN_FLOW_XML = (
    '<mxGraphModel dx="1200" dy="800"><root>'
    '<mxCell id="0"/><mxCell id="1" parent="0"/>'
    '<mxCell id="2" value="Start" style="shape=ellipse;rounded=1;" vertex="1" parent="1">'
    '<mxGeometry x="100" y="40" width="120" height="60" as="geometry"/></mxCell>'
    '<mxCell id="3" value="Check" style="shape=rhombus;" vertex="1" parent="1">'
    '<mxGeometry x="100" y="160" width="120" height="80" as="geometry"/></mxCell>'
    '<mxCell id="4" edge="1" source="2" target="3" parent="1">'
    '<mxGeometry relative="1" as="geometry"/></mxCell>'
    "</root></mxGraphModel>"
)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo configure_logging() calls made by a test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def mock_gateway() -> AsyncMock:
    """
    Create mock CompletionGateway.

    Returns:
        AsyncMock: Gateway whose complete() returns a minimal diagram
    """
    gateway = AsyncMock()
    gateway.complete = AsyncMock(return_value=MINIMAL_XML)
    return gateway


@pytest.fixture
def orchestrator(mock_gateway: AsyncMock) -> GenerationOrchestrator:
    """Provide orchestrator wired to the mock gateway with no retries."""
    return GenerationOrchestrator(
        gateway=mock_gateway,
        analysis_model="analysis-model",
        generation_model="generation-model",
        service_max_attempts=1,
        retry_wait_seconds=0,
    )


def build_docx_bytes(*paragraphs: str) -> bytes:
    """Build an in-memory .docx containing the given paragraphs."""
    document = Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def docx_source() -> DocumentSource:
    """Provide a small Word document describing a login process."""
    return DocumentSource(
        content=build_docx_bytes(
            "Users open the login page.",
            "Credentials are checked against the directory.",
        ),
        filename="login.docx",
        media_type="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    )


@pytest.fixture
def text_source() -> DocumentSource:
    """Provide a plain text document."""
    return DocumentSource(
        content=b"Orders flow from the web shop to the warehouse.",
        filename="orders.txt",
        media_type="text/plain",
    )


@pytest.fixture
def minimal_xml() -> str:
    """Smallest valid diagram: only the two base cells."""
    return MINIMAL_XML


@pytest.fixture
def login_flow_xml() -> str:
    """Diagram with attributes on the root, two nodes and one edge."""
    return LOGIN_FLOW_XML


@pytest.fixture
def docx_factory():
    """Provide the in-memory .docx builder."""
    return build_docx_bytes
