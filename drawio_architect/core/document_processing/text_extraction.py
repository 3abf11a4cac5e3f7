"""
Document text extraction.

Normalizes uploaded documents into plain text. Each supported container
format is a TextExtractor variant exposing the same recognizes/extract
capability; TextExtractionAdapter dispatches to the first variant that
recognizes the input.

Dependencies: langchain_community.document_loaders (PDF), python-docx (DOCX)
System role: First stage of the document analysis pipeline
"""

import io
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from collections.abc import Sequence

from docx import Document as load_docx
from docx.table import Table
from langchain_community.document_loaders import PyPDFLoader

from drawio_architect.core.exceptions import ExtractionFailedError, UnsupportedFormatError
from drawio_architect.models.source_input import DocumentSource

logger = logging.getLogger(__name__)


class TextExtractor(ABC):
    """A single document format that can be recognized and decoded to text."""

    format_name: str = ""
    media_types: frozenset[str] = frozenset()
    suffixes: frozenset[str] = frozenset()

    def recognizes(self, source: DocumentSource) -> bool:
        """Classify by declared media type first, then by filename suffix."""
        media_type = (source.media_type or "").split(";")[0].strip().lower()
        if media_type in self.media_types:
            return True
        return source.suffix in self.suffixes

    def extract(self, source: DocumentSource) -> str:
        """
        Decode document bytes into plain text.

        An empty payload yields empty text; emptiness is judged downstream.

        Args:
            source: Document to decode

        Returns:
            str: Text in natural reading order

        Raises:
            ExtractionFailedError: When the container cannot be decoded
        """
        if not source.content:
            logger.warning(
                f"{__name__}:extract - Empty {self.format_name} payload "
                f"filename={source.filename}"
            )
            return ""

        try:
            return self._decode(source.content)
        except ExtractionFailedError:
            raise
        except Exception as e:
            raise ExtractionFailedError(
                f"Failed to parse {self.format_name.upper()}: {e}",
                filename=source.filename,
                file_type=self.format_name,
            ) from e

    @abstractmethod
    def _decode(self, content: bytes) -> str:
        """Format-specific decoding."""


class PdfTextExtractor(TextExtractor):
    """PDF extraction via LangChain PyPDFLoader, one line per page."""

    format_name = "pdf"
    media_types = frozenset({"application/pdf"})
    suffixes = frozenset({".pdf"})

    def _decode(self, content: bytes) -> str:
        # PyPDFLoader reads from a path, so spill the upload to a temp file
        with tempfile.NamedTemporaryFile(
            prefix="drawio_", suffix=".pdf", delete=False
        ) as handle:
            handle.write(content)
            temp_path = handle.name

        try:
            pages = PyPDFLoader(temp_path).load()
        finally:
            try:
                os.unlink(temp_path)
            except OSError as e:
                logger.warning(
                    "Failed to cleanup temp file",
                    extra={"file_path": temp_path, "error": str(e)},
                )

        logger.debug(f"{__name__}:PdfTextExtractor - Loaded {len(pages)} pages")
        return "\n".join(" ".join(page.page_content.split()) for page in pages)


class DocxTextExtractor(TextExtractor):
    """Word document extraction via python-docx, in body order."""

    format_name = "docx"
    media_types = frozenset(
        {"application/vnd.openxmlformats-officedocument.wordprocessingml.document"}
    )
    suffixes = frozenset({".docx"})

    def _decode(self, content: bytes) -> str:
        document = load_docx(io.BytesIO(content))
        lines: list[str] = []
        for block in document.iter_inner_content():
            if isinstance(block, Table):
                for row in block.rows:
                    lines.append(" ".join(cell.text for cell in row.cells))
            else:
                lines.append(block.text)
        return "\n".join(lines)


class PlainTextExtractor(TextExtractor):
    """UTF-8 text and markdown files."""

    format_name = "text"
    media_types = frozenset({"text/plain", "text/markdown"})
    suffixes = frozenset({".txt", ".md", ".markdown"})

    def _decode(self, content: bytes) -> str:
        return content.decode("utf-8-sig")


DEFAULT_EXTRACTORS: tuple[TextExtractor, ...] = (
    DocxTextExtractor(),
    PdfTextExtractor(),
    PlainTextExtractor(),
)


class TextExtractionAdapter:
    """Dispatch documents to the first extractor variant that recognizes them."""

    def __init__(self, extractors: Sequence[TextExtractor] = DEFAULT_EXTRACTORS) -> None:
        self._extractors = tuple(extractors)

    @property
    def supported_suffixes(self) -> list[str]:
        """All filename suffixes accepted by the registered variants."""
        return sorted({suffix for e in self._extractors for suffix in e.suffixes})

    def find_extractor(self, source: DocumentSource) -> TextExtractor | None:
        """Return the variant that recognizes the source, if any."""
        for extractor in self._extractors:
            if extractor.recognizes(source):
                return extractor
        return None

    def extract(self, source: DocumentSource) -> str:
        """
        Extract plain text from a document.

        Args:
            source: Uploaded document

        Returns:
            str: Extracted text (may be empty; callers reject blank text)

        Raises:
            UnsupportedFormatError: No variant recognizes the document
            ExtractionFailedError: The recognized variant failed to decode it
        """
        extractor = self.find_extractor(source)
        if extractor is None:
            logger.warning(
                f"{__name__}:extract - Unsupported document "
                f"filename={source.filename}, media_type={source.media_type}"
            )
            raise UnsupportedFormatError(
                filename=source.filename,
                media_type=source.media_type,
                supported_suffixes=self.supported_suffixes,
            )

        logger.info(
            f"{__name__}:extract - START format={extractor.format_name}, "
            f"bytes={len(source.content)}"
        )
        text = extractor.extract(source)
        logger.info(f"{__name__}:extract - END text_len={len(text)}")
        return text
