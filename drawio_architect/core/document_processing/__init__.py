"""
Document processing module.

Exports: TextExtractionAdapter and its format variants.
"""

from drawio_architect.core.document_processing.text_extraction import (
    DEFAULT_EXTRACTORS,
    DocxTextExtractor,
    PdfTextExtractor,
    PlainTextExtractor,
    TextExtractionAdapter,
    TextExtractor,
)

__all__ = [
    "DEFAULT_EXTRACTORS",
    "DocxTextExtractor",
    "PdfTextExtractor",
    "PlainTextExtractor",
    "TextExtractionAdapter",
    "TextExtractor",
]
