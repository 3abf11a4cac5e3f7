"""
Source input domain models.

A diagram request starts either from free text or from an uploaded
document that still needs text extraction.

Dependencies: pydantic
System role: Pipeline input contracts
"""

from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class TextSource(BaseModel):
    """Free-text diagram description supplied directly by the user."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    content: str = Field(description="Diagram description or idea")


class DocumentSource(BaseModel):
    """Uploaded document awaiting text extraction."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["document"] = "document"
    content: bytes = Field(description="Raw document bytes")
    filename: str | None = Field(default=None, description="Original filename")
    media_type: str | None = Field(
        default=None,
        description="Declared MIME type (e.g. application/pdf)",
    )

    @property
    def suffix(self) -> str:
        """Lower-cased filename extension including the dot, or empty string."""
        if not self.filename:
            return ""
        return Path(self.filename).suffix.lower()

    @classmethod
    def from_path(cls, path: str | Path, media_type: str | None = None) -> "DocumentSource":
        """Load a document source from a file on disk."""
        file_path = Path(path)
        return cls(
            content=file_path.read_bytes(),
            filename=file_path.name,
            media_type=media_type,
        )


SourceInput = Annotated[Union[TextSource, DocumentSource], Field(discriminator="kind")]
