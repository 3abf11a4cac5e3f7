"""
Prompt templates and composition.

Exports: build_analysis_prompt, build_artifact_prompt, XML markers
"""

from drawio_architect.core.prompting.composer import build_analysis_prompt, build_artifact_prompt
from drawio_architect.core.prompting.drawio_prompt import XML_END_MARKER, XML_START_MARKER

__all__ = [
    "XML_END_MARKER",
    "XML_START_MARKER",
    "build_analysis_prompt",
    "build_artifact_prompt",
]
