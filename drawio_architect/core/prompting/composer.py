"""Prompt composition for both generation phases.

Pure template substitution: the same input always yields the same prompt,
and nothing here touches the network or orchestrator state.

Dependencies: prompt templates
System role: Builds the prompt text sent to the completion gateway
"""

from drawio_architect.core.prompting.analysis_prompt import (
    ANALYSIS_PROMPT_TEMPLATE,
    HYBRID_ARCHITECT_PERSONA,
)
from drawio_architect.core.prompting.drawio_prompt import (
    DRAWIO_PROMPT_TEMPLATE,
    OUTPUT_CONTRACT,
    SHAPE_SELECTION_POLICY,
)


def build_analysis_prompt(document_text: str) -> str:
    """
    Build the document analysis prompt.

    Args:
        document_text: Text extracted from the uploaded document

    Returns:
        str: Prompt asking for a single descriptive paragraph
    """
    return ANALYSIS_PROMPT_TEMPLATE.format(
        persona=HYBRID_ARCHITECT_PERSONA,
        document_text=document_text,
    )


def build_artifact_prompt(user_idea: str) -> str:
    """
    Build the Draw.io XML generation prompt.

    Args:
        user_idea: Diagram description, typed by the user or derived by analysis

    Returns:
        str: Prompt demanding a bare mxGraphModel document
    """
    return DRAWIO_PROMPT_TEMPLATE.format(
        output_contract=OUTPUT_CONTRACT,
        shape_policy=SHAPE_SELECTION_POLICY,
        user_idea=user_idea,
    )
