"""
Draw.io XML recovery from free-form model responses.

Models are told to answer with bare XML but routinely wrap it in markdown
fences or chat around it. Recovery runs in two stages: unwrap a fenced
block when one exists, then bracket the working text between the first
opening tag and the last closing tag. Anything that fails either stage is
rejected outright; no partial diagram is ever returned.

Dependencies: re (stdlib)
System role: Response validation between the gateway and the orchestrator
"""

import logging
import re

from drawio_architect.core.exceptions import MalformedResponseError
from drawio_architect.core.prompting.drawio_prompt import XML_END_MARKER, XML_START_MARKER
from drawio_architect.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)

# Opening fence with an optional language hint, then the shortest body up to
# the next fence.
_FENCE_PATTERN = re.compile(r"```[A-Za-z0-9_+.-]*[ \t]*\r?\n?(.*?)```", re.DOTALL)


def unwrap_fence(raw: str) -> str:
    """
    Return the body of the first fenced block, or the input when unfenced.

    Args:
        raw: Raw model response

    Returns:
        str: Stripped working text
    """
    text = raw.strip()
    match = _FENCE_PATTERN.search(text)
    if match and match.group(1):
        return match.group(1).strip()
    return text


def extract_drawio_xml(raw: str) -> str:
    """
    Recover the mxGraphModel document embedded in a model response.

    Args:
        raw: Raw response text from the completion gateway

    Returns:
        str: Slice starting with ``<mxGraphModel`` and ending with
            ``</mxGraphModel>``

    Raises:
        MalformedResponseError: Either marker is missing, or the closing
            marker does not follow the opening one
    """
    text = unwrap_fence(raw or "")

    start_index = text.find(XML_START_MARKER)
    end_index = text.rfind(XML_END_MARKER)

    if start_index != -1 and end_index != -1 and start_index < end_index:
        xml_text = text[start_index : end_index + len(XML_END_MARKER)]
        if xml_text.startswith(XML_START_MARKER) and xml_text.endswith(XML_END_MARKER):
            logger.debug(f"{__name__}:extract_drawio_xml - Recovered xml_len={len(xml_text)}")
            return xml_text

    logger.warning(
        f"{__name__}:extract_drawio_xml - No delimited diagram "
        f"start_index={start_index}, end_index={end_index}, "
        f"response={safe_log_value(raw, max_length=200)}"
    )
    raise MalformedResponseError(
        details={"start_index": start_index, "end_index": end_index}
    )
