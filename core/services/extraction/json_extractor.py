"""Locate and parse the JSON answer embedded in free-form model output.

Model replies usually look like an explanation followed by the requested
object and a trail of search citation markers (``[^1^]``).  The locator below
is a heuristic, not a JSON parser: it returns the first balanced ``{...}``
span and leaves validation to :func:`parse_structured_answer`.  When a reply
contains several objects the first one wins. Each unclosed ``{`` restarts the
scan from the next brace, so a reply full of stray opening braces costs
quadratic time; model replies are short enough for this not to matter.
"""
import json
import re
from typing import Optional

from pydantic import ValidationError

from core.models.answer import StructuredAnswer
from core.services.errors.exceptions import MalformedAnswerError
from core.utils.logger import logger

CITATION_MARKER_PATTERN = re.compile(r'\[\^\d+\^\]')


def strip_citation_markers(text: str) -> str:
    """Remove search footnote markers such as ``[^3^]``."""
    return CITATION_MARKER_PATTERN.sub('', text)


def _find_balanced_object(text: str, start: int) -> Optional[int]:
    """Return the index just past the brace closing the object opened at ``start``."""
    depth = 0
    in_string = False
    escaped = False

    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == '\\':
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == '{':
            depth += 1
        elif char == '}':
            depth -= 1
            if depth == 0:
                return index + 1

    return None


def extract_json_string(text: Optional[str]) -> Optional[str]:
    """
    Extract the first JSON object embedded in a model reply.

    Args:
        text: Raw model reply

    Returns:
        The object's text exactly as it appears (citation markers removed),
        or None if the reply holds no balanced ``{...}`` span
    """
    if not text:
        logger.warning("No JSON object found: empty model reply")
        return None

    cleaned = strip_citation_markers(text)

    start = cleaned.find('{')
    while start != -1:
        end = _find_balanced_object(cleaned, start)
        if end is not None:
            return cleaned[start:end]
        # Unclosed brace; try the next opening brace
        start = cleaned.find('{', start + 1)

    logger.warning(f"No JSON object found in model reply: {cleaned[:200]}")
    return None


def parse_structured_answer(json_string: str) -> StructuredAnswer:
    """
    Parse an extracted object into a StructuredAnswer.

    Raises:
        MalformedAnswerError: if the text is not valid JSON or lacks one of
            answer / supporting_text / source
    """
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        raise MalformedAnswerError(f"Extracted answer is not valid JSON: {str(e)}") from e

    if not isinstance(data, dict):
        raise MalformedAnswerError(f"Extracted answer is not a JSON object: {type(data).__name__}")

    try:
        return StructuredAnswer.model_validate(data)
    except ValidationError as e:
        raise MalformedAnswerError(f"Extracted answer has the wrong shape: {str(e)}") from e
