"""
Parsing of the model's name list.

The model is asked for a bare JSON array but often wraps it in a fenced
code block, so fences are stripped before parsing.
"""

import json
import re
from typing import Any

from startup_namer.core.exceptions import GenerationError
from startup_namer.core.logging import get_logger
from startup_namer.models import DOMAIN_SUFFIX, NameCandidate

logger = get_logger(__name__)

# ```json / ```JSON / ``` on the opening line, ``` on the closing one
_OPENING_FENCE_RE = re.compile(r"^```[\w+-]*[ \t]*\n?")
_CLOSING_FENCE_RE = re.compile(r"\n?[ \t]*```$")


def strip_code_fences(text: str) -> str:
    """Remove a surrounding fenced-code block, if any."""
    cleaned = text.strip()
    cleaned = _OPENING_FENCE_RE.sub("", cleaned, count=1)
    cleaned = _CLOSING_FENCE_RE.sub("", cleaned, count=1)
    return cleaned.strip()


def _to_candidate(item: Any) -> NameCandidate | None:
    if not isinstance(item, dict):
        return None
    name = item.get("name")
    if not isinstance(name, str):
        return None
    candidate = NameCandidate(name=name)
    # a blank name would derive the bare suffix as its domain
    if candidate.domain == DOMAIN_SUFFIX:
        return None
    return candidate


def parse_name_candidates(raw_text: str) -> list[NameCandidate]:
    """
    Parse raw model output into name candidates.

    Args:
        raw_text: Text returned by the model

    Returns:
        Candidates in the order the model listed them; elements without a
        text ``name`` are dropped

    Raises:
        GenerationError: If the text is not a JSON array
    """
    cleaned = strip_code_fences(raw_text or "")

    try:
        data = json.loads(cleaned)
    except ValueError as e:
        logger.error(f"Could not parse generated names: {cleaned[:200]!r}")
        raise GenerationError("generated content malformed") from e

    if not isinstance(data, list):
        logger.error(f"Generated content is not an array: {type(data).__name__}")
        raise GenerationError("generated content malformed")

    candidates = []
    for item in data:
        candidate = _to_candidate(item)
        if candidate is None:
            logger.warning(f"Invalid name: {item!r}")
            continue
        candidates.append(candidate)

    return candidates
