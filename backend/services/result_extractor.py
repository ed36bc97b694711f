"""Recover the analysis JSON object from a Gemini response envelope.

The model is asked for bare JSON but does not always comply. Parsing tries,
in order:
    1. the whole text
    2. the interior of the first ``` fence (optionally tagged json)
    3. the span from the first "{" to the last "}"
The first strategy that yields a JSON object wins.
"""

import json
import logging
import re
from typing import Callable

from models.errors import BlockedByPolicy, MalformedEnvelope, UnparseableResult
from models.responses import AnalysisResult

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)

ParseStrategy = Callable[[str], dict | None]


def _loads_object(text: str) -> dict | None:
    try:
        value = json.loads(text)
    except ValueError:
        return None
    return value if isinstance(value, dict) else None


def parse_direct(text: str) -> dict | None:
    return _loads_object(text)


def parse_fenced(text: str) -> dict | None:
    match = _FENCE_RE.search(text)
    if not match or not match.group(1):
        return None
    return _loads_object(match.group(1))


def parse_brace_span(text: str) -> dict | None:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        return None
    return _loads_object(text[start : end + 1])


STRATEGIES: tuple[ParseStrategy, ...] = (parse_direct, parse_fenced, parse_brace_span)


def extract_json(text: str) -> dict:
    """Return the first JSON object any strategy finds in ``text``."""
    if not text or not text.strip():
        raise UnparseableResult()

    for strategy in STRATEGIES:
        result = strategy(text)
        if result is not None:
            return result

    logger.warning("No JSON object found in model output (%d chars)", len(text))
    raise UnparseableResult()


def response_text(envelope: object) -> str:
    """Concatenated text of the first candidate.

    Raises BlockedByPolicy when the prompt was blocked and no candidate came
    back, MalformedEnvelope for any other unexpected shape.
    """
    content = _first_candidate_content(envelope)
    if content is None:
        block_reason = _block_reason(envelope)
        if block_reason:
            logger.warning("Gemini blocked the prompt: %s", block_reason)
            raise BlockedByPolicy()
        logger.error("Gemini response has no candidate content")
        raise MalformedEnvelope()

    parts = content.get("parts")
    if not isinstance(parts, list):
        raise MalformedEnvelope()

    texts = [p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)]
    if not texts:
        logger.error("Gemini candidate has no text parts")
        raise MalformedEnvelope()
    return "".join(texts)


def _first_candidate_content(envelope: object) -> dict | None:
    if not isinstance(envelope, dict):
        return None
    candidates = envelope.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    first = candidates[0]
    if not isinstance(first, dict):
        return None
    content = first.get("content")
    return content if isinstance(content, dict) else None


def _block_reason(envelope: object) -> str | None:
    if not isinstance(envelope, dict):
        return None
    # SDK dumps use snake_case, the raw REST envelope camelCase
    feedback = envelope.get("prompt_feedback") or envelope.get("promptFeedback")
    if not isinstance(feedback, dict):
        return None
    reason = feedback.get("block_reason") or feedback.get("blockReason")
    return str(reason) if reason else None


def extract(envelope: object) -> AnalysisResult:
    """Envelope → AnalysisResult with a guaranteed numeric score."""
    data = extract_json(response_text(envelope))
    return AnalysisResult.model_validate(data)
