"""Parse and sanitize the reasoning service's reply."""

import json
import logging
import re
from typing import Any

from news_verifier.data import VerificationResult
from news_verifier.errors import InvalidReasoningOutput

logger = logging.getLogger(__name__)

_OPENING_FENCE = re.compile(r"^```(?:json)?\s*\n?", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"\n?```\s*$")


def strip_code_fence(text: str) -> str:
    """Remove a surrounding markdown code fence (optionally tagged ``json``)."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _OPENING_FENCE.sub("", cleaned)
        cleaned = _CLOSING_FENCE.sub("", cleaned)
    return cleaned.strip()


def parse_reply(text: str) -> Any:
    """Parse the reply text as a single JSON value.

    Raises:
        InvalidReasoningOutput: If the text is not valid JSON.
    """
    try:
        return json.loads(strip_code_fence(text))
    except (ValueError, RecursionError, TypeError) as e:
        logger.error("Failed to parse AI response: %s", text)
        raise InvalidReasoningOutput() from e


def normalize_result(text: str, outlet_labels: list[str]) -> VerificationResult:
    """Turn a raw reply into a schema-complete VerificationResult.

    Args:
        text: Raw reply from the reasoning service.
        outlet_labels: Outlet prefixes expected in the reply.

    Returns:
        VerificationResult with every field present; anything missing or of
        the wrong type falls back to its default.

    Raises:
        InvalidReasoningOutput: If the reply is not parseable at all.
    """
    parsed = parse_reply(text)
    if not isinstance(parsed, dict):
        logger.warning(
            "AI returned non-object verification result, normalizing to defaults: %r", parsed
        )
        parsed = {}
    return VerificationResult.from_reply(parsed, outlet_labels)
