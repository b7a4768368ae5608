import json
import re
from typing import Any, Dict, Optional

from ..core.errors import InvalidAIResponseError
from ..schemas.goal import FALLBACK_CATEGORY, GOAL_CATEGORIES

# Greedy: first "{" through the last "}" in the reply, across newlines.
_JSON_SPAN = re.compile(r"\{[\s\S]*\}")


def find_json_span(text: Optional[str]) -> Optional[str]:
    if not text:
        return None
    match = _JSON_SPAN.search(text)
    return match.group(0) if match else None


def extract_json_object(text: Optional[str]) -> Dict[str, Any]:
    """Parse the JSON object embedded in free-form model output.

    Prose before the first ``{`` and after the last ``}`` is ignored. Two
    separate objects in one reply produce a span that is not valid JSON and
    fail like a missing span.
    """
    span = find_json_span(text)
    if span is None:
        raise InvalidAIResponseError("Invalid AI response")
    try:
        return json.loads(span)
    except json.JSONDecodeError as exc:
        raise InvalidAIResponseError("Invalid AI response") from exc


def normalize_category(text: Optional[str]) -> str:
    token = (text or "").strip().lower()
    return token if token in GOAL_CATEGORIES else FALLBACK_CATEGORY
