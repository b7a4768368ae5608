import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.core.errors import InvalidAIResponseError  # noqa: E402
from app.orchestrator.parsing import extract_json_object, find_json_span, normalize_category  # noqa: E402


def test_extracts_object_wrapped_in_prose():
    reply = 'Sure, here it is: {"isSmart": true, "improvedGoal": "Run 10k"} Good luck!'
    assert extract_json_object(reply) == {"isSmart": True, "improvedGoal": "Run 10k"}


def test_extracts_object_from_code_fence():
    reply = '```json\n{\n  "isSmart": false,\n  "analysis": {"specific": {"pass": false}}\n}\n```'
    result = extract_json_object(reply)
    assert result["isSmart"] is False
    assert result["analysis"]["specific"] == {"pass": False}


def test_span_is_greedy_across_nested_objects():
    reply = 'x {"a": {"b": 1}, "c": [{"d": 2}]} y'
    assert find_json_span(reply) == '{"a": {"b": 1}, "c": [{"d": 2}]}'


def test_multiple_objects_are_not_parseable():
    reply = 'First {"a": 1} and then {"b": 2}'
    assert find_json_span(reply) == '{"a": 1} and then {"b": 2}'
    with pytest.raises(InvalidAIResponseError):
        extract_json_object(reply)


@pytest.mark.parametrize("reply", ["", None, "No JSON here", "only a closing } brace", "[1, 2, 3]"])
def test_missing_span_raises(reply):
    with pytest.raises(InvalidAIResponseError) as exc_info:
        extract_json_object(reply)
    assert exc_info.value.message == "Invalid AI response"
    assert exc_info.value.status_code == 500


def test_malformed_span_raises():
    with pytest.raises(InvalidAIResponseError):
        extract_json_object('{"isSmart": true,, }')


def test_normalize_category():
    assert normalize_category("health") == "health"
    assert normalize_category("  Money_Career\n") == "money_career"
    assert normalize_category("banana") == "other"
    assert normalize_category("") == "other"
    assert normalize_category(None) == "other"
    assert normalize_category("health.") == "other"
