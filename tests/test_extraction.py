import json

import pytest

from interview_assist.services.config import MESSAGES_RESPONSE_PATH, NOVA_RESPONSE_PATH
from interview_assist.services.errors import InvocationError
from interview_assist.services.extraction import extract_text, parse_response_path


def test_parse_response_path_converts_indexes():
    assert parse_response_path(NOVA_RESPONSE_PATH) == ("output", "message", "content", 0, "text")


def test_parse_response_path_rejects_empty_segments():
    with pytest.raises(ValueError):
        parse_response_path("output..text")


def test_extract_text_nova_path():
    raw = json.dumps({"output": {"message": {"content": [{"text": "Week 1: Java"}]}}})
    assert extract_text(raw, NOVA_RESPONSE_PATH) == "Week 1: Java"


def test_extract_text_messages_path():
    raw = json.dumps({"messages": [{"content": [{"text": "Hi"}]}]})
    assert extract_text(raw, MESSAGES_RESPONSE_PATH) == "Hi"


@pytest.mark.parametrize(
    "document",
    [
        {},
        {"output": None},
        {"output": {"message": {"content": []}}},
        {"output": {"message": {"content": [{"text": 7}]}}},
        {"output": {"message": "flat"}},
    ],
)
def test_extract_text_missing_path_is_lenient(document):
    assert extract_text(json.dumps(document), NOVA_RESPONSE_PATH) == ""


def test_extract_text_missing_path_strict_raises():
    with pytest.raises(InvocationError):
        extract_text(json.dumps({}), NOVA_RESPONSE_PATH, strict=True)


def test_extract_text_invalid_json_raises():
    with pytest.raises(InvocationError):
        extract_text("not json", NOVA_RESPONSE_PATH)
