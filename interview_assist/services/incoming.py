# -*- coding: utf-8 -*-
"""
Normalizes Lambda events into a request method and a validated prompt.

Two event shapes carry the prompt:
1) API Gateway proxy / Function URL: {"httpMethod": "POST", "body": "{\"prompt\": \"...\"}"}
2) Direct invoke / console test: {"prompt": "..."}
"""
from __future__ import annotations

import base64
import binascii
import json
from typing import Any, Mapping, Optional

from interview_assist.services.errors import ValidationError

PREFLIGHT_METHOD = "OPTIONS"


def request_method(event: Mapping[str, Any]) -> Optional[str]:
    """Return the upper-cased HTTP method (REST or HTTP API event), or None for direct invokes."""
    if not isinstance(event, Mapping):
        raise ValidationError("Request event must be a JSON object")
    method = event.get("httpMethod")
    if not method:
        http = (event.get("requestContext") or {}).get("http") or {}
        method = http.get("method")
    if not method:
        return None
    return str(method).upper()


def is_preflight(event: Mapping[str, Any]) -> bool:
    return request_method(event) == PREFLIGHT_METHOD


def _decode_body(event: Mapping[str, Any]) -> Mapping[str, Any]:
    body = event["body"]
    if isinstance(body, Mapping):
        return body
    if isinstance(body, bytes):
        body = body.decode("utf-8")
    if event.get("isBase64Encoded"):
        try:
            body = base64.b64decode(body).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise ValidationError(f"Request body is not valid base64: {exc}") from exc
    try:
        parsed = json.loads(body)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Request body is not valid JSON: {exc}") from exc
    if not isinstance(parsed, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return parsed


def extract_prompt(event: Mapping[str, Any]) -> str:
    """Read and validate the prompt (input: event; output: trimmed prompt text)."""
    if event.get("body") is not None:
        source = _decode_body(event)
    else:
        source = event

    prompt = source.get("prompt")
    if prompt is None:
        raise ValidationError("Prompt cannot be empty")
    if not isinstance(prompt, str):
        raise ValidationError("Prompt must be a string")
    prompt = prompt.strip()
    if not prompt:
        raise ValidationError("Prompt cannot be empty")
    return prompt
