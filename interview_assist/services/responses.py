# -*- coding: utf-8 -*-
"""
Builds the {statusCode, headers, body} envelope returned for every outcome.
"""
from __future__ import annotations

import json
from typing import Any, Dict

from interview_assist.services.config import DEFAULT_RELAY_CONFIG, RelayConfig
from interview_assist.services.errors import SerializationError, ValidationError

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "OPTIONS, POST",
    "Access-Control-Allow-Headers": (
        "Content-Type, Authorization, X-Amz-Date, X-Api-Key, X-Amz-Security-Token, "
        "Accept, Origin, Cache-Control, X-Requested-With"
    ),
}


def _envelope(status_code: int, body: str) -> Dict[str, Any]:
    return {"statusCode": status_code, "headers": dict(CORS_HEADERS), "body": body}


def _encode(obj: Dict[str, Any]) -> str:
    try:
        return json.dumps(obj, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Unable to encode response body: {exc}") from exc


def preflight_response() -> Dict[str, Any]:
    return _envelope(200, "")


def success_response(text: str) -> Dict[str, Any]:
    return _envelope(200, _encode({"response": text}))


def error_response(message: str, status_code: int = 500) -> Dict[str, Any]:
    """Error envelope. SerializationError here is fatal and left to the caller."""
    return _envelope(status_code, _encode({"error": message}))


def status_for(exc: Exception, config: RelayConfig = DEFAULT_RELAY_CONFIG) -> int:
    # Missing prompts have historically returned 500; VALIDATION_ERROR_STATUS switches to 400.
    if isinstance(exc, ValidationError):
        return config.validation_status
    return 500
