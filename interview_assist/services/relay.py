# -*- coding: utf-8 -*-
"""
Request/response relay: event in, envelope out, one model call in between.

Normalize -> (preflight short-circuit) -> validate -> build payload -> invoke -> extract -> format.
Any failure before formatting becomes an {"error": ...} envelope.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from interview_assist.logging_config import get_logger
from interview_assist.services import incoming
from interview_assist.services.bedrock import BedrockInvoker
from interview_assist.services.config import RelayConfig
from interview_assist.services.errors import InvocationError, RelayError
from interview_assist.services.extraction import extract_text
from interview_assist.services.payload import InvocationPayload, build_payload
from interview_assist.services.responses import (
    error_response,
    preflight_response,
    status_for,
    success_response,
)

logger = get_logger(__name__)

Invoker = Callable[[InvocationPayload], str]


def _generate(prompt: str, invoker: Optional[Invoker], config: RelayConfig) -> str:
    """Invoke the model and pull out the generated text (inputs: prompt; output: text)."""
    payload = build_payload(prompt, config)
    if invoker is None:
        invoker = BedrockInvoker(config)
    try:
        raw = invoker(payload)
        text = extract_text(raw, config.response_path, strict=config.strict_extraction)
    except Exception as exc:
        logger.error("Error invoking %s: %s", config.model_id, exc)
        raise InvocationError(f"Error invoking {config.model_id}: {exc}") from exc
    logger.info("Parsed response: %s", text)
    return text


def relay(
    event: Mapping[str, Any],
    invoker: Optional[Invoker] = None,
    config: Optional[RelayConfig] = None,
) -> Dict[str, Any]:
    """Handle one request (inputs: event, optional invoker/config; output: response envelope)."""
    logger.info("Starting request: %s", event)

    try:
        if config is None:
            config = RelayConfig.from_env()
        if incoming.is_preflight(event):
            return preflight_response()
        prompt = incoming.extract_prompt(event)
        text = _generate(prompt, invoker, config)
        response = success_response(text)
    except Exception as exc:
        if not isinstance(exc, RelayError):
            logger.exception("Unexpected error processing request")
        else:
            logger.error("Error processing request: %s", exc)
        status_code = status_for(exc, config) if config is not None else 500
        # Encoding failures here propagate; there is no further fallback.
        response = error_response(str(exc), status_code)

    logger.info("Ending request: %s", response)
    return response
