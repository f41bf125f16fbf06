# -*- coding: utf-8 -*-
"""
Reads the generated text out of the model's JSON response.
"""
from __future__ import annotations

import json
from typing import Any, Tuple, Union

from interview_assist.services.errors import InvocationError

PathSegment = Union[str, int]


def parse_response_path(path: str) -> Tuple[PathSegment, ...]:
    """Split "output.message.content.0.text" into ("output", "message", "content", 0, "text")."""
    segments = []
    for part in path.split("."):
        if not part:
            raise ValueError(f"Invalid response path: {path!r}")
        segments.append(int(part) if part.isdigit() else part)
    return tuple(segments)


def _step(node: Any, segment: PathSegment) -> Any:
    if isinstance(segment, int):
        if isinstance(node, list) and segment < len(node):
            return node[segment]
        return None
    if isinstance(node, dict):
        return node.get(segment)
    return None


def extract_text(raw: str, path: str, strict: bool = False) -> str:
    """
    Walk `path` through the decoded response and return the text found there.

    A missing segment (or a non-string leaf) yields "" unless `strict` is set,
    in which case InvocationError is raised.
    """
    try:
        document = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise InvocationError(f"Model response is not valid JSON: {exc}") from exc

    node = document
    for segment in parse_response_path(path):
        node = _step(node, segment)
        if node is None:
            break

    if isinstance(node, str):
        return node
    if strict:
        raise InvocationError(f"Model response has no text at {path}")
    return ""
