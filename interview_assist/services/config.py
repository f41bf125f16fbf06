# -*- coding: utf-8 -*-
"""
Relay settings with defaults matching the deployed Lambda, overridable from env vars.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from interview_assist.services.errors import ConfigError
from interview_assist.services.extraction import parse_response_path

NOVA_MICRO_MODEL_ID = "amazon.nova-micro-v1:0"
NOVA_RESPONSE_PATH = "output.message.content.0.text"
MESSAGES_RESPONSE_PATH = "messages.0.content.0.text"

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class RelayConfig:
    model_id: str = NOVA_MICRO_MODEL_ID  # Bedrock model invoked for every request
    region: str = "us-east-1"  # bedrock-runtime region
    max_tokens: int = 1000  # generation budget per request
    temperature: float = 0.5  # generation randomness
    include_system_prompt: bool = True  # attach the interview-helper persona
    response_path: str = NOVA_RESPONSE_PATH  # dotted path to the generated text
    strict_extraction: bool = False  # raise instead of returning "" on a missing path
    validation_status: int = 500  # status code used for a missing/empty prompt
    max_attempts: int = 1  # total InvokeModel attempts (1 = no retry)
    read_timeout: int = 300  # seconds to wait on the InvokeModel response

    def __post_init__(self):
        if not self.model_id:
            raise ConfigError("model_id must not be empty")
        if self.max_tokens <= 0:
            raise ConfigError("max_tokens must be > 0")
        if not 0.0 <= self.temperature <= 1.0:
            raise ConfigError("temperature must be between 0 and 1")
        if self.max_attempts < 1:
            raise ConfigError("max_attempts must be >= 1")
        if self.read_timeout <= 0:
            raise ConfigError("read_timeout must be > 0")
        if not 400 <= self.validation_status <= 599:
            raise ConfigError("validation_status must be an HTTP error status")
        try:
            parse_response_path(self.response_path)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RelayConfig":
        """Build a config from env vars (input: mapping, default os.environ; output: RelayConfig)."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            model_id=env.get("BEDROCK_MODEL_ID", defaults.model_id),
            region=env.get("BEDROCK_REGION", defaults.region),
            max_tokens=_env_int(env, "MAX_TOKENS", defaults.max_tokens),
            temperature=_env_float(env, "TEMPERATURE", defaults.temperature),
            include_system_prompt=_env_flag(env, "INCLUDE_SYSTEM_PROMPT", defaults.include_system_prompt),
            response_path=env.get("RESPONSE_TEXT_PATH", defaults.response_path),
            strict_extraction=_env_flag(env, "STRICT_EXTRACTION", defaults.strict_extraction),
            validation_status=_env_int(env, "VALIDATION_ERROR_STATUS", defaults.validation_status),
            max_attempts=_env_int(env, "INVOKE_MAX_ATTEMPTS", defaults.max_attempts),
            read_timeout=_env_int(env, "INVOKE_READ_TIMEOUT_SECONDS", defaults.read_timeout),
        )


def _env_flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc


DEFAULT_RELAY_CONFIG = RelayConfig()
