# -*- coding: utf-8 -*-
"""
Helpers for calling Amazon Bedrock (bedrock-runtime InvokeModel).
"""
from __future__ import annotations

from functools import lru_cache

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from interview_assist.logging_config import get_logger
from interview_assist.services.config import RelayConfig
from interview_assist.services.errors import InvocationError
from interview_assist.services.payload import InvocationPayload

logger = get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"


@lru_cache(maxsize=None)
def get_bedrock_client(region: str, max_attempts: int = 1, read_timeout: int = 300):
    """
    Lazily create and cache a bedrock-runtime client keyed by region, attempts and timeout.
    Clients are thread-safe and reused across warm invocations.
    """
    client_config = Config(
        retries={"total_max_attempts": max_attempts, "mode": "standard"},
        read_timeout=read_timeout,
    )
    return boto3.client("bedrock-runtime", region_name=region, config=client_config)


def invoke_model(client, model_id: str, body: str) -> str:
    """Invoke the model (inputs: client/model id/JSON body; output: response body text)."""
    try:
        response = client.invoke_model(
            modelId=model_id,
            contentType=JSON_CONTENT_TYPE,
            accept=JSON_CONTENT_TYPE,
            body=body.encode("utf-8"),
        )
        raw = response["body"].read()
    except (BotoCoreError, ClientError) as exc:
        raise InvocationError(str(exc)) from exc
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    return raw


class BedrockInvoker:
    """Callable that sends an InvocationPayload to Bedrock and returns the raw response text."""

    def __init__(self, config: RelayConfig):
        self.config = config

    @property
    def client(self):
        return get_bedrock_client(self.config.region, self.config.max_attempts, self.config.read_timeout)

    def __call__(self, payload: InvocationPayload) -> str:
        raw = invoke_model(self.client, payload.model_id, payload.serialize())
        logger.info("Response from %s: %s", payload.model_id, raw)
        return raw
