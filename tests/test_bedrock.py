import io
import json

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from interview_assist.services import bedrock
from interview_assist.services.config import RelayConfig
from interview_assist.services.errors import InvocationError
from interview_assist.services.payload import build_payload


class _DummyClient:
    def __init__(self, body=b"{}", error=None):
        self.calls = []
        self.body = body
        self.error = error

    def invoke_model(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return {"body": io.BytesIO(self.body), "contentType": "application/json"}


def test_invoke_model_sends_json_body():
    client = _DummyClient(body=b'{"output": {}}')
    raw = bedrock.invoke_model(client, "amazon.nova-micro-v1:0", '{"messages": []}')

    assert raw == '{"output": {}}'
    call = client.calls[0]
    assert call["modelId"] == "amazon.nova-micro-v1:0"
    assert call["contentType"] == "application/json"
    assert call["accept"] == "application/json"
    assert json.loads(call["body"]) == {"messages": []}


def test_invoke_model_wraps_client_error():
    error = ClientError(
        {"Error": {"Code": "AccessDeniedException", "Message": "not authorized"}},
        "InvokeModel",
    )
    with pytest.raises(InvocationError, match="not authorized"):
        bedrock.invoke_model(_DummyClient(error=error), "model", "{}")


def test_invoke_model_wraps_botocore_error():
    error = EndpointConnectionError(endpoint_url="https://bedrock-runtime.us-east-1.amazonaws.com")
    with pytest.raises(InvocationError):
        bedrock.invoke_model(_DummyClient(error=error), "model", "{}")


def test_bedrock_invoker_uses_cached_client(monkeypatch):
    client = _DummyClient(body=b'{"output": {"message": {"content": [{"text": "Hi"}]}}}')
    requested = []

    def _fake_get_client(region, max_attempts=1, read_timeout=300):
        requested.append((region, max_attempts, read_timeout))
        return client

    monkeypatch.setattr(bedrock, "get_bedrock_client", _fake_get_client)
    config = RelayConfig(region="us-west-2", max_attempts=2)
    invoker = bedrock.BedrockInvoker(config)
    payload = build_payload("Backend engineer", config)

    raw = invoker(payload)

    assert json.loads(raw)["output"]["message"]["content"][0]["text"] == "Hi"
    assert requested == [("us-west-2", 2, 300)]
    assert client.calls[0]["body"].decode("utf-8") == payload.serialize()


def test_get_bedrock_client_is_cached(monkeypatch):
    created = []

    def _fake_client(service, region_name=None, config=None):
        created.append((service, region_name, config))
        return object()

    bedrock.get_bedrock_client.cache_clear()
    monkeypatch.setattr(bedrock.boto3, "client", _fake_client)
    try:
        first = bedrock.get_bedrock_client("us-east-1", 3, 120)
        second = bedrock.get_bedrock_client("us-east-1", 3, 120)
    finally:
        bedrock.get_bedrock_client.cache_clear()

    assert first is second
    assert len(created) == 1
    service, region, client_config = created[0]
    assert service == "bedrock-runtime"
    assert region == "us-east-1"
    assert client_config.read_timeout == 120
    assert client_config.retries == {"total_max_attempts": 3, "mode": "standard"}
