import json
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from interview_assist.services.config import RelayConfig


class FakeInvoker:
    """Records payloads and replays a canned response (or raises)."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.payloads = []

    def __call__(self, payload):
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error
        return self.response


def nova_response(text):
    return json.dumps({"output": {"message": {"role": "assistant", "content": [{"text": text}]}}})


@pytest.fixture
def relay_config():
    return RelayConfig()


@pytest.fixture
def hello_invoker():
    return FakeInvoker(response=nova_response("Hello"))


@pytest.fixture
def failing_invoker():
    return FakeInvoker(error=RuntimeError("boom"))


@pytest.fixture
def app(relay_config, hello_invoker):
    from interview_assist.app import create_app

    return create_app(config=relay_config, invoker=hello_invoker)


@pytest.fixture
def client(app):
    return app.test_client()
