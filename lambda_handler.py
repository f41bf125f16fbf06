# -*- coding: utf-8 -*-
"""
AWS Lambda handler for the interview assistant relay.
"""
import traceback

from interview_assist.services.config import RelayConfig
from interview_assist.services.relay import relay

# Config cached at import time so warm invocations skip env parsing.
RELAY_CONFIG = RelayConfig.from_env()


def handler(event, context):
    """Lambda entrypoint (inputs: event/context; output: API response dict)."""
    # Proxy events and direct invokes share the relay so every caller gets the same envelope.
    try:
        return relay(event, config=RELAY_CONFIG)
    except Exception:
        # Keep failures observable in CloudWatch with a full traceback.
        print("Unhandled error in Lambda handler:")
        print(traceback.format_exc())
        raise
