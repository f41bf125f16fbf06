# -*- coding: utf-8 -*-
"""
Typed errors for the relay workflow.
"""


class RelayError(Exception):
    """Base class for relay-related errors."""


class ValidationError(RelayError):
    """Raised when the incoming request has no usable prompt."""


class InvocationError(RelayError):
    """Raised when the model call fails or returns an unreadable body."""


class SerializationError(RelayError):
    """Raised when a response body cannot be encoded as JSON."""


class ConfigError(RelayError):
    """Raised when an environment setting cannot be parsed."""
