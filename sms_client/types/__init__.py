"""Core types for the SMS client.

This package centralizes enums, message models, transport protocols and
result/API schemas in one place. Most modules should import types from here
rather than directly from submodules.

Usage:
    from sms_client.types import MessageRequest, SendResult, HttpTransport
"""

from .enums import FailureKind, MessageKind
from .errors import TransportError
from .messages import Credentials, MessageRequest
from .protocols import HttpTransport, ResponseSink
from .results import SendResult
from .api import SendMessageRequest, SendMessageResponse

__all__ = [
    "MessageKind",
    "FailureKind",
    "TransportError",
    "Credentials",
    "MessageRequest",
    "HttpTransport",
    "ResponseSink",
    "SendResult",
    "SendMessageRequest",
    "SendMessageResponse",
]
