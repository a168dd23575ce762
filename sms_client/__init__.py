"""Twilio SMS/MMS client.

Usage:
    from sms_client import MessagingClient, init_transport, shutdown_transport

    init_transport()
    client = MessagingClient("AC...", "token")
    result = client.send_message("+15551230000", "+15557650000", "Hello")
    shutdown_transport()
"""

from .adapters.twilio import MAX_BODY_UNITS, MessagingClient
from .services.transport import init_transport, is_transport_ready, shutdown_transport
from .types import FailureKind, MessageKind, MessageRequest, SendResult

__all__ = [
    "MAX_BODY_UNITS",
    "MessagingClient",
    "init_transport",
    "is_transport_ready",
    "shutdown_transport",
    "FailureKind",
    "MessageKind",
    "MessageRequest",
    "SendResult",
]
