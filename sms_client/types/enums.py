from __future__ import annotations

from enum import Enum


class MessageKind(str, Enum):
    """Kind of outbound message, derived from the request.

    - SMS: plain text send
    - MMS: text plus a media attachment URL

    Example:
        >>> from sms_client.types import MessageRequest, MessageKind
        >>> MessageRequest(to="+1", **{"from": "+2"}, body="hi").kind is MessageKind.SMS
        True
    """

    SMS = "sms"
    MMS = "mms"


class FailureKind(str, Enum):
    """Why a send attempt failed.

    - VALIDATION: body is not valid UTF-8 or is too long; nothing was sent
    - TRANSPORT: the HTTP exchange did not complete (DNS, TLS, connect, timeout)
    - PROVIDER: the provider answered with a status other than 200/201
    """

    VALIDATION = "validation"
    TRANSPORT = "transport"
    PROVIDER = "provider"
