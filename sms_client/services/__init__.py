"""Services package for the SMS client."""

from .transport import (
    BufferSink,
    DiscardSink,
    HttpxTransport,
    get_transport,
    init_transport,
    is_transport_ready,
    make_sink,
    shutdown_transport,
)

__all__ = [
    "BufferSink",
    "DiscardSink",
    "HttpxTransport",
    "get_transport",
    "init_transport",
    "is_transport_ready",
    "make_sink",
    "shutdown_transport",
]
