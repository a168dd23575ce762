"""Process-wide HTTP transport for the SMS client.

The embedding application calls `init_transport()` once at startup and
`shutdown_transport()` once at exit. Every `MessagingClient` that was not
given its own transport shares the one created here, so the lifecycle is
deliberately kept out of the client constructor.
"""

from __future__ import annotations

import io
import logging
import threading
from typing import Optional

import httpx

from sms_client.config import ClientSettings, get_client_settings
from sms_client.types import ResponseSink, TransportError

logger = logging.getLogger(__name__)

_FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


class DiscardSink:
    """Sink that drops the response body."""

    def write(self, chunk: bytes) -> int:
        return len(chunk)

    def getvalue(self) -> str:
        return ""


class BufferSink:
    """Sink that accumulates the response body for diagnostics."""

    def __init__(self) -> None:
        self._buffer = io.BytesIO()

    def write(self, chunk: bytes) -> int:
        return self._buffer.write(chunk)

    def getvalue(self) -> str:
        return self._buffer.getvalue().decode("utf-8", errors="replace")


def make_sink(verbose: bool) -> ResponseSink:
    """Return a buffering sink when `verbose`, otherwise a discarding one."""
    return BufferSink() if verbose else DiscardSink()


class HttpxTransport:
    """`HttpTransport` backed by a synchronous `httpx.Client`.

    Responses are streamed chunk by chunk into the caller's sink so that a
    discarding sink never holds the body in memory.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        *,
        timeout: float = 15.0,
    ) -> None:
        self._client = client or httpx.Client(timeout=timeout)

    def post(
        self,
        url: str,
        body: str,
        auth: tuple[str, str],
        sink: ResponseSink,
    ) -> int:
        # Lone surrogates from surrogateescape-decoded input go out as their original bytes
        try:
            with self._client.stream(
                "POST",
                url,
                content=body.encode("utf-8", "surrogateescape"),
                headers=_FORM_HEADERS,
                auth=auth,
            ) as response:
                for chunk in response.iter_bytes():
                    sink.write(chunk)
                return response.status_code
        except httpx.RequestError as e:
            raise TransportError(str(e) or e.__class__.__name__) from e

    def close(self) -> None:
        self._client.close()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed


# Global transport instance (singleton)
_transport: Optional[HttpxTransport] = None
_lock = threading.Lock()


def init_transport(settings: Optional[ClientSettings] = None) -> HttpxTransport:
    """Create the shared transport.

    Must run before any client that relies on the shared transport sends.
    Calling it again returns the already-initialized instance.
    """
    global _transport
    with _lock:
        if _transport is not None:
            return _transport
        settings = settings or get_client_settings()
        _transport = HttpxTransport(timeout=settings.timeout_seconds)
        logger.info("HTTP transport initialized (timeout=%ss)", settings.timeout_seconds)
        return _transport


def shutdown_transport() -> None:
    """Close the shared transport. Safe to call when nothing is initialized."""
    global _transport
    with _lock:
        if _transport is None:
            return
        _transport.close()
        _transport = None
        logger.info("HTTP transport closed")


def get_transport() -> HttpxTransport:
    """Return the shared transport or raise if `init_transport` was never called."""
    transport = _transport
    if transport is None:
        raise RuntimeError("HTTP transport is not initialized; call init_transport() at startup")
    return transport


def is_transport_ready() -> bool:
    return _transport is not None
