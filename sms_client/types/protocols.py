from __future__ import annotations

from typing import Protocol


class ResponseSink(Protocol):
    """Destination for response body bytes streamed by a transport.

    Two variants exist: one that drops everything and one that buffers it.
    `send_message` picks between them with its `verbose` flag.
    """

    def write(self, chunk: bytes) -> int:
        """Consume a chunk of the response body and return the bytes taken."""
        ...

    def getvalue(self) -> str:
        """Return whatever was retained, decoded as text ("" if nothing)."""
        ...


class HttpTransport(Protocol):
    """Narrow HTTP capability used by `MessagingClient`.

    Implementations own connection setup, TLS, redirects and timeouts. The
    client only needs a form POST with Basic auth and the resulting status.

    Minimal example:
        >>> from sms_client.types import HttpTransport, ResponseSink
        >>> class AlwaysCreated:
        ...     def post(self, url, body, auth, sink):
        ...         sink.write(b'{"status": "queued"}')
        ...         return 201
    """

    def post(
        self,
        url: str,
        body: str,
        auth: tuple[str, str],
        sink: ResponseSink,
    ) -> int:
        """POST a form-encoded `body` to `url` and return the HTTP status.

        Response body bytes are written to `sink` as they arrive. Raises
        `TransportError` when the exchange cannot be completed.
        """
        ...
