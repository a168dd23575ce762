from __future__ import annotations


class TransportError(Exception):
    """Raised by an `HttpTransport` when the HTTP exchange could not complete.

    The message is the transport layer's own description of the failure and is
    surfaced verbatim as the diagnostic of the failed `SendResult`.
    """
