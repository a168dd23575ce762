from __future__ import annotations

import logging
from typing import Optional, Union

from sms_client.config import ClientSettings, get_client_settings
from sms_client.services.transport import get_transport, make_sink
from sms_client.types import (
    Credentials,
    FailureKind,
    HttpTransport,
    MessageRequest,
    SendResult,
    TransportError,
)
from sms_client.utils.encoding import EncodingFailure, percent_encode, utf8_to_utf16_units

logger = logging.getLogger(__name__)

# Twilio measures the body in UTF-16 code units, not bytes or code points.
# See: https://www.twilio.com/docs/api/rest/sending-messages
MAX_BODY_UNITS = 1600
ACCEPTED_STATUS_CODES = frozenset({200, 201})


class MessagingClient:
    """Twilio Messages API client bound to one account.

    Notes:
    - Credentials are fixed at construction; nothing is validated or sent until
      `send_message` is called.
    - Each call performs exactly one POST and never retries. Every failure is
      reported through the returned `SendResult`; nothing is raised.
    - Without an explicit `transport`, the process-wide one from
      `init_transport()` is used.
    """

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        *,
        transport: Optional[HttpTransport] = None,
        settings: Optional[ClientSettings] = None,
    ) -> None:
        self.credentials = Credentials(account_sid=account_sid, auth_token=auth_token)
        self._transport = transport
        self._settings = settings or get_client_settings()

    def messages_url(self) -> str:
        return self._settings.messages_url(self.credentials.account_sid)

    def build_form_body(self, request: MessageRequest) -> str:
        """Build the form payload for `request`.

        Only the body is percent-encoded; addresses and the media URL go out
        exactly as given.
        """
        params = (
            f"To={request.to}"
            f"&From={request.from_}"
            f"&Body={percent_encode(request.body)}"
        )
        if request.media_url:
            params += f"&MediaUrl={request.media_url}"
        return params

    # --- Outbound ---
    def send_message(
        self,
        to: str,
        from_: str,
        body: Union[str, bytes],
        media_url: Optional[str] = None,
        verbose: bool = False,
    ) -> SendResult:
        """Send an SMS, or an MMS when `media_url` is given.

        Returns a successful `SendResult` only when Twilio answers 200 or 201.
        With `verbose`, `detail` carries Twilio's raw response body whatever
        the outcome; otherwise the body is discarded.
        """
        request = MessageRequest(to=to, from_=from_, body=body, media_url=media_url)
        return self.send(request, verbose=verbose)

    def send(self, request: MessageRequest, verbose: bool = False) -> SendResult:
        converted = utf8_to_utf16_units(request.body)
        if isinstance(converted, EncodingFailure):
            detail = converted.describe()
            logger.warning("Rejected message to %s: %s", request.to, detail)
            return SendResult(ok=False, detail=detail, error=FailureKind.VALIDATION)

        if len(converted) > MAX_BODY_UNITS:
            detail = (
                f"Message body must have {MAX_BODY_UNITS} or fewer characters. "
                f"Cannot send message with {len(converted)} characters."
            )
            logger.warning("Rejected message to %s: %s", request.to, detail)
            return SendResult(ok=False, detail=detail, error=FailureKind.VALIDATION)

        transport = self._transport or get_transport()
        url = self.messages_url()
        sink = make_sink(verbose)
        logger.debug("Sending %s to %s via %s", request.kind.value, request.to, url)

        try:
            status_code = transport.post(
                url,
                self.build_form_body(request),
                self.credentials.basic_auth(),
                sink,
            )
        except TransportError as e:
            logger.warning("Transport error sending to %s: %s", request.to, e)
            return SendResult(ok=False, detail=str(e), error=FailureKind.TRANSPORT)

        if status_code not in ACCEPTED_STATUS_CODES:
            logger.warning("Twilio rejected message to %s with HTTP %s", request.to, status_code)
            return SendResult(
                ok=False,
                detail=sink.getvalue(),
                error=FailureKind.PROVIDER,
                status_code=status_code,
            )

        logger.info("Twilio accepted %s to %s (HTTP %s)", request.kind.value, request.to, status_code)
        return SendResult(ok=True, detail=sink.getvalue(), status_code=status_code)
