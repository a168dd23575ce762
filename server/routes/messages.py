from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from server.config import Settings, get_settings
from sms_client import FailureKind, MessagingClient
from sms_client.types import SendMessageRequest, SendMessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["messages"])


def get_messaging_client(settings: Settings = Depends(get_settings)) -> MessagingClient:
    """Build a client from the configured Twilio credentials."""
    if not settings.has_twilio_credentials:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Missing TWILIO_ACCOUNT_SID or TWILIO_AUTH_TOKEN environment variables",
        )
    return MessagingClient(settings.twilio_account_sid, settings.twilio_auth_token)


@router.post("/messages")
def send_message(
    payload: SendMessageRequest,
    client: MessagingClient = Depends(get_messaging_client),
    settings: Settings = Depends(get_settings),
) -> SendMessageResponse:
    """Send one SMS/MMS through Twilio.

    - 422 when the body fails validation or no sender is known
    - 502 when the request never completed or Twilio rejected it
    """
    from_number = payload.from_ or settings.twilio_from_number
    if not from_number:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Missing sender: provide 'from' or set TWILIO_FROM_NUMBER",
        )

    result = client.send_message(
        payload.to,
        from_number,
        payload.body,
        media_url=payload.media_url,
        verbose=payload.verbose,
    )
    if result.ok:
        return SendMessageResponse(ok=True, result=result)

    if result.error == FailureKind.VALIDATION:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=result.detail)
    if result.error == FailureKind.TRANSPORT:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=f"Send error: {result.detail}")

    detail = f"Twilio returned HTTP {result.status_code}"
    if result.detail:
        detail = f"{detail}: {result.detail}"
    raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)
