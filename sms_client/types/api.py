from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .results import SendResult


class SendMessageRequest(BaseModel):
    """Outbound send request accepted by the HTTP API.

    Attributes:
        to: Destination phone number.
        from: Sender number. Defaults to `TWILIO_FROM_NUMBER` when omitted.
        body: Message text.
        media_url: Optional media URL; makes the send an MMS.
        verbose: Return the provider's raw response body in `result.detail`.

    Example:
        {
          "to": "+15551230000",
          "from": "+15557650000",
          "body": "Hello",
          "media_url": "https://example.com/cat.png",
          "verbose": true
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    to: str
    from_: Optional[str] = Field(default=None, alias="from")
    body: str
    media_url: Optional[str] = None
    verbose: bool = False


class SendMessageResponse(BaseModel):
    """Standard response schema for the send endpoint.

    Attributes:
        ok: Indicates the provider accepted the message.
        result: The `SendResult` produced by the client.
    """

    ok: bool
    result: SendResult
