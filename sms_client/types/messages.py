from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from .enums import MessageKind


class Credentials(BaseModel):
    """Account SID and auth token pair used for HTTP Basic authentication.

    The SID is the username and the token the password. Both come from the
    provider console and are stored verbatim; the token is kept as a
    `SecretStr` so it never shows up in reprs or log lines.

    Example:
        >>> from sms_client.types import Credentials
        >>> creds = Credentials(account_sid="AC123", auth_token="secret")
        >>> creds.basic_auth()
        ('AC123', 'secret')
    """

    model_config = ConfigDict(frozen=True)

    account_sid: str
    auth_token: SecretStr

    def basic_auth(self) -> tuple[str, str]:
        return (self.account_sid, self.auth_token.get_secret_value())


class MessageRequest(BaseModel):
    """One outbound SMS or MMS send attempt.

    Anatomy:
    - to: destination address, passed through to the provider unvalidated
    - from: sender address in the account (use `from_` in Python code)
    - body: UTF-8 text; `bytes` is accepted as raw UTF-8 and checked on send
    - media_url: optional attachment URL; presence turns the send into MMS

    The media URL is not checked for format or reachability; the provider
    decides whether it is usable.

    Example:
        >>> from sms_client.types import MessageRequest
        >>> MessageRequest(to="+15551234567", from_="+15557654321", body="Hello").kind
        <MessageKind.SMS: 'sms'>
    """

    model_config = ConfigDict(populate_by_name=True)

    to: str
    from_: str = Field(alias="from")
    body: Union[str, bytes]
    media_url: Optional[str] = None

    @property
    def kind(self) -> MessageKind:
        return MessageKind.MMS if self.media_url else MessageKind.SMS
