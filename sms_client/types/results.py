from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from .enums import FailureKind


class SendResult(BaseModel):
    """Outcome of a single `send_message` call.

    Attributes:
        ok: True only when the exchange completed with status 200 or 201.
        detail: Diagnostic text. Holds the validation or transport error
            message on those failures, the raw provider response body when
            verbose diagnostics were requested, and "" otherwise.
        error: Failure classification; None on success.
        status_code: Provider HTTP status when the exchange completed.

    Example:
        >>> from sms_client.types import SendResult
        >>> SendResult(ok=True, status_code=201)
        SendResult(ok=True, detail='', error=None, status_code=201)
    """

    ok: bool
    detail: str = ""
    error: Optional[FailureKind] = None
    status_code: Optional[int] = None
