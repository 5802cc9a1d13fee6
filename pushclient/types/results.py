from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import PushErrorCode, PushTicketStatus
from .errors import (
    DeviceNotRegisteredError,
    InvalidCredentialsError,
    MessageRateExceededError,
    MessageTooBigError,
    PushTicketError,
)
from .messages import PushMessage

_TICKET_ERRORS: Dict[str, type[PushTicketError]] = {
    PushErrorCode.DEVICE_NOT_REGISTERED.value: DeviceNotRegisteredError,
    PushErrorCode.MESSAGE_TOO_BIG.value: MessageTooBigError,
    PushErrorCode.MESSAGE_RATE_EXCEEDED.value: MessageRateExceededError,
    PushErrorCode.INVALID_CREDENTIALS.value: InvalidCredentialsError,
}


class PushTicketDetails(BaseModel):
    """Structured detail attached to an error ticket.

    Attributes:
        error: Machine readable code, usually one of `PushErrorCode`.

    Additional keys the service sends (e.g. `expoPushToken`) are kept as
    extras.
    """

    model_config = ConfigDict(extra="allow")

    error: Optional[str] = None


class PushTicket(BaseModel):
    """Outcome for one message of a batch.

    Attributes:
        status: `ok` when the message was accepted, `error` otherwise.
        id: Receipt identifier, usable later to look up delivery status.
        message: Human readable explanation for error tickets.
        details: Structured error detail for error tickets.
        push_message: The message this ticket answers. Set by the client when
            pairing results by position; never part of the wire payload.

    Example:
        >>> from pushclient.types import PushTicket
        >>> PushTicket(status="ok", id="XXXX-XXXX").is_success()
        True
    """

    model_config = ConfigDict(extra="allow")

    status: PushTicketStatus
    id: Optional[str] = None
    message: Optional[str] = None
    details: Optional[PushTicketDetails] = None
    push_message: Optional[PushMessage] = Field(default=None, exclude=True)

    def is_success(self) -> bool:
        return self.status == PushTicketStatus.OK

    def validate_response(self) -> None:
        """Raise the matching `PushTicketError` if this ticket is an error.

        The client never calls this; per-message failures are regular
        results and callers decide whether to escalate them.
        """
        if self.is_success():
            return
        code = self.details.error if self.details else None
        error_cls = _TICKET_ERRORS.get(code or "", PushTicketError)
        raise error_cls(self)


class PushServerErrorDetail(BaseModel):
    """One entry of the batch-level `errors` array."""

    model_config = ConfigDict(extra="allow")

    code: Optional[str] = None
    message: Optional[str] = None


class PushResponseEnvelope(BaseModel):
    """Top-level body returned by the push send endpoint.

    Exactly one shape is valid: `errors` present (the whole request failed)
    or `data` present with one ticket per submitted message.
    """

    model_config = ConfigDict(extra="allow")

    errors: Optional[list[PushServerErrorDetail]] = None
    data: Optional[list[PushTicket]] = None
