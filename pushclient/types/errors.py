"""Exceptions raised by the push client.

Batch-level failures form a closed set under `PushError`; every failure of
`PushClient.publish_multiple` is one of its five subclasses and aborts the
whole batch. `PushTicketError` and its subclasses describe a single failed
ticket and are only raised when a caller opts in through
`PushTicket.validate_response()`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .results import PushResponseEnvelope, PushServerErrorDetail, PushTicket


class PushError(RuntimeError):
    """Base class for failures of a whole push request."""


class PushValidationError(PushError, ValueError):
    """A message failed local checks; nothing was sent."""


class PushTransportError(PushError):
    """The request could not be delivered (connection, DNS, TLS, timeout)."""


class PushHTTPStatusError(PushError):
    """The service answered with a non-2xx status.

    Attributes:
        status_code: HTTP status code.
        status_text: Reason phrase sent with the status.
        response: The rejected response; its body is never read.
    """

    def __init__(self, status_code: int, status_text: str, response: Any = None) -> None:
        super().__init__(f"invalid response ({status_code} {status_text})")
        self.status_code = status_code
        self.status_text = status_text
        self.response = response


class PushDecodeError(PushError):
    """The response body could not be read or was not the expected JSON object.

    Attributes:
        response: The response whose body failed to decode.
    """

    def __init__(self, message: str, response: Any = None) -> None:
        super().__init__(message)
        self.response = response


class PushServerError(PushError):
    """The service returned a well-formed but unusable envelope.

    Raised when the batch-level `errors` array is populated, when `data` is
    missing, or when the number of tickets differs from the number of
    messages sent.

    Attributes:
        response: The HTTP response the envelope was read from.
        envelope: The decoded envelope.
        errors: Batch-level error entries, if the service sent any.
    """

    def __init__(
        self,
        message: str,
        response: Any,
        envelope: Optional["PushResponseEnvelope"],
        errors: Optional[list["PushServerErrorDetail"]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.response = response
        self.envelope = envelope
        self.errors = errors


class PushTicketError(RuntimeError):
    """A single ticket reported a delivery error."""

    def __init__(self, ticket: "PushTicket") -> None:
        super().__init__(ticket.message or "push ticket error")
        self.ticket = ticket

    @property
    def push_message(self):  # type: ignore[no-untyped-def]
        return self.ticket.push_message


class DeviceNotRegisteredError(PushTicketError):
    """The token is no longer valid; stop sending to it."""


class MessageTooBigError(PushTicketError):
    """The notification payload exceeded the provider size limit."""


class MessageRateExceededError(PushTicketError):
    """Too many messages were sent to this device; back off."""


class InvalidCredentialsError(PushTicketError):
    """Push credentials for the app are missing or invalid."""
