"""Core types for the push client.

This package centralizes enums, the message model, ticket/envelope schemas,
the transport protocol, and the exception taxonomy. Most modules should
import types from here rather than directly from submodules.

Usage:
    from pushclient.types import PushMessage, PushTicket, PushServerError
"""

from .enums import Priority, PushErrorCode, PushTicketStatus
from .errors import (
    DeviceNotRegisteredError,
    InvalidCredentialsError,
    MessageRateExceededError,
    MessageTooBigError,
    PushDecodeError,
    PushError,
    PushHTTPStatusError,
    PushServerError,
    PushTicketError,
    PushTransportError,
    PushValidationError,
)
from .messages import PushMessage
from .protocols import PushResponse, PushTransport
from .results import (
    PushResponseEnvelope,
    PushServerErrorDetail,
    PushTicket,
    PushTicketDetails,
)

__all__ = [
    "Priority",
    "PushErrorCode",
    "PushTicketStatus",
    "PushMessage",
    "PushTicket",
    "PushTicketDetails",
    "PushServerErrorDetail",
    "PushResponseEnvelope",
    "PushResponse",
    "PushTransport",
    "PushError",
    "PushValidationError",
    "PushTransportError",
    "PushHTTPStatusError",
    "PushDecodeError",
    "PushServerError",
    "PushTicketError",
    "DeviceNotRegisteredError",
    "MessageTooBigError",
    "MessageRateExceededError",
    "InvalidCredentialsError",
]
