from __future__ import annotations

from enum import Enum


class PushTicketStatus(str, Enum):
    """Per-message outcome reported by the push service.

    An `ERROR` ticket is still a successful API call: the batch was accepted
    and the service is telling us this particular message could not be
    delivered. Inspect `PushTicket.details` for the reason.
    """

    OK = "ok"
    ERROR = "error"


class Priority(str, Enum):
    """Delivery priority hint forwarded to APNs/FCM.

    Example:
        >>> from pushclient.types import PushMessage, Priority
        >>> PushMessage(to=["ExponentPushToken[abc]"], body="Hi", priority=Priority.HIGH)
    """

    DEFAULT = "default"
    NORMAL = "normal"
    HIGH = "high"


class PushErrorCode(str, Enum):
    """Error codes found in `details.error` of an error ticket."""

    DEVICE_NOT_REGISTERED = "DeviceNotRegistered"
    MESSAGE_TOO_BIG = "MessageTooBig"
    MESSAGE_RATE_EXCEEDED = "MessageRateExceeded"
    INVALID_CREDENTIALS = "InvalidCredentials"
