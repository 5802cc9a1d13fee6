"""Client for the Expo push notification API.

Usage:
    from pushclient import PushClient, PushMessage

    with PushClient() as client:
        tickets = client.publish_multiple([PushMessage(to="ExponentPushToken[xxxx]", body="Hi")])
"""

from .adapters import PushClient, default_http_client
from .config import (
    DEFAULT_BASE_API_URL,
    DEFAULT_HOST,
    ClientConfig,
    Settings,
    get_settings,
)
from .logging_config import configure_logging
from .types import (
    DeviceNotRegisteredError,
    InvalidCredentialsError,
    MessageRateExceededError,
    MessageTooBigError,
    Priority,
    PushDecodeError,
    PushError,
    PushErrorCode,
    PushHTTPStatusError,
    PushMessage,
    PushResponseEnvelope,
    PushServerError,
    PushServerErrorDetail,
    PushTicket,
    PushTicketDetails,
    PushTicketError,
    PushTicketStatus,
    PushTransport,
    PushTransportError,
    PushValidationError,
)
from .utils import chunk_push_messages, is_expo_push_token

__all__ = [
    "DEFAULT_BASE_API_URL",
    "DEFAULT_HOST",
    "ClientConfig",
    "Settings",
    "get_settings",
    "configure_logging",
    "PushClient",
    "default_http_client",
    "Priority",
    "PushErrorCode",
    "PushTicketStatus",
    "PushMessage",
    "PushTicket",
    "PushTicketDetails",
    "PushServerErrorDetail",
    "PushResponseEnvelope",
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
    "chunk_push_messages",
    "is_expo_push_token",
]
