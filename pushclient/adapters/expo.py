from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

import httpx
from pydantic import ValidationError

from pushclient.config import (
    DEFAULT_BASE_API_URL,
    DEFAULT_HOST,
    DEFAULT_TIMEOUT_SECONDS,
    ClientConfig,
)
from pushclient.types import (
    PushDecodeError,
    PushHTTPStatusError,
    PushMessage,
    PushResponse,
    PushResponseEnvelope,
    PushServerError,
    PushTicket,
    PushTransport,
    PushTransportError,
    PushValidationError,
)

logger = logging.getLogger(__name__)


def default_http_client(
    host: str, access_token: str = "", timeout: float = DEFAULT_TIMEOUT_SECONDS
) -> httpx.Client:
    """Build the `httpx.Client` used when no transport is injected."""
    headers: Dict[str, str] = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    return httpx.Client(base_url=host, headers=headers, timeout=timeout)


def check_status(response: PushResponse) -> None:
    if 200 <= response.status_code <= 299:
        return
    raise PushHTTPStatusError(response.status_code, response.reason_phrase, response)


def _validate_messages(messages: Sequence[PushMessage]) -> None:
    for message in messages:
        if not message.to:
            raise PushValidationError("no recipients")
        for recipient in message.to:
            if not recipient:
                raise PushValidationError("invalid push token")


class PushClient:
    """Client for the Expo push notification API.

    Sends one or many `PushMessage` objects in a single request and pairs the
    returned tickets with the messages by position. Configuration is resolved
    once here; the instance holds no per-call state and can be shared as long
    as the transport can.

    See: https://docs.expo.dev/push-notifications/sending-notifications/

    Example:
        >>> from pushclient import PushClient, PushMessage
        >>> with PushClient() as client:
        ...     ticket = client.publish(PushMessage(to="ExponentPushToken[xxxx]", body="Hi"))
    """

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        config = config or ClientConfig()
        self.host = config.host or DEFAULT_HOST
        self.api_url = config.api_url or DEFAULT_BASE_API_URL
        self.access_token = config.access_token or ""
        self._owns_transport = config.http_client is None
        if config.http_client is not None:
            self.http_client: PushTransport = config.http_client
        else:
            self.http_client = default_http_client(
                self.host,
                self.access_token,
                config.timeout or DEFAULT_TIMEOUT_SECONDS,
            )

    def send_endpoint(self) -> str:
        return f"{self.api_url}/push/send"

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self.http_client.close()

    def __enter__(self) -> "PushClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def publish(self, message: PushMessage) -> PushTicket:
        """Send a single push notification and return its ticket."""
        return self.publish_multiple([message])[0]

    def publish_multiple(self, messages: Sequence[PushMessage]) -> list[PushTicket]:
        """Send several push notifications in one request.

        Returns one ticket per message, in input order, each carrying the
        message it answers in `push_message`. Tickets with status "error" are
        returned like any other; only whole-request failures raise.

        The service sends no per-item identifier, so pairing relies on it
        answering in request order.

        Raises:
            PushValidationError: a message has no recipients or an empty token.
            PushTransportError: the request could not be sent.
            PushHTTPStatusError: the service answered with a non-2xx status.
            PushDecodeError: the body was not a valid response envelope.
            PushServerError: the envelope reported errors, had no data, or
                did not contain exactly one ticket per message.
        """
        _validate_messages(messages)

        payload = [message.to_payload() for message in messages]
        logger.debug("Sending %d push message(s) to %s", len(payload), self.send_endpoint())

        try:
            with self.http_client.stream("POST", self.send_endpoint(), json=payload) as response:
                check_status(response)
                envelope = self._decode(response)
        except httpx.RequestError as exc:
            logger.warning("Push request failed: %s", exc)
            raise PushTransportError(str(exc)) from exc

        # If there are errors with the entire request, raise an error now.
        if envelope.errors:
            logger.warning("Push service rejected batch: %d error(s)", len(envelope.errors))
            raise PushServerError("Invalid server response", response, envelope, envelope.errors)
        if envelope.data is None:
            raise PushServerError("Invalid server response", response, envelope, None)
        if len(envelope.data) != len(messages):
            raise PushServerError(
                "Mismatched response length. Expected %d receipts but only received %d"
                % (len(messages), len(envelope.data)),
                response,
                envelope,
                None,
            )

        # Tickets come back in request order; attach the original message for reference.
        for ticket, message in zip(envelope.data, messages):
            ticket.push_message = message
        return envelope.data

    @staticmethod
    def _decode(response: PushResponse) -> PushResponseEnvelope:
        try:
            body = response.read()
        except httpx.DecodingError as exc:
            raise PushDecodeError(f"Unable to read push response: {exc}", response) from exc
        try:
            return PushResponseEnvelope.model_validate_json(body)
        except ValidationError as exc:
            raise PushDecodeError(f"Unable to decode push response: {exc}", response) from exc
