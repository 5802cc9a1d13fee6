from __future__ import annotations

from typing import Any, ContextManager, Protocol


class PushResponse(Protocol):
    """Minimal view of an HTTP response used by the client."""

    status_code: int
    reason_phrase: str

    def read(self) -> bytes:
        ...


class PushTransport(Protocol):
    """Protocol for the HTTP layer used by `PushClient`.

    The client only needs to open a streamed request, look at the status,
    and read the body. `httpx.Client` satisfies this protocol, so any client
    built with a custom `httpx` transport (or mocked with respx) can be
    injected.

    Minimal example:
        >>> import httpx
        >>> from pushclient import ClientConfig, PushClient
        >>> def handler(request: httpx.Request) -> httpx.Response:
        ...     return httpx.Response(200, json={"data": [{"status": "ok"}]})
        >>> fake = httpx.Client(base_url="https://exp.host", transport=httpx.MockTransport(handler))
        >>> client = PushClient(ClientConfig(http_client=fake))
    """

    def stream(self, method: str, url: str, *, json: Any = None) -> ContextManager[PushResponse]:
        """Send a request and yield the response without reading its body.

        The response must be released when the context exits.
        """
        ...

    def close(self) -> None:
        ...
