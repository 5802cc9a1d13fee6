"""Helpers for working with push tokens and message lists."""

from __future__ import annotations

import re
from typing import Any, Iterator, Sequence, TypeVar

T = TypeVar("T")

# Expo accepts at most this many messages per send request.
MAX_MESSAGES_PER_REQUEST = 100

_WRAPPED_TOKEN = re.compile(r"^Expo(nent)?PushToken\[.+\]$")
_BARE_TOKEN = re.compile(r"^[a-zA-Z0-9\-_]{22,}$")


def is_expo_push_token(token: Any) -> bool:
    """Return True if `token` looks like an Expo push token.

    Accepts `ExponentPushToken[...]`, `ExpoPushToken[...]` and the bare
    identifier form. This is a shape check only; the service is the
    authority on whether a token is registered.
    """
    if not isinstance(token, str):
        return False
    return bool(_WRAPPED_TOKEN.match(token) or _BARE_TOKEN.match(token))


def chunk_push_messages(
    messages: Sequence[T], size: int = MAX_MESSAGES_PER_REQUEST
) -> Iterator[list[T]]:
    """Yield consecutive chunks of `messages`, preserving order."""
    if size < 1:
        raise ValueError("chunk size must be at least 1")
    for start in range(0, len(messages), size):
        yield list(messages[start : start + size])
