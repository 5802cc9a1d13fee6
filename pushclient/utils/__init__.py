"""Utility functions for the push client."""

from .tokens import MAX_MESSAGES_PER_REQUEST, chunk_push_messages, is_expo_push_token

__all__ = [
    "MAX_MESSAGES_PER_REQUEST",
    "chunk_push_messages",
    "is_expo_push_token",
]
