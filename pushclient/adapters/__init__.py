"""HTTP adapters for push services."""

from .expo import PushClient, check_status, default_http_client

__all__ = ["PushClient", "check_status", "default_http_client"]
