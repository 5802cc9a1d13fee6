"""Configuration for the push client."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from pushclient.types import PushTransport


DEFAULT_HOST = "https://exp.host"
DEFAULT_BASE_API_URL = "/--/api/v2"
DEFAULT_TIMEOUT_SECONDS = 30.0


def _env_float(name: str, fallback: float) -> float:
    try:
        return float(os.getenv(name, str(fallback)))
    except (TypeError, ValueError):
        return fallback


class Settings(BaseModel):
    """Environment-backed settings.

    Values are read when the model is instantiated, so tests can adjust the
    environment and call `get_settings.cache_clear()`.
    """

    expo_host: str = Field(default_factory=lambda: os.getenv("EXPO_HOST", DEFAULT_HOST))
    expo_api_url: str = Field(
        default_factory=lambda: os.getenv("EXPO_API_URL", DEFAULT_BASE_API_URL)
    )
    expo_access_token: str = Field(default_factory=lambda: os.getenv("EXPO_ACCESS_TOKEN", ""))
    request_timeout: float = Field(
        default_factory=lambda: _env_float("EXPO_REQUEST_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)
    )
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@dataclass(frozen=True)
class ClientConfig:
    """Optional overrides for `PushClient`.

    Every field may be left empty; `PushClient` resolves each one to its
    default independently at construction time.

    Attributes:
        host: Origin of the push service, e.g. "https://exp.host".
        api_url: Versioned API path prefix, e.g. "/--/api/v2".
        access_token: Bearer credential; empty sends requests unauthenticated.
        http_client: Pre-built transport. When omitted the client builds an
            `httpx.Client` for `host` and `access_token`.
        timeout: Timeout in seconds for the default transport.
    """

    host: Optional[str] = None
    api_url: Optional[str] = None
    access_token: Optional[str] = None
    http_client: Optional["PushTransport"] = None
    timeout: Optional[float] = None

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ClientConfig":
        settings = settings or get_settings()
        return cls(
            host=settings.expo_host,
            api_url=settings.expo_api_url,
            access_token=settings.expo_access_token,
            timeout=settings.request_timeout,
        )
