"""Logging setup for applications embedding the push client.

The library itself only emits records on `pushclient.*` loggers; call
`configure_logging()` from a script or service entry point to see them.
"""

from __future__ import annotations

import logging
from typing import Optional

from pushclient.config import get_settings

logger = logging.getLogger("pushclient")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Install a root handler at `level`, or `Settings.log_level` if omitted.

    Does nothing when the host application already configured logging. The
    httpx and httpcore loggers are capped at WARNING so request lines do not
    drown out push failures.
    """
    if logger.handlers or logging.getLogger().handlers:
        return

    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)
