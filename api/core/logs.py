"""
Logging setup for the server process.
"""

from __future__ import annotations

import logging

from core import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str | None = None) -> None:
    global _handler
    root = logging.getLogger()
    root.setLevel(level or settings.log_level())
    if _handler is not None:
        return None

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)
