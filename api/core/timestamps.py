"""
Timestamp rendering shared by every response that carries a timestamp.

Records are rendered as `YYYY-MM-DD HH:MM:SS` in the server's local time.
"""

from __future__ import annotations

from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value: datetime | None) -> str | None:
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime(TIMESTAMP_FORMAT)