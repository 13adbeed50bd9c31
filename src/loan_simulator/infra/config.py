from __future__ import annotations

import logging
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def log_level() -> int:
    name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)

    if not isinstance(level, int):
        raise RuntimeError(f"LOG_LEVEL has an unknown value: {name}")

    return level


def server_host() -> str:
    return os.getenv("HOST", "127.0.0.1")


def server_port() -> int:
    raw = os.getenv("PORT", "8000")

    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"PORT must be an integer, got: {raw}") from exc


def app_timezone() -> ZoneInfo:
    """Timezone used to decide which calendar day "today" is."""
    name = os.getenv("APP_TIMEZONE", "UTC")

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise RuntimeError(f"APP_TIMEZONE has an unknown value: {name}") from exc
