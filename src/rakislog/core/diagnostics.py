"""
Internal diagnostics for rakislog.

Diagnostics report what the package itself is doing (files loaded, loggers
built, sink errors that were contained) without going through the logger
registry, so they can never recurse into a misconfigured sink. Output is one
JSON object per line on stderr and is disabled unless
``RAKISLOG_INTERNAL_LOGGING_ENABLED`` is set.
"""

from __future__ import annotations

import sys
import time
from typing import Any

import orjson

# Cached on first use; tests reset it to None
_internal_logging_enabled: bool | None = None


def is_enabled() -> bool:
    global _internal_logging_enabled
    if _internal_logging_enabled is None:
        from .settings import Settings

        try:
            _internal_logging_enabled = Settings().internal_logging_enabled
        except ValueError:
            _internal_logging_enabled = False
    return _internal_logging_enabled


def set_enabled(enabled: bool | None) -> None:
    """Override the cached flag; None re-reads settings on next use."""
    global _internal_logging_enabled
    _internal_logging_enabled = enabled


def _emit(level: str, component: str, message: str, fields: dict[str, Any]) -> None:
    if not is_enabled():
        return
    payload = {
        "timestamp": time.time(),
        "level": level,
        "logger": "rakislog.internal",
        "component": component,
        "message": message,
        **fields,
    }
    try:
        data = orjson.dumps(payload, default=str)
        sys.stderr.write(data.decode("utf-8") + "\n")
    except (TypeError, OSError, ValueError):
        # stderr unavailable or unserializable field; diagnostics are best-effort
        return


def debug(component: str, message: str, **fields: Any) -> None:
    _emit("DEBUG", component, message, fields)


def warn(component: str, message: str, **fields: Any) -> None:
    _emit("WARN", component, message, fields)
