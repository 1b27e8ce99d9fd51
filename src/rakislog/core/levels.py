"""Severity levels for hierarchical loggers.

Levels are ordered by priority; a logger emits a record only when the
record's level is at or above the logger's threshold.

Example:
    from rakislog.core.levels import Level, parse_level

    parse_level("WARN")      # Level.WARN
    parse_level("warning")   # None: keywords are exact
    Level.DEBUG < Level.INFO  # True
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class Level(IntEnum):
    """Ordered severity levels; lower values are more verbose."""

    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    FATAL = 50

    def __str__(self) -> str:
        return self.name


_LEVEL_KEYWORDS: Final[dict[str, Level]] = {level.name: level for level in Level}

# Accepted by coerce_level() only; properties sources use the exact keywords
_ALIASES: Final[dict[str, Level]] = {
    "WARNING": Level.WARN,
    "CRITICAL": Level.FATAL,
}


def parse_level(token: str) -> Level | None:
    """Return the level named by ``token`` or None.

    Matching is exact: only the upper-case keywords TRACE, DEBUG, INFO, WARN,
    ERROR and FATAL are recognized.
    """
    return _LEVEL_KEYWORDS.get(token)


def coerce_level(value: Level | str | int) -> Level:
    """Coerce a programmatic level argument to a Level.

    Args:
        value: Level member, level name (case-insensitive, WARNING and
               CRITICAL accepted as aliases) or numeric priority.

    Raises:
        ValueError: If the value does not name a level
    """
    if isinstance(value, Level):
        return value
    if isinstance(value, int):
        return Level(value)
    name = value.strip().upper()
    level = _LEVEL_KEYWORDS.get(name) or _ALIASES.get(name)
    if level is None:
        raise ValueError(f"Unknown log level '{value}'")
    return level


def get_all_levels() -> dict[str, int]:
    """Get all level keywords and their priorities."""
    return {name: int(level) for name, level in _LEVEL_KEYWORDS.items()}
