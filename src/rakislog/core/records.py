"""
Log record emitted by loggers to their sinks.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Mapping

from .levels import Level


@dataclass(frozen=True)
class LogRecord:
    """One emitted log line, prior to formatting by a sink."""

    logger: str
    level: Level
    message: str
    timestamp: float = field(default_factory=time.time)
    context: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert record to a dictionary for serialization."""
        data: dict[str, Any] = {
            "timestamp": self.timestamp,
            "level": self.level.name,
            "logger": self.logger,
            "message": self.message,
        }
        if self.context:
            data["context"] = dict(self.context)
        return data

    def __str__(self) -> str:
        return f"{self.level.name} [{self.logger}] {self.message}"
