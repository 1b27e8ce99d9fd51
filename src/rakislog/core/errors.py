"""
Error hierarchy for rakislog.

Every failure raised by the loader, the build resolver or the registry is a
``RakisLogError`` carrying a category, a severity and an optional structured
context. Errors are fatal to the operation that raised them; nothing in the
package retries or recovers locally.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Broad origin of an error."""

    CONFIGURATION = "configuration"
    REGISTRY = "registry"
    SINK = "sink"
    IO = "io"


class ErrorSeverity(str, Enum):
    """How much of the system an error affects."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class ErrorContext:
    """Structured details attached to an error."""

    category: ErrorCategory
    severity: ErrorSeverity
    source: str | None = None
    line: int | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "category": self.category.value,
            "severity": self.severity.value,
        }
        if self.source is not None:
            data["source"] = self.source
        if self.line is not None:
            data["line"] = self.line
        data.update(self.details)
        return data


def create_error_context(
    category: ErrorCategory,
    severity: ErrorSeverity,
    *,
    source: str | None = None,
    line: int | None = None,
    **details: Any,
) -> ErrorContext:
    """Build an ErrorContext, dropping details that are None."""
    return ErrorContext(
        category=category,
        severity=severity,
        source=source,
        line=line,
        details={k: v for k, v in details.items() if v is not None},
    )


class RakisLogError(Exception):
    """Base class for all rakislog errors."""

    default_category: ErrorCategory = ErrorCategory.CONFIGURATION
    default_severity: ErrorSeverity = ErrorSeverity.HIGH

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        severity: ErrorSeverity | None = None,
        cause: BaseException | None = None,
        error_context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.severity = severity or self.default_severity
        self.cause = cause
        self.error_context = error_context or create_error_context(
            self.category, self.severity
        )

    @property
    def line(self) -> int | None:
        return self.error_context.line

    @property
    def source(self) -> str | None:
        return self.error_context.source

    def to_dict(self) -> dict[str, Any]:
        data = {"error.type": type(self).__name__, "error.message": self.message}
        data.update(self.error_context.to_dict())
        if self.cause is not None:
            data["error.cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return data


class ConfigurationError(RakisLogError):
    """A configuration source or builder produced an unusable configuration."""


class MissingSourceFileError(ConfigurationError):
    """The configuration file is absent, unreadable or was never named."""

    default_category = ErrorCategory.IO


class MissingLevelError(ConfigurationError):
    """A configuration line or entry has no severity level."""


class DuplicateLevelError(ConfigurationError):
    """A configuration line names more than one severity level."""


class InvalidOptionForTypeError(ConfigurationError):
    """A sink option appeared for a sink type that takes no options."""


class UnresolvedSinkError(ConfigurationError):
    """The build could not determine a sink for an entry."""

    default_category = ErrorCategory.SINK


class UnrecognizedSinkTypeError(ConfigurationError):
    """An entry names a sink type with no registered factory."""

    default_category = ErrorCategory.SINK


class SinkOptionsError(ConfigurationError):
    """A sink rejected the options it was configured with."""

    default_category = ErrorCategory.SINK


class RegistryError(RakisLogError):
    """The logger registry rejected an operation."""

    default_category = ErrorCategory.REGISTRY


class DuplicateLoggerError(RegistryError):
    """A logger with the same full name is already registered."""

    def __init__(self, full_name: str) -> None:
        super().__init__(
            f"Logger '{full_name}' is already registered",
            error_context=create_error_context(
                ErrorCategory.REGISTRY, ErrorSeverity.HIGH, logger=full_name
            ),
        )
        self.full_name = full_name


__all__ = [
    "ErrorCategory",
    "ErrorSeverity",
    "ErrorContext",
    "create_error_context",
    "RakisLogError",
    "ConfigurationError",
    "MissingSourceFileError",
    "MissingLevelError",
    "DuplicateLevelError",
    "InvalidOptionForTypeError",
    "UnresolvedSinkError",
    "UnrecognizedSinkTypeError",
    "SinkOptionsError",
    "RegistryError",
    "DuplicateLoggerError",
]
