"""
Public entrypoints for rakislog.

Hierarchical, name-scoped loggers: a logger such as ``app.db.pool`` that was
never configured inherits its sink and threshold from the closest configured
ancestor (``app.db``, then ``app``, then the root logger).

Example:
    import rakislog
    from rakislog import Level

    rakislog.configuration_from_file("rakisLog.properties").load().build()

    log = rakislog.get_logger("app.db.pool")
    log.debug("connection acquired", pool_size=4)

Every function here works on the process-default registry unless given an
explicit ``registry=``; tests and embedded uses can keep their own
``LoggerRegistry`` instances.
"""

from __future__ import annotations

from typing import Any

from ._version import __version__
from .config import (
    ConfigEntry,
    Configuration,
    TargetDirectory,
    configuration,
    configuration_from_file,
    default_configuration,
)
from .core.errors import (
    ConfigurationError,
    DuplicateLevelError,
    DuplicateLoggerError,
    InvalidOptionForTypeError,
    MissingLevelError,
    MissingSourceFileError,
    RakisLogError,
    RegistryError,
    SinkOptionsError,
    UnrecognizedSinkTypeError,
    UnresolvedSinkError,
)
from .core.levels import Level
from .core.logger import ROOT_LOGGER_NAME, Logger
from .core.records import LogRecord
from .core.registry import LoggerRegistry, get_default_registry
from .core.settings import Settings
from .plugins.sinks import (
    BaseSink,
    ConsoleSink,
    FileSink,
    ReactiveSink,
    register_sink_type,
)


def get_registry() -> LoggerRegistry:
    """Return the process-default logger registry."""
    return get_default_registry()


def _registry(registry: LoggerRegistry | None) -> LoggerRegistry:
    return registry if registry is not None else get_default_registry()


def get_logger(target: Any = None, *, registry: LoggerRegistry | None = None) -> Logger:
    """Return the logger for a dotted name, class or module.

    Unconfigured names get a logger created on first use that inherits the
    closest configured ancestor's sink and threshold; later calls return the
    same logger. ``None`` or an empty name returns the root logger.
    """
    reg = _registry(registry)
    if target is None:
        return reg.root
    return reg.get_logger(target)


def find_logger(path: str | None, *, registry: LoggerRegistry | None = None) -> Logger:
    """Return the logger registered for ``path`` or its closest ancestor."""
    return _registry(registry).find_logger(path)


def add_logger(logger: Logger, *, registry: LoggerRegistry | None = None) -> None:
    """Register a logger; raises DuplicateLoggerError if its name is taken."""
    _registry(registry).add_logger(logger)


def clear_loggers(*, registry: LoggerRegistry | None = None) -> None:
    """Drop every logger and reinstall the default console root at INFO."""
    _registry(registry).clear()


__all__ = [
    "__version__",
    "VERSION",
    # Registry
    "LoggerRegistry",
    "Logger",
    "LogRecord",
    "Level",
    "ROOT_LOGGER_NAME",
    "get_registry",
    "get_logger",
    "find_logger",
    "add_logger",
    "clear_loggers",
    # Configuration
    "ConfigEntry",
    "Configuration",
    "TargetDirectory",
    "Settings",
    "configuration",
    "configuration_from_file",
    "default_configuration",
    # Sinks
    "BaseSink",
    "ConsoleSink",
    "FileSink",
    "ReactiveSink",
    "register_sink_type",
    # Errors
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

# Version info for compatibility
VERSION = __version__
