"""
Build resolver: turns configuration entries into registered loggers.

Entries are resolved against the registry's current state. The root entry is
installed first, then the remaining entries shallowest first (ties broken by
full name), so an entry always sees its configured ancestors already built
and can inherit their sink.
"""

from __future__ import annotations

from typing import Iterable, cast

from ..core import diagnostics
from ..core.errors import (
    ErrorCategory,
    ErrorSeverity,
    MissingLevelError,
    create_error_context,
)
from ..core.levels import Level
from ..core.logger import Logger
from ..core.registry import LoggerRegistry
from ..plugins.sinks import CONSOLE, ConsoleSink, create_sink, sink_type_of
from .entry import ConfigEntry


def build_order(entries: Iterable[ConfigEntry]) -> list[ConfigEntry]:
    """Order entries parent-first; a repeated full name keeps its last entry."""
    latest = {entry.full_name: entry for entry in entries}
    return sorted(latest.values(), key=lambda e: (e.depth, e.full_name))


def resolve_entry(entry: ConfigEntry, parent: Logger | None) -> ConfigEntry:
    """Fill in the entry's type and sink.

    Raises:
        MissingLevelError: If the entry has no level
        UnrecognizedSinkTypeError: If the type has no registration
        UnresolvedSinkError: If the type cannot be built from options
        SinkOptionsError: If the sink rejects the options
    """
    if entry.level is None:
        raise MissingLevelError(
            f"Logger '{entry.full_name}' does not specify a level",
            error_context=create_error_context(
                ErrorCategory.CONFIGURATION,
                ErrorSeverity.HIGH,
                logger=entry.full_name,
            ),
        )
    if entry.type is None:
        if entry.sink is not None:
            return entry.model_copy(update={"type": sink_type_of(entry.sink)})
        if parent is None:
            return entry.model_copy(update={"type": CONSOLE, "sink": ConsoleSink()})
        return entry.model_copy(
            update={"type": sink_type_of(parent.sink), "sink": parent.sink}
        )
    if entry.sink is None:
        sink = create_sink(entry.type, entry.options, logger=entry.full_name)
        return entry.model_copy(update={"sink": sink})
    return entry


def build_logger(
    entry: ConfigEntry, parent: Logger | None, registry: LoggerRegistry
) -> Logger:
    resolved = resolve_entry(entry, parent)
    # resolve_entry() raises MissingLevelError for entries without a level
    level = cast(Level, resolved.level)
    return Logger(
        resolved.name,
        resolved.sink,
        resolved.full_name,
        level,
        metrics=registry.metrics,
    )


def build(
    registry: LoggerRegistry,
    entries: Iterable[ConfigEntry],
    *,
    root: ConfigEntry | None = None,
) -> None:
    """Resolve ``entries`` (and ``root``) and install them into ``registry``.

    Stops at the first failing entry; loggers installed before it remain.

    Raises:
        ConfigurationError: For entries that cannot be resolved
        DuplicateLoggerError: For entries already present in the registry
    """
    if root is not None:
        registry.set_root(build_logger(root, None, registry))
    for entry in build_order(entries):
        parent = registry.find_logger(entry.full_name)
        logger = build_logger(entry, parent, registry)
        registry.add_logger(logger)
        diagnostics.debug(
            "config",
            "logger built",
            logger=logger.full_name,
            threshold=logger.threshold.name,
            sink_type=sink_type_of(logger.sink),
            parent=parent.full_name,
        )
    registry.root.info(
        f"Logger initialized with root level '{registry.root.threshold.name}'"
    )


__all__ = ["build", "build_logger", "build_order", "resolve_entry"]
