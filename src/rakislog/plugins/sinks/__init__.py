"""
Sink capability contract and the sink type registry.

A sink is any object with a ``type`` tag and ``emit``/``flush``/``close``
methods. Sink types that can be built from a mapping of string options
register a factory under their tag; the build resolver uses it to create
sinks for configuration entries that name a type but carry no instance.
"""

from __future__ import annotations

from typing import Callable, Mapping, Protocol, runtime_checkable

from pydantic import ValidationError

from ...core.errors import (
    ErrorCategory,
    ErrorSeverity,
    SinkOptionsError,
    UnrecognizedSinkTypeError,
    UnresolvedSinkError,
    create_error_context,
)
from ...core.records import LogRecord
from ..utils import get_sink_type, normalize_sink_type
from .console import ConsoleSink, ConsoleSinkConfig
from .file import FileSink, FileSinkConfig
from .reactive import ReactiveSink


@runtime_checkable
class BaseSink(Protocol):
    """Base sink interface.

    Sinks emit finished records to an external destination (console, file,
    callback). ``close()`` may be called more than once.
    """

    type: str

    def emit(self, record: LogRecord) -> None:  # noqa: D401
        """Write a single record to the sink destination."""
        ...

    def flush(self) -> None: ...

    def close(self) -> None: ...


SinkFactory = Callable[[Mapping[str, str]], BaseSink]

CONSOLE = ConsoleSink.type
FILE = FileSink.type
REACTIVE = ReactiveSink.type
CUSTOM = "Custom"

# normalized tag -> (canonical tag, factory or None when options cannot build it)
_SINK_TYPES: dict[str, tuple[str, SinkFactory | None]] = {}


def register_sink_type(
    type_name: str,
    factory: SinkFactory | None = None,
    *,
    replace: bool = False,
) -> None:
    """Register a sink type tag.

    Args:
        type_name: Canonical tag (e.g. "Console"); lookups are case-insensitive.
        factory: Builds a sink from string options. None marks a type whose
                 sinks must be supplied as instances (Reactive, Custom).
        replace: Allow overwriting an existing registration.

    Raises:
        ValueError: If the tag is empty or already registered
    """
    key = normalize_sink_type(type_name)
    if not key:
        raise ValueError("Sink type name must not be empty")
    if key in _SINK_TYPES and not replace:
        raise ValueError(f"Sink type '{type_name}' already registered")
    _SINK_TYPES[key] = (type_name.strip(), factory)


def canonical_sink_type(type_name: str) -> str | None:
    """Return the registered spelling of ``type_name`` or None if unknown."""
    entry = _SINK_TYPES.get(normalize_sink_type(type_name))
    return entry[0] if entry else None


def is_known_sink_type(type_name: str) -> bool:
    return normalize_sink_type(type_name) in _SINK_TYPES


def get_sink_factory(type_name: str) -> SinkFactory | None:
    """Return the factory for ``type_name``.

    Raises:
        UnrecognizedSinkTypeError: If the type was never registered
    """
    entry = _SINK_TYPES.get(normalize_sink_type(type_name))
    if entry is None:
        raise UnrecognizedSinkTypeError(
            f"Unrecognized sink type '{type_name}'",
            error_context=create_error_context(
                ErrorCategory.SINK, ErrorSeverity.HIGH, sink_type=type_name
            ),
        )
    return entry[1]


def sink_type_of(sink: object) -> str:
    """Return the type tag a sink instance reports."""
    return get_sink_type(sink)


def create_sink(
    type_name: str,
    options: Mapping[str, str],
    *,
    logger: str | None = None,
) -> BaseSink:
    """Create a sink of ``type_name`` from string options.

    Raises:
        UnrecognizedSinkTypeError: If the type was never registered
        UnresolvedSinkError: If the type cannot be built from options
        SinkOptionsError: If the sink rejects the options
    """
    factory = get_sink_factory(type_name)
    context = create_error_context(
        ErrorCategory.SINK, ErrorSeverity.HIGH, sink_type=type_name, logger=logger
    )
    if factory is None:
        raise UnresolvedSinkError(
            f"No sink provided for logger '{logger}' of type '{type_name}'",
            error_context=context,
        )
    try:
        return factory(options)
    except ValidationError as e:
        raise SinkOptionsError(
            f"Invalid options for {type_name} sink of logger '{logger}': "
            f"{e.error_count()} error(s): "
            + "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'options'}: {err['msg']}"
                for err in e.errors()
            ),
            cause=e,
            error_context=context,
        ) from e


def _reset_sink_types() -> None:
    """Restore the built-in registrations (for testing only)."""
    _SINK_TYPES.clear()
    register_sink_type(CONSOLE, ConsoleSink.from_config)
    register_sink_type(FILE, FileSink.from_config)
    register_sink_type(REACTIVE, None)
    register_sink_type(CUSTOM, None)


_reset_sink_types()


__all__ = [
    "BaseSink",
    "SinkFactory",
    "CONSOLE",
    "FILE",
    "REACTIVE",
    "CUSTOM",
    "ConsoleSink",
    "ConsoleSinkConfig",
    "FileSink",
    "FileSinkConfig",
    "ReactiveSink",
    "register_sink_type",
    "canonical_sink_type",
    "is_known_sink_type",
    "get_sink_factory",
    "sink_type_of",
    "create_sink",
]
