"""
Properties-style configuration loader.

Each content line configures one logger::

    # comment            ; also a comment
    rootLogger = INFO, Console
    a.b        = DEBUG, File, path=a.log, append

The left side is the logger's full name; the right side is a comma list of
tokens, classified in order as a level keyword, a sink type keyword or a sink
option. Options (``key=value`` or a bare ``key`` meaning ``"true"``) are only
accepted once the line has selected the File type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from ..core import diagnostics
from ..core.errors import (
    ConfigurationError,
    DuplicateLevelError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidOptionForTypeError,
    MissingLevelError,
    MissingSourceFileError,
    create_error_context,
)
from ..core.levels import Level, parse_level
from ..core.logger import last_segment
from ..plugins.sinks import CONSOLE, FILE, ConsoleSink
from .entry import ConfigEntry

COMMENT_PREFIXES = ("#", ";")

# Only these type keywords can appear in a properties source
_TYPE_KEYWORDS = {CONSOLE.lower(): CONSOLE, FILE.lower(): FILE}


@dataclass
class ParsedConfig:
    """Entries read from one source: the root entry plus the rest in order."""

    root: ConfigEntry | None = None
    entries: list[ConfigEntry] = field(default_factory=list)

    def add(self, entry: ConfigEntry) -> None:
        if entry.is_root:
            self.root = entry
        else:
            self.entries.append(entry)


def split_line(line: str) -> tuple[str, str] | None:
    """Split a content line into (full_name, value).

    Returns None for blank and comment lines. A line without ``=`` yields an
    empty value.
    """
    line = line.strip()
    if not line or line.startswith(COMMENT_PREFIXES):
        return None
    full_name, _, value = line.partition("=")
    full_name = full_name.strip()
    if not full_name:
        return None
    return full_name, value.strip()


def _context(
    source: str | None, line_no: int | None, **details: str | None
) -> ErrorContext:
    return create_error_context(
        ErrorCategory.CONFIGURATION,
        ErrorSeverity.HIGH,
        source=source,
        line=line_no,
        **details,
    )


def parse_entry(
    full_name: str,
    value: str,
    *,
    source: str | None = None,
    line_no: int | None = None,
) -> ConfigEntry:
    """Classify the tokens of one line into a ConfigEntry.

    Raises:
        MissingLevelError: No level keyword on the line
        DuplicateLevelError: More than one level keyword on the line
        InvalidOptionForTypeError: An option before (or without) ``File``
        ConfigurationError: The same option key twice on the line
    """
    level: Level | None = None
    sink_type: str | None = None
    options: dict[str, str] = {}

    for raw in value.split(","):
        token = raw.strip()
        if not token:
            continue

        parsed_level = parse_level(token)
        if parsed_level is not None:
            if level is not None:
                raise DuplicateLevelError(
                    f"Logger '{full_name}' names more than one level "
                    f"('{level.name}', '{parsed_level.name}')",
                    error_context=_context(source, line_no, logger=full_name),
                )
            level = parsed_level
            continue

        keyword = _TYPE_KEYWORDS.get(token.lower())
        if keyword is not None:
            sink_type = keyword
            continue

        if sink_type != FILE:
            raise InvalidOptionForTypeError(
                f"Unknown option '{token}' for logger type '{sink_type}'",
                error_context=_context(
                    source, line_no, logger=full_name, option=token
                ),
            )
        key, sep, opt_value = token.partition("=")
        key = key.strip()
        if key in options:
            raise ConfigurationError(
                f"Option '{key}' given more than once for logger '{full_name}'",
                error_context=_context(source, line_no, logger=full_name, option=key),
            )
        options[key] = opt_value.strip() if sep else "true"

    if level is None:
        raise MissingLevelError(
            f"Logger '{full_name}' does not specify a level",
            error_context=_context(source, line_no, logger=full_name),
        )

    # Console needs no options so it is attached now; File waits for build()
    sink = ConsoleSink() if sink_type == CONSOLE else None
    return ConfigEntry(
        name=last_segment(full_name),
        full_name=full_name,
        level=level,
        type=sink_type,
        sink=sink,
        options=options,
    )


def parse_lines(
    lines: Iterable[str],
    *,
    source: str | None = None,
    into: ParsedConfig | None = None,
) -> ParsedConfig:
    """Parse properties lines, stopping at the first invalid line."""
    parsed = into if into is not None else ParsedConfig()
    for line_no, line in enumerate(lines, start=1):
        parts = split_line(line)
        if parts is None:
            continue
        full_name, value = parts
        parsed.add(parse_entry(full_name, value, source=source, line_no=line_no))
    return parsed


def load_file(
    path: str | Path | None,
    *,
    encoding: str = "utf-8",
    into: ParsedConfig | None = None,
) -> ParsedConfig:
    """Read and parse a properties file line by line.

    Raises:
        MissingSourceFileError: If no path is given, it cannot be read or
            it cannot be decoded with ``encoding``
    """
    if path is None:
        raise MissingSourceFileError("No configuration file provided to load.")
    source = str(path)
    try:
        with open(path, encoding=encoding) as fh:
            parsed = parse_lines(fh, source=source, into=into)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise MissingSourceFileError(
            f"Configuration file '{source}' not found or unreadable.",
            cause=e,
            error_context=create_error_context(
                ErrorCategory.IO, ErrorSeverity.HIGH, source=source
            ),
        ) from e
    diagnostics.debug(
        "config",
        "configuration file loaded",
        source=source,
        entries=len(parsed.entries),
        root=parsed.root is not None,
    )
    return parsed


__all__ = [
    "ParsedConfig",
    "split_line",
    "parse_entry",
    "parse_lines",
    "load_file",
]
