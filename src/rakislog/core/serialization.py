"""
JSON-lines serialization for log records.

Sinks that write text share this serializer so console and file output look
the same. orjson returns bytes directly, which file and stream sinks can write
without an intermediate str.
"""

from __future__ import annotations

from typing import Any

import orjson

from .records import LogRecord


def _default(obj: Any) -> Any:
    """Default serializer hook for unsupported context values.

    Keep minimal; callers should pass plain JSON types in context.
    """
    if hasattr(obj, "model_dump"):
        return obj.model_dump(exclude_none=True)
    return repr(obj)


def serialize_record(record: LogRecord) -> bytes:
    """Serialize a record to one JSON line (without the trailing newline)."""
    return orjson.dumps(record.to_dict(), default=_default)


def serialize_record_line(record: LogRecord) -> bytes:
    """Serialize a record to one newline-terminated JSON line."""
    return orjson.dumps(
        record.to_dict(), default=_default, option=orjson.OPT_APPEND_NEWLINE
    )
