"""
Named, level-gated loggers.

A Logger is fixed once created: its name, full dotted name, threshold and
sink never change. Loggers that share an ancestor's configuration share the
ancestor's sink instance.
"""

from __future__ import annotations

from types import TracebackType
from typing import TYPE_CHECKING, Any

from . import diagnostics
from .levels import Level, coerce_level
from .records import LogRecord

if TYPE_CHECKING:
    from ..metrics.metrics import MetricsCollector
    from ..plugins.sinks import BaseSink

ROOT_LOGGER_NAME = "rootLogger"


def split_name(full_name: str) -> tuple[str, ...]:
    """Split a dotted full name into its path segments."""
    return tuple(full_name.split("."))


def last_segment(full_name: str) -> str:
    return full_name.rsplit(".", 1)[-1]


class Logger:
    """Immutable logger bound to a sink and a threshold."""

    __slots__ = (
        "_name",
        "_full_name",
        "_segments",
        "_threshold",
        "_sink",
        "_metrics",
    )

    def __init__(
        self,
        name: str,
        sink: BaseSink,
        full_name: str | None = None,
        threshold: Level | str | int = Level.INFO,
        *,
        metrics: MetricsCollector | None = None,
    ) -> None:
        full_name = full_name or name
        if not full_name:
            raise ValueError("Logger full name must not be empty")
        self._name = name or last_segment(full_name)
        self._full_name = full_name
        self._segments = split_name(full_name)
        self._threshold = coerce_level(threshold)
        self._sink = sink
        self._metrics = metrics

    @classmethod
    def child_of(
        cls,
        parent: Logger,
        full_name: str,
        *,
        metrics: MetricsCollector | None = None,
    ) -> Logger:
        """Create a logger for ``full_name`` with ``parent``'s sink and threshold."""
        return cls(
            last_segment(full_name),
            parent.sink,
            full_name,
            parent.threshold,
            metrics=metrics if metrics is not None else parent._metrics,
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def segments(self) -> tuple[str, ...]:
        return self._segments

    @property
    def threshold(self) -> Level:
        return self._threshold

    @property
    def sink(self) -> BaseSink:
        return self._sink

    @property
    def is_root(self) -> bool:
        return self._full_name == ROOT_LOGGER_NAME

    def is_enabled(self, level: Level | str | int) -> bool:
        return coerce_level(level) >= self._threshold

    def log(self, level: Level | str | int, message: str, **context: Any) -> bool:
        """Emit ``message`` at ``level`` if it meets the threshold.

        Sink errors are contained and reported through diagnostics.

        Returns:
            True if the record was handed to the sink.
        """
        lvl = coerce_level(level)
        if lvl < self._threshold:
            if self._metrics is not None:
                self._metrics.record_suppressed()
            return False
        record = LogRecord(
            logger=self._full_name, level=lvl, message=message, context=context
        )
        try:
            self._sink.emit(record)
        except Exception as e:
            diagnostics.warn(
                "sink",
                "sink emit error",
                logger=self._full_name,
                sink_type=getattr(self._sink, "type", None),
                reason=type(e).__name__,
                detail=str(e),
            )
            if self._metrics is not None:
                self._metrics.record_sink_error(
                    sink_type=getattr(self._sink, "type", None)
                )
            return False
        if self._metrics is not None:
            self._metrics.record_emitted(level=lvl.name)
        return True

    def trace(self, message: str, **context: Any) -> bool:
        return self.log(Level.TRACE, message, **context)

    def debug(self, message: str, **context: Any) -> bool:
        return self.log(Level.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> bool:
        return self.log(Level.INFO, message, **context)

    def warn(self, message: str, **context: Any) -> bool:
        return self.log(Level.WARN, message, **context)

    warning = warn

    def error(self, message: str, **context: Any) -> bool:
        return self.log(Level.ERROR, message, **context)

    def fatal(self, message: str, **context: Any) -> bool:
        return self.log(Level.FATAL, message, **context)

    def flush(self) -> None:
        self._sink.flush()

    def close(self) -> None:
        """Close the sink; this affects every logger sharing it."""
        self._sink.close()

    def __enter__(self) -> Logger:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"Logger(full_name={self._full_name!r}, "
            f"threshold={self._threshold.name}, sink={self._sink!r})"
        )
