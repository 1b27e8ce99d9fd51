"""
Performance metrics collection for rakislog.

Implements minimal Prometheus-compatible counters for record emission and
lazy logger creation.

Design goals:
- Zero global state; each LoggerRegistry owns its collector
- Safe no-op behavior (apart from in-memory counters) when disabled
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

from prometheus_client import CollectorRegistry, Counter


@dataclass
class LoggingMetrics:
    """Captured runtime metrics for quick assertions in tests."""

    records_emitted: int = 0
    records_suppressed: int = 0
    loggers_created: int = 0
    sink_errors: int = 0


class MetricsCollector:
    """Registry-scoped metrics collector.

    When disabled, all methods only track the in-memory counters.
    """

    def __init__(self, *, enabled: bool = False) -> None:
        self._enabled = bool(enabled)
        self._lock = threading.Lock()
        self._state = LoggingMetrics()

        self._c_emitted: Counter | None = None
        self._c_suppressed: Counter | None = None
        self._c_created: Counter | None = None
        self._c_sink_errors: Counter | None = None
        self._registry: CollectorRegistry | None = None

        if self._enabled:
            # Isolated registry to avoid global duplication in tests
            self._registry = CollectorRegistry()
            self._c_emitted = Counter(
                "rakislog_records_emitted_total",
                "Total number of records passed to a sink",
                ["level"],
                registry=self._registry,
            )
            self._c_suppressed = Counter(
                "rakislog_records_suppressed_total",
                "Total number of records below their logger's threshold",
                registry=self._registry,
            )
            self._c_created = Counter(
                "rakislog_loggers_created_total",
                "Total number of loggers created lazily by lookup",
                registry=self._registry,
            )
            self._c_sink_errors = Counter(
                "rakislog_sink_errors_total",
                "Total number of contained sink write errors",
                ["sink"],
                registry=self._registry,
            )

    @property
    def is_enabled(self) -> bool:
        return self._enabled

    @property
    def registry(self) -> CollectorRegistry | None:
        """Expose the isolated Prometheus registry when enabled."""
        return self._registry

    def record_emitted(self, *, level: str) -> None:
        with self._lock:
            self._state.records_emitted += 1
        if self._c_emitted is not None:
            self._c_emitted.labels(level=level).inc()

    def record_suppressed(self) -> None:
        with self._lock:
            self._state.records_suppressed += 1
        if self._c_suppressed is not None:
            self._c_suppressed.inc()

    def record_logger_created(self) -> None:
        with self._lock:
            self._state.loggers_created += 1
        if self._c_created is not None:
            self._c_created.inc()

    def record_sink_error(self, *, sink_type: str | None = None) -> None:
        with self._lock:
            self._state.sink_errors += 1
        if self._c_sink_errors is not None:
            self._c_sink_errors.labels(sink=sink_type or "unknown").inc()

    def snapshot(self) -> LoggingMetrics:
        # Lightweight copy without exposing internals
        with self._lock:
            return LoggingMetrics(
                records_emitted=self._state.records_emitted,
                records_suppressed=self._state.records_suppressed,
                loggers_created=self._state.loggers_created,
                sink_errors=self._state.sink_errors,
            )
