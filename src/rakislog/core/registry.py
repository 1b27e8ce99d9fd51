"""
Hierarchical logger registry.

Loggers are keyed by their dotted full name and also indexed in a trie keyed
by path segment. ``find_logger`` walks the trie from the top, remembering the
deepest registered logger on the way, so a lookup takes at most one step per
segment and never allocates substrings. Anything with no registered ancestor
resolves to the root logger, which is always present.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, Iterator

from .errors import DuplicateLoggerError
from .levels import Level
from .logger import ROOT_LOGGER_NAME, Logger, split_name

if TYPE_CHECKING:
    from ..metrics.metrics import MetricsCollector

_DEFAULT_ROOT_NAME = "DefaultConsoleLogger"


class _Node:
    __slots__ = ("children", "logger")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.logger: Logger | None = None


def _qualified_name(target: Any) -> str:
    if isinstance(target, str):
        return target
    module = getattr(target, "__module__", None)
    qualname = getattr(target, "__qualname__", None)
    if isinstance(target, type) and module and qualname:
        return qualname if module == "builtins" else f"{module}.{qualname}"
    name = getattr(target, "__name__", None)
    if isinstance(name, str):
        return name
    raise TypeError(f"Cannot derive a logger name from {target!r}")


class LoggerRegistry:
    """Mapping of full names to loggers with ancestor resolution.

    Mutations are serialized by a reentrant lock; loggers and sinks are not
    made thread-safe by it.
    """

    def __init__(self, *, metrics: MetricsCollector | None = None) -> None:
        self._lock = threading.RLock()
        self._metrics = metrics
        self._loggers: dict[str, Logger] = {}
        self._trie = _Node()
        self._root = self._default_root()

    def _default_root(self) -> Logger:
        from ..plugins.sinks import ConsoleSink

        return Logger(
            _DEFAULT_ROOT_NAME,
            ConsoleSink(),
            ROOT_LOGGER_NAME,
            Level.INFO,
            metrics=self._metrics,
        )

    @property
    def metrics(self) -> MetricsCollector | None:
        return self._metrics

    @property
    def root(self) -> Logger:
        return self._root

    def set_root(self, logger: Logger) -> None:
        """Replace the root logger. Registered loggers keep their sinks."""
        with self._lock:
            self._root = logger

    def clear(self) -> None:
        """Drop every logger and reinstall a default console root at INFO."""
        with self._lock:
            self._loggers.clear()
            self._trie = _Node()
            self._root = self._default_root()

    def add_logger(self, logger: Logger) -> None:
        """Register ``logger`` under its full name.

        Raises:
            DuplicateLoggerError: If the full name is already registered or
                is the reserved root name
        """
        with self._lock:
            key = logger.full_name
            if key in self._loggers or key == ROOT_LOGGER_NAME:
                raise DuplicateLoggerError(key)
            node = self._trie
            for segment in logger.segments:
                child = node.children.get(segment)
                if child is None:
                    child = node.children[segment] = _Node()
                node = child
            node.logger = logger
            self._loggers[key] = logger

    def find_logger(self, path: str | None) -> Logger:
        """Return the logger registered for ``path`` or its closest ancestor.

        Never mutates the registry; falls back to root.
        """
        if not path:
            return self._root
        exact = self._loggers.get(path)
        if exact is not None:
            return exact
        segments = split_name(path)
        best: Logger | None = None
        node = self._trie
        # Only proper prefixes can match here; the exact name was checked above
        for segment in segments[:-1]:
            child = node.children.get(segment)
            if child is None:
                break
            node = child
            if node.logger is not None:
                best = node.logger
        return best or self._root

    def get_logger(self, target: Any) -> Logger:
        """Return the logger for ``target``, creating it from its closest ancestor.

        ``target`` is a dotted name, or a class/module whose qualified name is
        used. The created logger inherits the ancestor's threshold and sink.
        """
        path = _qualified_name(target)
        if not path:
            return self._root
        with self._lock:
            found = self.find_logger(path)
            if found.full_name == path:
                return found
            logger = Logger.child_of(found, path, metrics=self._metrics)
            self.add_logger(logger)
            if self._metrics is not None:
                self._metrics.record_logger_created()
            return logger

    def loggers(self) -> list[Logger]:
        """Registered loggers (root excluded) ordered by full name."""
        with self._lock:
            return [self._loggers[k] for k in sorted(self._loggers)]

    def __contains__(self, full_name: object) -> bool:
        return full_name in self._loggers

    def __len__(self) -> int:
        # Root always counts
        return len(self._loggers) + 1

    def __iter__(self) -> Iterator[Logger]:
        yield self._root
        yield from self.loggers()


_default_registry: LoggerRegistry | None = None


def get_default_registry() -> LoggerRegistry:
    """Return the process-default registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        from ..metrics.metrics import MetricsCollector
        from .settings import Settings

        enabled = Settings().enable_metrics
        _default_registry = LoggerRegistry(
            metrics=MetricsCollector(enabled=True) if enabled else None
        )
    return _default_registry


def _reset_default_registry() -> None:
    """Drop the process-default registry (for testing only)."""
    global _default_registry
    _default_registry = None


__all__ = ["LoggerRegistry", "get_default_registry"]
