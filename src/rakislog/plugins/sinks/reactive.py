from __future__ import annotations

from typing import Callable

from ...core.records import LogRecord

__all__ = ["ReactiveSink"]


class ReactiveSink:
    """Sink forwarding every record to a callback.

    ``on_completed`` runs once, on the first ``close()``.
    """

    type = "Reactive"

    def __init__(
        self,
        on_next: Callable[[LogRecord], None],
        *,
        on_completed: Callable[[], None] | None = None,
    ) -> None:
        if not callable(on_next):
            raise TypeError("on_next must be callable")
        self._on_next = on_next
        self._on_completed = on_completed
        self._completed = False

    @property
    def completed(self) -> bool:
        return self._completed

    def emit(self, record: LogRecord) -> None:
        self._on_next(record)

    def flush(self) -> None:
        return None

    def close(self) -> None:
        if self._completed:
            return
        self._completed = True
        if self._on_completed is not None:
            self._on_completed()
