from __future__ import annotations

import sys
from typing import Any, Literal, Mapping, TextIO

from pydantic import BaseModel, ConfigDict

from ...core.records import LogRecord
from ...core.serialization import serialize_record
from ..utils import parse_plugin_config

__all__ = ["ConsoleSink", "ConsoleSinkConfig"]


class ConsoleSinkConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    stream: Literal["stdout", "stderr"] = "stdout"


class ConsoleSink:
    """Console sink that writes structured JSON lines to stdout or stderr.

    The stream is looked up on every write so redirected or captured
    ``sys.stdout``/``sys.stderr`` are honored.
    """

    type = "Console"

    def __init__(
        self, config: ConsoleSinkConfig | dict | None = None, **kwargs: Any
    ) -> None:
        self._config = parse_plugin_config(ConsoleSinkConfig, config, **kwargs)

    @classmethod
    def from_config(cls, options: Mapping[str, str]) -> ConsoleSink:
        return cls(dict(options))

    @property
    def config(self) -> ConsoleSinkConfig:
        return self._config

    def _stream(self) -> TextIO:
        return sys.stderr if self._config.stream == "stderr" else sys.stdout

    def emit(self, record: LogRecord) -> None:
        stream = self._stream()
        stream.write(serialize_record(record).decode("utf-8"))
        stream.write("\n")
        stream.flush()

    def flush(self) -> None:
        self._stream().flush()

    def close(self) -> None:
        # Process streams are shared; flush but never close them
        self.flush()

    def __repr__(self) -> str:
        return f"ConsoleSink(stream={self._config.stream!r})"
