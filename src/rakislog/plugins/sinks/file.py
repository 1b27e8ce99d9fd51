"""
File sink writing JSON lines to a single log file.

The target file is ``base_path / owner / app_name / path``; owner and app name
are only inserted when set, and an absolute ``path`` replaces the base
entirely. The file is opened lazily on first write and reopened in append
mode if written to after ``close()``.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ...core.records import LogRecord
from ...core.serialization import serialize_record_line
from ..utils import parse_plugin_config

__all__ = ["FileSink", "FileSinkConfig"]


class FileSinkConfig(BaseModel):
    model_config = ConfigDict(
        frozen=True, extra="forbid", validate_default=True, populate_by_name=True
    )

    path: str = Field(min_length=1)
    base_path: str = Field(default=".", alias="basePath")
    owner: str | None = None
    app_name: str | None = Field(default=None, alias="appName")
    names_required: bool = Field(default=False, alias="namesRequired")
    append: bool = True

    @field_validator("path", "base_path")
    @classmethod
    def _strip(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @model_validator(mode="after")
    def _check_names(self) -> FileSinkConfig:
        if self.names_required and not (self.owner and self.app_name):
            raise ValueError(
                "owner and app_name are required when logging under "
                f"'{self.base_path}'"
            )
        return self

    @property
    def target_path(self) -> Path:
        base = Path(self.base_path)
        if self.owner:
            base = base / self.owner
        if self.app_name:
            base = base / self.app_name
        return base / self.path


class FileSink:
    """Sink appending one JSON line per record to a file."""

    type = "File"

    def __init__(
        self, config: FileSinkConfig | dict | None = None, **kwargs: Any
    ) -> None:
        self._config = parse_plugin_config(FileSinkConfig, config, **kwargs)
        self._path = self._config.target_path
        self._fh: IO[bytes] | None = None
        self._opened = False

    @classmethod
    def from_config(cls, options: Mapping[str, str]) -> FileSink:
        return cls(dict(options))

    @property
    def config(self) -> FileSinkConfig:
        return self._config

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_open(self) -> bool:
        return self._fh is not None

    def _ensure_open(self) -> IO[bytes]:
        if self._fh is None:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            # Truncate only on the very first open when not appending
            mode = "ab" if (self._config.append or self._opened) else "wb"
            self._fh = open(self._path, mode)
            self._opened = True
        return self._fh

    def emit(self, record: LogRecord) -> None:
        fh = self._ensure_open()
        fh.write(serialize_record_line(record))

    def flush(self) -> None:
        if self._fh is not None:
            self._fh.flush()

    def close(self) -> None:
        if self._fh is None:
            return
        try:
            self._fh.flush()
        finally:
            self._fh.close()
            self._fh = None

    def __repr__(self) -> str:
        return f"FileSink(path={str(self._path)!r})"
