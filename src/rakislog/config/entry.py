"""
Configuration entries: one logger's intended configuration before resolution.

Entries are frozen; the loader, the builder and the build resolver derive new
entries with ``model_copy(update=...)`` instead of mutating shared ones.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..core.levels import Level
from ..core.logger import ROOT_LOGGER_NAME, last_segment


class ConfigEntry(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    name: str = ""
    full_name: str = Field(min_length=1)
    level: Level | None = None
    type: str | None = None
    sink: Any | None = None
    options: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _default_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("name") and data.get("full_name"):
            data = {**data, "name": last_segment(data["full_name"])}
        return data

    @property
    def is_root(self) -> bool:
        return self.full_name == ROOT_LOGGER_NAME

    @property
    def depth(self) -> int:
        return self.full_name.count(".") + 1


__all__ = ["ConfigEntry"]
