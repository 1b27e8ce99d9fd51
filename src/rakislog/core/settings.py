"""
Configuration models for rakislog using Pydantic v2 Settings.

These settings control the package itself (where the properties source lives,
internal diagnostics, metrics); per-logger configuration comes from the
properties source or the fluent builder.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_PATH = "rakisLog.properties"


class Settings(BaseSettings):
    """Top-level package settings, read from ``RAKISLOG_*`` environment variables."""

    config_path: str = Field(
        default=DEFAULT_CONFIG_PATH,
        description="Properties source loaded when no path is given",
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding of properties sources",
    )
    internal_logging_enabled: bool = Field(
        default=False,
        description="Emit DEBUG/WARN diagnostics for internal events and sink errors",
    )
    enable_metrics: bool = Field(
        default=False,
        description="Enable Prometheus-compatible counters on the default registry",
    )

    model_config = SettingsConfigDict(
        env_prefix="RAKISLOG_",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("config_path")
    @classmethod
    def _ensure_config_path_non_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("config_path must not be empty")
        return value

    def to_dict(self) -> dict[str, object]:
        return dict(self.model_dump(exclude_none=True))
