"""
Base directories for file sinks.

File loggers resolve their path under a base directory chosen once per
configuration. Application-data locations are shared between programs, so
they require an owner and an application name to be set; the sink then
writes under ``<base>/<owner>/<app_name>/``.

Locations follow the Windows environment variables when present and fall back
to the XDG base directories (or their defaults under the home directory).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path


class TargetDirectory(str, Enum):
    """Well-known base directories for log files."""

    CURRENT = "current"
    HOME = "home"
    DOCUMENTS = "documents"
    PROGRAM_DATA = "program_data"
    APP_DATA_LOCAL = "app_data_local"
    APP_DATA_LOCAL_LOW = "app_data_local_low"
    APP_DATA_ROAMING = "app_data_roaming"

    @property
    def names_required(self) -> bool:
        return self in _NAMES_REQUIRED


_NAMES_REQUIRED = frozenset(
    {
        TargetDirectory.PROGRAM_DATA,
        TargetDirectory.APP_DATA_LOCAL,
        TargetDirectory.APP_DATA_LOCAL_LOW,
        TargetDirectory.APP_DATA_ROAMING,
    }
)


def _env_path(name: str) -> Path | None:
    value = os.environ.get(name)
    return Path(value) if value else None


def home_directory() -> Path:
    # HOMEDRIVE/HOMEPATH win on Windows; Path.home() elsewhere
    drive, path = os.environ.get("HOMEDRIVE"), os.environ.get("HOMEPATH")
    if drive and path:
        return Path(drive + path)
    return Path.home()


def resolve_target_directory(target: TargetDirectory) -> Path:
    """Return the base directory for ``target`` on this machine."""
    if target is TargetDirectory.CURRENT:
        return Path(".")
    home = home_directory()
    if target is TargetDirectory.HOME:
        return home
    if target is TargetDirectory.DOCUMENTS:
        return home / "Documents"
    if target is TargetDirectory.PROGRAM_DATA:
        return _env_path("PROGRAMDATA") or Path("/var/lib")
    if target is TargetDirectory.APP_DATA_LOCAL:
        return (
            _env_path("LOCALAPPDATA")
            or _env_path("XDG_DATA_HOME")
            or home / ".local" / "share"
        )
    if target is TargetDirectory.APP_DATA_LOCAL_LOW:
        local = _env_path("LOCALAPPDATA")
        if local is not None:
            return local.parent / "LocalLow"
        return _env_path("XDG_STATE_HOME") or home / ".local" / "state"
    return _env_path("APPDATA") or _env_path("XDG_CONFIG_HOME") or home / ".config"


@dataclass(frozen=True)
class TargetSettings:
    """File-sink location settings shared by a configuration's file loggers."""

    base_path: str = "."
    owner: str | None = None
    app_name: str | None = None
    names_required: bool = False

    def using(self, target: TargetDirectory) -> TargetSettings:
        return replace(
            self,
            base_path=str(resolve_target_directory(target)),
            names_required=target.names_required,
        )

    def with_base_path(self, path: str, names_required: bool = False) -> TargetSettings:
        return replace(self, base_path=path, names_required=names_required)

    def with_owner(self, owner: str | None) -> TargetSettings:
        return replace(self, owner=owner)

    def with_app_name(self, app_name: str | None) -> TargetSettings:
        return replace(self, app_name=app_name)

    def to_options(self) -> dict[str, str]:
        """Render as FileSink options."""
        options = {
            "base_path": self.base_path,
            "names_required": "true" if self.names_required else "false",
        }
        if self.owner:
            options["owner"] = self.owner
        if self.app_name:
            options["app_name"] = self.app_name
        return options


__all__ = [
    "TargetDirectory",
    "TargetSettings",
    "home_directory",
    "resolve_target_directory",
]
