"""Fluent configuration API for hierarchical loggers.

A ``Configuration`` is an immutable value: every call returns a new one, so
two chains started from the same configuration never see each other's
entries. Logger builders started with ``with_*_logger`` are immutable too and
hand their entry back with ``add_to_config()``::

    (
        rakislog.default_configuration()
        .with_root_console_logger(Level.WARN).add_to_config()
        .with_file_logger("app.db", Level.DEBUG)
            .using_app_data_roaming()
            .using_owner("Acme").using_app_name("App")
            .using_path("db.log")
            .add_to_config()
        .build()
    )

Entries produced here have the same shape as those read by the properties
loader and go through the same build resolver.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, TypeVar

from ..core.errors import ConfigurationError
from ..core.levels import Level, coerce_level
from ..core.logger import ROOT_LOGGER_NAME
from ..core.records import LogRecord
from ..core.registry import LoggerRegistry, get_default_registry
from ..core.settings import Settings
from ..plugins.sinks import (
    CONSOLE,
    CUSTOM,
    FILE,
    REACTIVE,
    BaseSink,
    ConsoleSink,
    ReactiveSink,
)
from .entry import ConfigEntry
from .loader import ParsedConfig, load_file
from .resolver import build as build_entries
from .targets import TargetDirectory, TargetSettings

LevelLike = Level | str | int
BuilderT = TypeVar("BuilderT", bound="LoggerBuilder")


@dataclass(frozen=True)
class Configuration:
    """Accumulated logger configuration bound to a registry."""

    registry: LoggerRegistry = field(compare=False, repr=False)
    config_path: str | None = None
    target: TargetSettings = field(default_factory=TargetSettings)
    root_entry: ConfigEntry | None = None
    entries: tuple[ConfigEntry, ...] = ()
    encoding: str = "utf-8"

    def add_config(self, entry: ConfigEntry) -> Configuration:
        """Return a configuration with ``entry`` added.

        A root entry replaces any earlier root entry.
        """
        if entry.is_root:
            return replace(self, root_entry=entry)
        return replace(self, entries=self.entries + (entry,))

    def from_file(self, path: str | Path) -> Configuration:
        return replace(self, config_path=str(path))

    def load(self, path: str | Path | None = None) -> Configuration:
        """Parse a properties file and add its entries.

        Raises:
            MissingSourceFileError: No path known, or the file cannot be read
            ConfigurationError: A line of the file is invalid
        """
        config = self.from_file(path) if path is not None else self
        parsed = load_file(config.config_path, encoding=config.encoding)
        return config._merge(parsed)

    def _merge(self, parsed: ParsedConfig) -> Configuration:
        return replace(
            self,
            root_entry=parsed.root if parsed.root is not None else self.root_entry,
            entries=self.entries + tuple(parsed.entries),
        )

    # File logger locations shared by every file logger started afterwards

    def using_target(self, target: TargetDirectory) -> Configuration:
        return replace(self, target=self.target.using(target))

    def using_program_data(self) -> Configuration:
        """Store log files under ProgramData; requires owner and app name."""
        return self.using_target(TargetDirectory.PROGRAM_DATA)

    def using_app_data_local(self) -> Configuration:
        """Store log files under local app data; requires owner and app name."""
        return self.using_target(TargetDirectory.APP_DATA_LOCAL)

    def using_app_data_local_low(self) -> Configuration:
        return self.using_target(TargetDirectory.APP_DATA_LOCAL_LOW)

    def using_app_data_roaming(self) -> Configuration:
        return self.using_target(TargetDirectory.APP_DATA_ROAMING)

    def using_home(self) -> Configuration:
        return self.using_target(TargetDirectory.HOME)

    def using_documents(self) -> Configuration:
        return self.using_target(TargetDirectory.DOCUMENTS)

    def using_target_base_path(
        self, path: str | Path, names_required: bool = False
    ) -> Configuration:
        return replace(
            self, target=self.target.with_base_path(str(path), names_required)
        )

    def using_owner(self, owner: str) -> Configuration:
        return replace(self, target=self.target.with_owner(owner))

    def using_app_name(self, name: str) -> Configuration:
        return replace(self, target=self.target.with_app_name(name))

    # Logger builders

    def with_root_console_logger(
        self, level: LevelLike = Level.INFO
    ) -> ConsoleLoggerBuilder:
        return (
            ConsoleLoggerBuilder(self)
            .with_full_name(ROOT_LOGGER_NAME)
            .with_threshold(level)
        )

    def with_console_logger(
        self,
        full_name: str | None = None,
        level: LevelLike = Level.INFO,
        *,
        name: str | None = None,
    ) -> ConsoleLoggerBuilder:
        return ConsoleLoggerBuilder(
            self, name=name, full_name=full_name
        ).with_threshold(level)

    def with_root_file_logger(
        self, path: str | Path | None = None, level: LevelLike = Level.INFO
    ) -> FileLoggerBuilder:
        return (
            FileLoggerBuilder(self, target=self.target)
            .with_full_name(ROOT_LOGGER_NAME)
            .using_path(path)
            .with_threshold(level)
        )

    def with_file_logger(
        self,
        full_name: str | None = None,
        level: LevelLike = Level.INFO,
        *,
        name: str | None = None,
    ) -> FileLoggerBuilder:
        return FileLoggerBuilder(
            self, name=name, full_name=full_name, target=self.target
        ).with_threshold(level)

    def with_reactive_root_logger(
        self, level: LevelLike = Level.INFO
    ) -> ReactiveLoggerBuilder:
        return (
            ReactiveLoggerBuilder(self)
            .with_full_name(ROOT_LOGGER_NAME)
            .with_threshold(level)
        )

    def with_reactive_logger(
        self,
        full_name: str | None = None,
        level: LevelLike = Level.INFO,
        *,
        name: str | None = None,
    ) -> ReactiveLoggerBuilder:
        return ReactiveLoggerBuilder(
            self, name=name, full_name=full_name
        ).with_threshold(level)

    def with_custom_root_logger(
        self, sink: BaseSink | None = None, level: LevelLike = Level.INFO
    ) -> CustomLoggerBuilder:
        return (
            CustomLoggerBuilder(self, sink=sink)
            .with_full_name(ROOT_LOGGER_NAME)
            .with_threshold(level)
        )

    def with_custom_logger(
        self,
        full_name: str | None = None,
        sink: BaseSink | None = None,
        level: LevelLike = Level.INFO,
        *,
        name: str | None = None,
    ) -> CustomLoggerBuilder:
        return CustomLoggerBuilder(
            self, name=name, full_name=full_name, sink=sink
        ).with_threshold(level)

    def build(self) -> LoggerRegistry:
        """Resolve every entry and install the loggers into the registry."""
        build_entries(self.registry, self.entries, root=self.root_entry)
        return self.registry


@dataclass(frozen=True)
class LoggerBuilder(ABC):
    """Common settings of one logger being configured."""

    parent: Configuration = field(repr=False)
    name: str | None = None
    full_name: str | None = None
    level: Level = Level.INFO

    def with_name(self: BuilderT, name: str) -> BuilderT:
        return replace(self, name=name)

    def with_full_name(self: BuilderT, full_name: str | None) -> BuilderT:
        return replace(self, full_name=full_name)

    def with_threshold(self: BuilderT, level: LevelLike) -> BuilderT:
        return replace(self, level=coerce_level(level))

    def _entry(self, **fields: object) -> ConfigEntry:
        if not self.full_name:
            raise ConfigurationError("Every logger needs a full name")
        return ConfigEntry(
            name=self.name or "",
            full_name=self.full_name,
            level=self.level,
            **fields,
        )

    @abstractmethod
    def to_entry(self) -> ConfigEntry:
        """Return the configuration entry this builder describes."""

    def add_to_config(self) -> Configuration:
        """Return the parent configuration with this logger's entry added."""
        return self.parent.add_config(self.to_entry())


@dataclass(frozen=True)
class ConsoleLoggerBuilder(LoggerBuilder):
    stream: str = "stdout"

    def using_stderr(self) -> ConsoleLoggerBuilder:
        return replace(self, stream="stderr")

    def to_entry(self) -> ConfigEntry:
        return self._entry(type=CONSOLE, sink=ConsoleSink(stream=self.stream))


@dataclass(frozen=True)
class FileLoggerBuilder(LoggerBuilder):
    path: str | None = None
    target: TargetSettings = field(default_factory=TargetSettings)
    append: bool = True

    def using_path(self, path: str | Path | None) -> FileLoggerBuilder:
        return replace(self, path=str(path) if path is not None else None)

    def using_owner(self, owner: str | None) -> FileLoggerBuilder:
        return replace(self, target=self.target.with_owner(owner))

    def using_app_name(self, name: str | None) -> FileLoggerBuilder:
        return replace(self, target=self.target.with_app_name(name))

    def using_target_base_path(
        self, path: str | Path, names_required: bool = False
    ) -> FileLoggerBuilder:
        return replace(
            self, target=self.target.with_base_path(str(path), names_required)
        )

    def using_target(self, target: TargetDirectory) -> FileLoggerBuilder:
        return replace(self, target=self.target.using(target))

    def using_program_data(self) -> FileLoggerBuilder:
        return self.using_target(TargetDirectory.PROGRAM_DATA)

    def using_app_data_local(self) -> FileLoggerBuilder:
        return self.using_target(TargetDirectory.APP_DATA_LOCAL)

    def using_app_data_local_low(self) -> FileLoggerBuilder:
        return self.using_target(TargetDirectory.APP_DATA_LOCAL_LOW)

    def using_app_data_roaming(self) -> FileLoggerBuilder:
        return self.using_target(TargetDirectory.APP_DATA_ROAMING)

    def using_home(self) -> FileLoggerBuilder:
        return self.using_target(TargetDirectory.HOME)

    def using_documents(self) -> FileLoggerBuilder:
        return self.using_target(TargetDirectory.DOCUMENTS)

    def appending(self, append: bool = True) -> FileLoggerBuilder:
        """Append to an existing file (default) or truncate it on first write."""
        return replace(self, append=append)

    def to_entry(self) -> ConfigEntry:
        options = self.target.to_options()
        if self.path is not None:
            options["path"] = self.path
        options["append"] = "true" if self.append else "false"
        # The sink is built by the resolver, which validates the options
        return self._entry(type=FILE, options=options)


@dataclass(frozen=True)
class ReactiveLoggerBuilder(LoggerBuilder):
    next_callback: Callable[[LogRecord], None] | None = field(default=None, repr=False)
    completed_callback: Callable[[], None] | None = field(default=None, repr=False)

    def on_next(self, callback: Callable[[LogRecord], None]) -> ReactiveLoggerBuilder:
        return replace(self, next_callback=callback)

    def on_completed(self, callback: Callable[[], None]) -> ReactiveLoggerBuilder:
        return replace(self, completed_callback=callback)

    def to_entry(self) -> ConfigEntry:
        if self.next_callback is None:
            return self._entry(type=REACTIVE)
        sink = ReactiveSink(self.next_callback, on_completed=self.completed_callback)
        return self._entry(type=REACTIVE, sink=sink)


@dataclass(frozen=True)
class CustomLoggerBuilder(LoggerBuilder):
    sink: BaseSink | None = field(default=None, repr=False)

    def using_sink(self, sink: BaseSink) -> CustomLoggerBuilder:
        return replace(self, sink=sink)

    def to_entry(self) -> ConfigEntry:
        if self.sink is None:
            return self._entry(type=CUSTOM)
        # Type is taken from the sink's own tag at build time
        return self._entry(sink=self.sink)


def configuration(registry: LoggerRegistry | None = None) -> Configuration:
    """Return an empty configuration to modify the current setup."""
    if registry is None:
        registry = get_default_registry()
    return Configuration(registry=registry)


def configuration_from_file(
    path: str | Path | None = None,
    *,
    registry: LoggerRegistry | None = None,
    settings: Settings | None = None,
) -> Configuration:
    """Return a configuration set to load ``path``.

    Without a path, ``Settings.config_path`` (default ``rakisLog.properties``
    in the working directory) is used.
    """
    cfg = settings or Settings()
    return Configuration(
        registry=registry if registry is not None else get_default_registry(),
        config_path=str(path) if path is not None else cfg.config_path,
        encoding=cfg.encoding,
    )


def default_configuration(registry: LoggerRegistry | None = None) -> Configuration:
    """Clear the registry, then return an empty configuration for it."""
    config = configuration(registry)
    config.registry.clear()
    return config


__all__ = [
    "Configuration",
    "LoggerBuilder",
    "ConsoleLoggerBuilder",
    "FileLoggerBuilder",
    "ReactiveLoggerBuilder",
    "CustomLoggerBuilder",
    "configuration",
    "configuration_from_file",
    "default_configuration",
]
