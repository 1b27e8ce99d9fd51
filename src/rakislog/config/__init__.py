"""
Configuration pipeline: properties loader, fluent builder and build resolver.
"""

from .builder import (
    Configuration,
    ConsoleLoggerBuilder,
    CustomLoggerBuilder,
    FileLoggerBuilder,
    LoggerBuilder,
    ReactiveLoggerBuilder,
    configuration,
    configuration_from_file,
    default_configuration,
)
from .entry import ConfigEntry
from .loader import ParsedConfig, load_file, parse_lines
from .resolver import build
from .targets import TargetDirectory, TargetSettings

__all__ = [
    "ConfigEntry",
    "Configuration",
    "ConsoleLoggerBuilder",
    "CustomLoggerBuilder",
    "FileLoggerBuilder",
    "LoggerBuilder",
    "ParsedConfig",
    "ReactiveLoggerBuilder",
    "TargetDirectory",
    "TargetSettings",
    "build",
    "configuration",
    "configuration_from_file",
    "default_configuration",
    "load_file",
    "parse_lines",
]
