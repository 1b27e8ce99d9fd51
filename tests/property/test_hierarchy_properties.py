from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from rakislog import Level, Logger, LoggerRegistry
from rakislog.config.entry import ConfigEntry
from rakislog.config.loader import parse_entry
from rakislog.config.resolver import build
from rakislog.testing import MockSink

pytestmark = pytest.mark.property

segment = st.text(alphabet="abcxyz", min_size=1, max_size=3)
dotted_names = st.lists(segment, min_size=1, max_size=5).map(".".join)
levels = st.sampled_from(list(Level))


def _longest_registered_prefix(registered: set[str], path: str) -> str | None:
    parts = path.split(".")
    for size in range(len(parts), 0, -1):
        candidate = ".".join(parts[:size])
        if candidate in registered:
            return candidate
    return None


@given(registered=st.sets(dotted_names, max_size=12), path=dotted_names)
@settings(max_examples=200)
def test_find_logger_returns_longest_registered_prefix(
    registered: set[str], path: str
) -> None:
    registry = LoggerRegistry()
    for name in registered:
        registry.add_logger(Logger("", MockSink(), name))

    found = registry.find_logger(path)

    expected = _longest_registered_prefix(registered, path)
    if expected is None:
        assert found is registry.root
    else:
        assert found.full_name == expected
    assert len(registry) == len(registered) + 1


@given(registered=st.sets(dotted_names, max_size=8), path=dotted_names)
@settings(max_examples=200)
def test_get_logger_is_idempotent_and_inherits(
    registered: set[str], path: str
) -> None:
    registry = LoggerRegistry()
    for i, name in enumerate(sorted(registered)):
        threshold = list(Level)[i % len(Level)]
        registry.add_logger(Logger("", MockSink(), name, threshold))
    ancestor = registry.find_logger(path)

    first = registry.get_logger(path)
    second = registry.get_logger(path)

    assert first is second
    assert first.full_name == path
    if path not in registered:
        assert first.sink is ancestor.sink
        assert first.threshold is ancestor.threshold


@given(
    configured=st.dictionaries(dotted_names, levels, min_size=1, max_size=10),
    root_level=levels,
)
@settings(max_examples=100)
def test_built_loggers_inherit_nearest_configured_sink(
    configured: dict[str, Level], root_level: Level
) -> None:
    registry = LoggerRegistry()
    root_sink = MockSink()
    # Only top-level entries carry their own sink; the rest must inherit
    sinks = {name: MockSink() for name in configured if "." not in name}
    entries = [
        ConfigEntry(full_name=name, level=level, sink=sinks.get(name))
        for name, level in configured.items()
    ]

    build(
        registry,
        entries,
        root=ConfigEntry(full_name="rootLogger", level=root_level, sink=root_sink),
    )

    for name, level in configured.items():
        logger = registry.find_logger(name)
        assert logger.full_name == name
        assert logger.threshold is level
        top = name.split(".")[0]
        assert logger.sink is sinks.get(top, root_sink)


@given(full_name=dotted_names, level=levels)
def test_level_token_round_trips_through_parser(full_name: str, level: Level) -> None:
    entry = parse_entry(full_name, f" {level.name} ")
    assert entry.level is level
    assert entry.name == full_name.split(".")[-1]
