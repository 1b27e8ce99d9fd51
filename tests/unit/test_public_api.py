"""Tests for the top-level package exports."""

from __future__ import annotations

import rakislog


def test_all_exports_resolve() -> None:
    for name in rakislog.__all__:
        assert hasattr(rakislog, name), name


def test_version() -> None:
    assert rakislog.VERSION == rakislog.__version__


def test_default_registry_root_is_console_at_info() -> None:
    root = rakislog.get_logger()
    assert root.full_name == rakislog.ROOT_LOGGER_NAME
    assert root.threshold is rakislog.Level.INFO
    assert isinstance(root.sink, rakislog.ConsoleSink)


def test_fluent_chain_on_default_registry() -> None:
    from rakislog.testing import MockSink

    sink = MockSink()
    registry = (
        rakislog.default_configuration()
        .with_custom_root_logger(sink, rakislog.Level.DEBUG)
        .add_to_config()
        .build()
    )

    assert registry is rakislog.get_registry()
    rakislog.get_logger("svc").debug("ready")
    assert sink.messages[-1] == "ready"
