"""
Root pytest configuration.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers",
        "critical: Tests that must never fail - core functionality",
    )
    config.addinivalue_line(
        "markers",
        "integration: Tests touching the filesystem end to end",
    )
    config.addinivalue_line(
        "markers",
        "property: Property-based tests (may be slow)",
    )


@pytest.fixture(autouse=True)
def reset_diagnostics_cache() -> Generator[None, None, None]:
    """Reset the diagnostics module cache before each test.

    The diagnostics module caches the ``internal_logging_enabled`` setting at
    first access; resetting it lets tests monkeypatch the environment.
    """
    import rakislog.core.diagnostics as diag

    diag._internal_logging_enabled = None
    yield
    diag._internal_logging_enabled = None


@pytest.fixture(autouse=True)
def _reset_default_registry() -> Generator[None, None, None]:
    """Give each test a fresh process-default registry and sink types."""
    from rakislog.core import registry
    from rakislog.plugins import sinks

    registry._reset_default_registry()
    yield
    registry._reset_default_registry()
    sinks._reset_sink_types()


@pytest.fixture
def registry():
    """An isolated registry with the default console root."""
    from rakislog import LoggerRegistry

    return LoggerRegistry()


@pytest.fixture
def mock_sink():
    from rakislog.testing import MockSink

    return MockSink()
