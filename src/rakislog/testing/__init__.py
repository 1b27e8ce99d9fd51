"""
Testing utilities for rakislog sinks and configurations.

Example:
    from rakislog.testing import MockSink, validate_sink

    def test_my_sink():
        sink = MySink()
        result = validate_sink(sink)
        assert result.valid
"""

from .mocks import MockSink, MockSinkConfig
from .validators import (
    ProtocolViolationError,
    ValidationResult,
    validate_sink,
    validate_sink_lifecycle,
)

__all__ = [
    # Mocks
    "MockSink",
    "MockSinkConfig",
    # Validators
    "validate_sink",
    "validate_sink_lifecycle",
    "ValidationResult",
    "ProtocolViolationError",
]
