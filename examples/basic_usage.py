"""
Basic usage example for rakislog.

Loads the properties file next to this script, then logs through a few
loggers to show how unconfigured names inherit from their closest
configured ancestor.
"""

import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import rakislog  # noqa: E402
from rakislog import Level  # noqa: E402


def main() -> None:
    """Demonstrate properties loading and builder overrides."""

    here = Path(__file__).parent
    rakislog.default_configuration().load(here / "rakisLog.properties").build()

    # Configured directly: DEBUG, console
    api = rakislog.get_logger("app.api")
    api.debug("Request received", path="/health")

    # Not configured: inherits app.storage (DEBUG, logs/storage.log)
    pool = rakislog.get_logger("app.storage.pool")
    pool.debug("Connection acquired", size=4)

    # Configured at WARN, sharing the storage file sink
    cache = rakislog.get_logger("app.storage.cache")
    cache.info("Dropped: below WARN")
    cache.warn("Cache miss rate high", ratio=0.4)

    # Builder configuration on a separate registry
    events: list[str] = []
    registry = rakislog.LoggerRegistry()
    (
        rakislog.configuration(registry)
        .with_root_console_logger(Level.WARN)
        .add_to_config()
        .with_reactive_logger("audit", Level.INFO)
        .on_next(lambda record: events.append(str(record)))
        .add_to_config()
        .build()
    )
    registry.get_logger("audit.login").info("User logged in", user="alice")
    print(f"captured {len(events)} audit event(s): {events}")

    pool.close()


if __name__ == "__main__":
    main()
