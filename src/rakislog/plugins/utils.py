"""
Plugin utilities for configuration parsing and sink type resolution.

Provides helpers for consistently validating sink options and identifying
sinks by their type tag.
"""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel

ConfigT = TypeVar("ConfigT", bound=BaseModel)


def parse_plugin_config(
    model: type[ConfigT],
    config: ConfigT | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> ConfigT:
    """Validate ``config`` (and keyword overrides) into ``model``.

    Accepts an existing model instance, a mapping of raw options, or nothing.
    Keyword arguments override mapping entries.

    Raises:
        pydantic.ValidationError: If the options do not satisfy the model
    """
    if isinstance(config, model) and not kwargs:
        return config
    if isinstance(config, BaseModel):
        data: dict[str, Any] = config.model_dump(by_alias=False)
    else:
        data = dict(config or {})
    data.update(kwargs)
    return model.model_validate(data)


def normalize_sink_type(name: str) -> str:
    """Normalize a sink type tag to canonical lookup form.

    Converts hyphens to underscores, strips whitespace and lowercases.
    """
    return name.strip().replace("-", "_").lower()


def get_sink_type(sink: Any) -> str:
    """Get the type tag of a sink instance or class.

    Resolution order:
    1. sink.type attribute (if non-empty string)
    2. Class name (fallback)
    """
    tag = getattr(sink, "type", None)
    if tag and isinstance(tag, str) and tag.strip():
        result: str = tag.strip()
        return result
    cls = sink if isinstance(sink, type) else sink.__class__
    class_name: str = cls.__name__
    return class_name
