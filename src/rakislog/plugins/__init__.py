"""
Pluggable components for rakislog.

Sinks live in ``rakislog.plugins.sinks``; see ``register_sink_type`` there
for adding sink types that can be built from properties options.
"""
