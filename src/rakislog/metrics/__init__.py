from .metrics import LoggingMetrics, MetricsCollector

__all__ = ["LoggingMetrics", "MetricsCollector"]
