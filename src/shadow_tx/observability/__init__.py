"""Observability – logging and metrics."""

from shadow_tx.observability.logging import JsonLoggerFactory, Logger, bind_event_context, get_logger
from shadow_tx.observability.metrics import Metrics, NoopMetrics

__all__ = [
    "JsonLoggerFactory",
    "Logger",
    "Metrics",
    "NoopMetrics",
    "bind_event_context",
    "get_logger",
]
