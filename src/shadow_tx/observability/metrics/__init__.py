"""Observability – metrics ports."""
from shadow_tx.observability.metrics.noop import NoopMetrics
from shadow_tx.observability.metrics.ports import Counter, Histogram, Labels, Metrics

__all__ = ["Counter", "Histogram", "Labels", "Metrics", "NoopMetrics"]
