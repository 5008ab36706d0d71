"""Observability – metrics backend that drops every sample."""
from __future__ import annotations

from shadow_tx.observability.metrics.ports import Counter, Histogram, Labels, Metrics


class _Discard(Counter, Histogram):
    def add(self, amount: float = 1.0, labels: Labels | None = None) -> None:
        return None

    def record(self, sample: float, labels: Labels | None = None) -> None:
        return None


_DISCARD = _Discard()


class NoopMetrics(Metrics):
    """Default for ``metrics_hook`` wiring when no backend is configured."""

    def counter(self, name: str, description: str = "", unit: str = "") -> Counter:
        return _DISCARD

    def histogram(self, name: str, description: str = "", unit: str = "") -> Histogram:
        return _DISCARD


__all__ = ["NoopMetrics"]
