"""Observability – metric instrument ports used by the metrics hook.

Instruments are labelled per call, typically with ``{"event_type": ...}``,
so one counter covers every event type the engine routes.
"""
from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import TypeAlias

Labels: TypeAlias = Mapping[str, str]


class Counter(abc.ABC):
    @abc.abstractmethod
    def add(self, amount: float = 1.0, labels: Labels | None = None) -> None:
        """Increase the counter; *amount* must not be negative."""


class Histogram(abc.ABC):
    @abc.abstractmethod
    def record(self, sample: float, labels: Labels | None = None) -> None:
        """Record one observation."""


class Metrics(abc.ABC):
    """Port: hands out named instruments.

    Asking twice for the same name may return the same instrument or a new
    handle onto the same series; callers must not rely on either.
    """

    @abc.abstractmethod
    def counter(self, name: str, description: str = "", unit: str = "") -> Counter: ...

    @abc.abstractmethod
    def histogram(self, name: str, description: str = "", unit: str = "") -> Histogram: ...


__all__ = ["Counter", "Histogram", "Labels", "Metrics"]
