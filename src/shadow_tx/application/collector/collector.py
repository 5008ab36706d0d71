"""Application collector – EventCollector port and FifoEventCollector."""
from __future__ import annotations

import abc

from shadow_tx.kernel.events import Event
from shadow_tx.observability.logging import get_logger

_log = get_logger(__name__)


class EventCollector(abc.ABC):
    """Port: append-only log of side-effect events produced by commands."""

    @abc.abstractmethod
    def add_event(self, event: Event) -> None: ...

    @abc.abstractmethod
    def get_events(self) -> list[Event]: ...

    @abc.abstractmethod
    def clear(self) -> None: ...


class FifoEventCollector(EventCollector):
    """In-memory, insertion-ordered side-effect log.

    No deduplication, no capacity bound, no consumption semantics: callers
    that want to consume call :meth:`get_events` then :meth:`clear` (or
    :meth:`drain`).  Every method is synchronous, so none of them can be
    interleaved with another coroutine mid-operation.
    """

    def __init__(self) -> None:
        self._events: list[Event] = []

    def add_event(self, event: Event) -> None:
        self._events.append(event)
        _log.debug("side_effect.collected", event_type=event.type, event_id=event.id)

    def get_events(self) -> list[Event]:
        """Return a copy of the collected events in insertion order."""
        return list(self._events)

    def clear(self) -> None:
        self._events = []
        _log.debug("side_effect.cleared")

    def drain(self) -> list[Event]:
        """Return the collected events and empty the log in one step."""
        events, self._events = self._events, []
        return events

    def __len__(self) -> int:
        return len(self._events)


__all__ = ["EventCollector", "FifoEventCollector"]
