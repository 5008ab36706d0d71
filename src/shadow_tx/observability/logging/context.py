"""Observability – ambient event context for log correlation."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from shadow_tx.kernel.events import Event


@dataclasses.dataclass(frozen=True)
class EventLogContext:
    """Identifiers of the event currently being processed."""
    event_id: str
    event_type: str
    correlation_id: str
    causation_id: str

    @classmethod
    def of(cls, event: Event) -> "EventLogContext":
        return cls(
            event_id=event.id,
            event_type=event.type,
            correlation_id=event.metadata.correlation_id,
            causation_id=event.metadata.causation_id,
        )


_CTX_VAR: ContextVar[EventLogContext | None] = ContextVar("_shadow_tx_event_ctx", default=None)


class EventContext:
    """Ambient event context stored in a ``ContextVar``.

    Each asyncio task gets its own copy, so interleaved ``process_event``
    calls never see each other's identifiers.
    """

    @staticmethod
    def get() -> EventLogContext | None:
        return _CTX_VAR.get()

    @staticmethod
    def clear() -> None:
        _CTX_VAR.set(None)


@contextmanager
def bind_event_context(event: Event) -> Iterator[EventLogContext]:
    """Expose *event*'s identifiers to log processors for the ``with`` body."""
    ctx = EventLogContext.of(event)
    token = _CTX_VAR.set(ctx)
    try:
        yield ctx
    finally:
        _CTX_VAR.reset(token)


__all__ = ["EventContext", "EventLogContext", "bind_event_context"]
