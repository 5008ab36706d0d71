"""Events and their causal metadata."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any, TypeAlias
from uuid import uuid4

from shadow_tx.kernel.time import Clock, utc_now

EventType: TypeAlias = str
EventId: TypeAlias = str


def new_id() -> str:
    return str(uuid4())


@dataclasses.dataclass(frozen=True)
class EventMetadata:
    """Causal metadata carried by every event.

    ``correlation_id`` names the whole business process and is copied
    unchanged into every side effect.  ``causation_id`` is the id of the
    event that directly triggered this one (empty for root events).
    ``source`` labels the producing component.
    """

    correlation_id: str = dataclasses.field(default_factory=new_id)
    causation_id: str = ""
    timestamp: datetime = dataclasses.field(default_factory=utc_now)
    source: str = ""


@dataclasses.dataclass(frozen=True)
class Event:
    """Immutable record of something that happened.

    The payload is opaque to the engine but must be a string-keyed
    ``Mapping``; wrap list or scalar data under a key.  It is stored as a
    read-only shallow copy so that nothing downstream can rewrite the
    original.  The payload takes no part in hashing, so events can be used
    in sets and as dict keys.

    Example::

        order = Event.create("PLACE_ORDER", {"sku": "A-1"}, source="web")
        placed = Event.caused_by(order, "ORDER_PLACED", {"sku": "A-1"})
        assert placed.metadata.causation_id == order.id
    """

    type: EventType
    payload: Mapping[str, Any] = dataclasses.field(default_factory=dict, hash=False)
    metadata: EventMetadata = dataclasses.field(default_factory=EventMetadata)
    id: EventId = dataclasses.field(default_factory=new_id)

    def __post_init__(self) -> None:
        if not isinstance(self.payload, Mapping):
            raise TypeError(f"Event payload must be a Mapping, got {type(self.payload).__name__}")
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))

    @property
    def correlation_id(self) -> str:
        return self.metadata.correlation_id

    @property
    def causation_id(self) -> str:
        return self.metadata.causation_id

    @property
    def is_root(self) -> bool:
        """True when the event was not produced while processing another."""
        return not self.metadata.causation_id

    @classmethod
    def create(
        cls,
        type: EventType,  # noqa: A002
        payload: Mapping[str, Any] | None = None,
        *,
        source: str = "",
        correlation_id: str | None = None,
        clock: Clock | None = None,
    ) -> "Event":
        """Build a root event that starts a new business process."""
        metadata = EventMetadata(
            correlation_id=correlation_id or new_id(),
            causation_id="",
            timestamp=clock.now() if clock is not None else utc_now(),
            source=source,
        )
        return cls(type=type, payload=payload or {}, metadata=metadata)

    @classmethod
    def caused_by(
        cls,
        parent: "Event",
        type: EventType,  # noqa: A002
        payload: Mapping[str, Any] | None = None,
        *,
        source: str = "",
        clock: Clock | None = None,
    ) -> "Event":
        """Build a side-effect event produced while processing *parent*."""
        metadata = EventMetadata(
            correlation_id=parent.metadata.correlation_id,
            causation_id=parent.id,
            timestamp=clock.now() if clock is not None else utc_now(),
            source=source,
        )
        return cls(type=type, payload=payload or {}, metadata=metadata)


__all__ = ["Event", "EventId", "EventMetadata", "EventType", "new_id"]
