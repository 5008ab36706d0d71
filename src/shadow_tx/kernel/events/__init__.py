"""Kernel events – the data flowing through the engine."""
from shadow_tx.kernel.events.event import Event, EventId, EventMetadata, EventType, new_id

__all__ = ["Event", "EventId", "EventMetadata", "EventType", "new_id"]
