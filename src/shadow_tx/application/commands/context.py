"""Application commands – CommandContext."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from shadow_tx.application.collector import EventCollector
from shadow_tx.application.commands.stage import ProcessingStage
from shadow_tx.kernel.events import Event


@dataclasses.dataclass
class CommandContext:
    """Per-call execution context handed to hooks and the command.

    ``state`` is a scratch mapping for values one hook derives and a later
    hook or the command consumes.  Payload enrichment goes through
    :meth:`enrich`; the triggering event itself is never rewritten, and
    :attr:`payload` exposes the original payload overlaid with every patch.
    """

    event: Event
    event_collector: EventCollector
    state: dict[str, Any] = dataclasses.field(default_factory=dict)
    stage: ProcessingStage = ProcessingStage.BUILT
    _enrichments: dict[str, Any] = dataclasses.field(default_factory=dict, init=False, repr=False)

    @property
    def payload(self) -> Mapping[str, Any]:
        """Read-only view of the event payload with enrichments applied."""
        return MappingProxyType({**self.event.payload, **self._enrichments})

    @property
    def enrichments(self) -> Mapping[str, Any]:
        return MappingProxyType(self._enrichments)

    def enrich(self, **fields: Any) -> None:
        """Add derived payload fields.

        Raises:
            ValueError: if a field was already enriched by an earlier hook.
        """
        clashes = sorted(set(fields) & set(self._enrichments))
        if clashes:
            raise ValueError(f"Payload field(s) already enriched: {', '.join(clashes)}")
        self._enrichments.update(fields)

    def emit(
        self,
        type: str,  # noqa: A002
        payload: Mapping[str, Any] | None = None,
        *,
        source: str = "",
    ) -> Event:
        """Publish a side-effect event caused by the triggering event."""
        event = Event.caused_by(self.event, type, payload, source=source)
        self.event_collector.add_event(event)
        return event


__all__ = ["CommandContext"]
