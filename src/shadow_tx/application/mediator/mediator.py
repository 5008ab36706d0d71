"""Application mediator – TransactionMediator.

The mediator is the single entry point of the engine: it turns an event
into a decorated command through the builder, runs it with a fresh
:class:`CommandContext`, and absorbs every failure in :meth:`handle_error`.

Usage::

    collector = FifoEventCollector()
    observer = RecordingErrorObserver()
    mediator = TransactionMediator(secure_builder, collector, observer=observer)

    await mediator.process_event(Event.create("PLACE_ORDER", {"sku": "A-1"}))
    for side_effect in collector.drain():
        await mediator.process_event(side_effect)
"""
from __future__ import annotations

import inspect

from shadow_tx.application.builder import CapabilityBuilder
from shadow_tx.application.collector import EventCollector
from shadow_tx.application.commands import Command, CommandContext, ProcessingStage
from shadow_tx.application.mediator.errors import ErrorObserver, ErrorRecord
from shadow_tx.kernel.events import Event
from shadow_tx.observability.logging import bind_event_context, get_logger

_log = get_logger(__name__)

DEFAULT_CHAIN_MAX_ROUNDS = 16


class TransactionMediator:
    """Route events to decorated commands; never raise to the caller.

    The builder and collector are fixed at construction.  Concurrent
    ``process_event`` calls are not serialised against each other; they
    share the collector.
    """

    def __init__(
        self,
        builder: CapabilityBuilder,
        collector: EventCollector,
        *,
        observer: ErrorObserver | None = None,
        chain_max_rounds: int = DEFAULT_CHAIN_MAX_ROUNDS,
    ) -> None:
        if chain_max_rounds < 1:
            raise ValueError("chain_max_rounds must be >= 1")
        self._builder = builder
        self._collector = collector
        self._observer = observer
        self._chain_max_rounds = chain_max_rounds

    @property
    def builder(self) -> CapabilityBuilder:
        return self._builder

    @property
    def collector(self) -> EventCollector:
        return self._collector

    # ------------------------------------------------------------------
    # Event intake
    # ------------------------------------------------------------------

    async def process_event(self, event: Event) -> None:
        """Build and run the command for *event*.

        Every ``Exception`` raised while building or running is routed to
        :meth:`handle_error` and swallowed.
        """
        await self._process(event)

    async def _process(self, event: Event) -> ProcessingStage:
        """Run *event* and return ``COMPLETED`` or the stage that failed."""
        with bind_event_context(event):
            _log.debug("event.received", event_type=event.type, event_id=event.id)
            command: Command | None = None
            context: CommandContext | None = None
            try:
                command = self._builder.build_command(event)
                context = CommandContext(event=event, event_collector=self._collector)
                await command.invoke(context)
            except Exception as exc:  # noqa: BLE001
                if context is None:
                    failed = ProcessingStage.BUILD_FAILED
                else:
                    failed = context.stage = context.stage.failed()
                await self._report(event, exc, failed, command.command_id if command is not None else None)
                if context is not None:
                    context.stage = ProcessingStage.ERROR_HANDLED
                return failed
            _log.debug(
                "event.completed",
                event_type=event.type,
                event_id=event.id,
                command_id=command.command_id,
            )
            return ProcessingStage.COMPLETED

    async def process_chain(self, event: Event, *, max_rounds: int | None = None) -> list[Event]:
        """Process *event* and re-submit the side effects it causes.

        Side effects are drained from the collector after each event and
        re-submitted breadth-first, in collection order, when their type has
        a registered factory.  Side effects of an event that failed are
        discarded: they are neither returned nor re-submitted.  Returns every
        other side effect observed, handled or not.  Assumes exclusive use of
        the collector for the duration.
        """
        rounds = max_rounds if max_rounds is not None else self._chain_max_rounds
        observed: list[Event] = []
        pending = [event]
        for _ in range(rounds):
            next_round: list[Event] = []
            for item in pending:
                outcome = await self._process(item)
                produced = self._collector.get_events()
                self._collector.clear()
                if outcome.is_failure:
                    if produced:
                        _log.info(
                            "chain.side_effects_discarded",
                            event_id=item.id,
                            event_type=item.type,
                            stage=outcome.value,
                            discarded=[e.type for e in produced],
                        )
                    continue
                observed.extend(produced)
                next_round.extend(e for e in produced if self._builder.has_factory(e.type))
            pending = next_round
            if not pending:
                break
        if pending:
            _log.warning(
                "chain.truncated",
                correlation_id=event.metadata.correlation_id,
                max_rounds=rounds,
                pending=[e.type for e in pending],
            )
        return observed

    # ------------------------------------------------------------------
    # Error routing
    # ------------------------------------------------------------------

    async def handle_error(
        self,
        event: Event,
        error: Exception,
        *,
        stage: ProcessingStage = ProcessingStage.BUILD_FAILED,
        command_id: str | None = None,
    ) -> None:
        """Record a failed event.  Override to add retry or compensation.

        The baseline logs the failure and forwards an :class:`ErrorRecord`
        to the injected observer.  No retry, no requeue.
        """
        record = ErrorRecord.of(event, error, stage, command_id)
        _log.error("event.failed", exc_info=error, **record.to_dict())
        if self._observer is None:
            return
        try:
            result = self._observer(record)
            if inspect.isawaitable(result):
                await result
        except Exception:  # noqa: BLE001
            _log.exception("error_observer.failed", event_id=event.id, event_type=event.type)

    async def _report(
        self,
        event: Event,
        error: Exception,
        stage: ProcessingStage,
        command_id: str | None,
    ) -> None:
        try:
            await self.handle_error(event, error, stage=stage, command_id=command_id)
        except Exception:  # noqa: BLE001
            _log.exception("handle_error.failed", event_id=event.id, event_type=event.type)


__all__ = ["DEFAULT_CHAIN_MAX_ROUNDS", "TransactionMediator"]
