"""Application hooks – built-in capability hooks.

Each factory closes over the service it needs and returns a :class:`Hook`
ready for ``with_pre_invoke_hook`` / ``with_post_invoke_hook``.
"""
from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from shadow_tx.application.commands import Command, CommandContext, Hook
from shadow_tx.application.hooks.ports import Authorizer, PayloadValidator
from shadow_tx.kernel.errors import UnauthorizedError, ValidationError
from shadow_tx.observability.logging import Logger, get_logger
from shadow_tx.observability.metrics import Metrics


async def _resolve(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


class LoggingHook(Hook):
    """Log the command about to run (pre-invoke)."""

    def __init__(self, logger: Logger | None = None) -> None:
        self._log = logger or get_logger("shadow_tx.hooks")

    async def run(self, command: Command, context: CommandContext) -> None:
        event = context.event
        self._log.info(
            "command.executing",
            command_id=command.command_id,
            event_type=event.type,
            event_id=event.id,
            correlation_id=event.metadata.correlation_id,
            payload=dict(context.payload),
        )


class MetricsHook(Hook):
    """Count executions and side effects per event type (post-invoke)."""

    def __init__(self, metrics: Metrics) -> None:
        self._executions = metrics.counter("command.executions", "Commands completed")
        self._side_effects = metrics.histogram(
            "command.side_effects", "Side-effect events in the collector after a command", "events"
        )

    async def run(self, command: Command, context: CommandContext) -> None:  # noqa: ARG002
        labels = {"event_type": context.event.type}
        self._executions.add(1.0, labels)
        self._side_effects.record(float(len(context.event_collector.get_events())), labels)


class ValidationHook(Hook):
    """Reject payloads the validator does not accept (pre-invoke)."""

    def __init__(self, validator: PayloadValidator) -> None:
        self._validator = validator

    async def run(self, command: Command, context: CommandContext) -> None:  # noqa: ARG002
        event_type = context.event.type
        valid = await _resolve(self._validator.validate(event_type, context.payload))
        if not valid:
            raise ValidationError(
                f"Invalid event payload for {event_type}",
                detail={"event_type": event_type, "event_id": context.event.id},
            )


class AuthorizationHook(Hook):
    """Reject events whose source may not raise their type (pre-invoke)."""

    def __init__(self, authorizer: Authorizer) -> None:
        self._authorizer = authorizer

    async def run(self, command: Command, context: CommandContext) -> None:  # noqa: ARG002
        source = context.event.metadata.source
        event_type = context.event.type
        allowed = await _resolve(self._authorizer.check_authorization(source, event_type))
        if not allowed:
            raise UnauthorizedError(source=source, event_type=event_type)


class StateHook(Hook):
    """Store a derived value in ``context.state`` for later hooks and the command."""

    def __init__(self, key: str, compute: Callable[[CommandContext], Any | Awaitable[Any]]) -> None:
        self._key = key
        self._compute = compute

    @property
    def name(self) -> str:
        return f"StateHook[{self._key}]"

    async def run(self, command: Command, context: CommandContext) -> None:  # noqa: ARG002
        context.state[self._key] = await _resolve(self._compute(context))


class EnrichmentHook(Hook):
    """Merge computed fields into the context's enriched payload.

    *compute* returns a mapping of new fields, or ``None`` to skip.
    """

    def __init__(
        self,
        compute: Callable[[CommandContext], Mapping[str, Any] | None | Awaitable[Mapping[str, Any] | None]],
    ) -> None:
        self._compute = compute

    async def run(self, command: Command, context: CommandContext) -> None:  # noqa: ARG002
        patch = await _resolve(self._compute(context))
        if patch:
            context.enrich(**patch)


def logging_hook(logger: Logger | None = None) -> Hook:
    return LoggingHook(logger)


def metrics_hook(metrics: Metrics) -> Hook:
    return MetricsHook(metrics)


def validation_hook(validator: PayloadValidator) -> Hook:
    return ValidationHook(validator)


def authorization_hook(authorizer: Authorizer) -> Hook:
    return AuthorizationHook(authorizer)


def state_hook(key: str, compute: Callable[[CommandContext], Any | Awaitable[Any]]) -> Hook:
    return StateHook(key, compute)


def enrichment_hook(
    compute: Callable[[CommandContext], Mapping[str, Any] | None | Awaitable[Mapping[str, Any] | None]],
) -> Hook:
    return EnrichmentHook(compute)


__all__ = [
    "AuthorizationHook",
    "EnrichmentHook",
    "LoggingHook",
    "MetricsHook",
    "StateHook",
    "ValidationHook",
    "authorization_hook",
    "enrichment_hook",
    "logging_hook",
    "metrics_hook",
    "state_hook",
    "validation_hook",
]
