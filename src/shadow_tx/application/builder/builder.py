"""Application builder – CapabilityBuilder.

A builder maps event types to command factories and carries two ordered
hook stacks.  Adding a hook never mutates the receiver: it returns a new
builder, so one base builder can be specialised into several independent
capability stacks::

    base = CapabilityBuilder()
    base.register_command_factory("PLACE_ORDER", PlaceOrder)
    base.ensure_registered("PLACE_ORDER")

    minimal = base.with_pre_invoke_hook(logging_hook())
    secure = (
        base
        .with_pre_invoke_hook(authorization_hook(authorizer))
        .with_pre_invoke_hook(validation_hook(validator))
        .with_post_invoke_hook(metrics_hook(metrics))
    )
"""
from __future__ import annotations

from collections.abc import Iterable

from shadow_tx.application.builder.hooked import HookedCommand
from shadow_tx.application.commands import Command, CommandFactory, Hook, HookFn, HookPhase, as_hook
from shadow_tx.kernel.errors import NoFactoryRegisteredError
from shadow_tx.kernel.events import Event
from shadow_tx.observability.logging import get_logger

_log = get_logger(__name__)


class CapabilityBuilder:
    """Immutable-per-hook configuration that turns events into decorated commands."""

    def __init__(
        self,
        factories: dict[str, CommandFactory] | None = None,
        *,
        pre_hooks: Iterable[Hook] = (),
        post_hooks: Iterable[Hook] = (),
    ) -> None:
        self._factories: dict[str, CommandFactory] = dict(factories or {})
        self._pre_hooks: tuple[Hook, ...] = tuple(pre_hooks)
        self._post_hooks: tuple[Hook, ...] = tuple(post_hooks)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def pre_hooks(self) -> tuple[Hook, ...]:
        return self._pre_hooks

    @property
    def post_hooks(self) -> tuple[Hook, ...]:
        return self._post_hooks

    @property
    def registered_event_types(self) -> frozenset[str]:
        return frozenset(self._factories)

    def has_factory(self, event_type: str) -> bool:
        return event_type in self._factories

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    def register_command_factory(self, event_type: str, factory: CommandFactory) -> None:
        """Associate *factory* with *event_type*; the last registration wins."""
        replaced = event_type in self._factories
        self._factories[event_type] = factory
        _log.debug("builder.factory_registered", event_type=event_type, replaced=replaced)

    def ensure_registered(self, *event_types: str) -> None:
        """Fail at startup, not at first event, when a known type has no factory.

        Raises:
            NoFactoryRegisteredError: for the first missing event type.
        """
        for event_type in event_types:
            if event_type not in self._factories:
                raise NoFactoryRegisteredError(event_type)

    def build_command(self, event: Event) -> Command:
        """Create the command for *event* wrapped with the current hook stacks.

        Raises:
            NoFactoryRegisteredError: if ``event.type`` has no factory.  No
                hook runs in that case.
        """
        factory = self._factories.get(event.type)
        if factory is None:
            raise NoFactoryRegisteredError(event.type)
        return self.wrap_with_hooks(factory(event))

    def wrap_with_hooks(self, command: Command) -> HookedCommand:
        return HookedCommand(command, self._pre_hooks, self._post_hooks)

    # ------------------------------------------------------------------
    # Capability composition
    # ------------------------------------------------------------------

    def with_pre_invoke_hook(self, hook: Hook | HookFn) -> "CapabilityBuilder":
        """Return a new builder with *hook* appended to the pre-invoke stack."""
        return CapabilityBuilder(
            self._factories,
            pre_hooks=(*self._pre_hooks, as_hook(hook)),
            post_hooks=self._post_hooks,
        )

    def with_post_invoke_hook(self, hook: Hook | HookFn) -> "CapabilityBuilder":
        """Return a new builder with *hook* appended to the post-invoke stack."""
        return CapabilityBuilder(
            self._factories,
            pre_hooks=self._pre_hooks,
            post_hooks=(*self._post_hooks, as_hook(hook)),
        )

    def with_hook(self, phase: HookPhase, hook: Hook | HookFn) -> "CapabilityBuilder":
        if phase is HookPhase.PRE:
            return self.with_pre_invoke_hook(hook)
        return self.with_post_invoke_hook(hook)

    def with_hooks(
        self,
        pre: Iterable[Hook | HookFn] = (),
        post: Iterable[Hook | HookFn] = (),
    ) -> "CapabilityBuilder":
        """Append several hooks at once, in iteration order."""
        builder = self
        for hook in pre:
            builder = builder.with_pre_invoke_hook(hook)
        for hook in post:
            builder = builder.with_post_invoke_hook(hook)
        return builder

    def __repr__(self) -> str:
        return (
            f"CapabilityBuilder(event_types={sorted(self._factories)!r}, "
            f"pre={[h.name for h in self._pre_hooks]!r}, "
            f"post={[h.name for h in self._post_hooks]!r})"
        )


__all__ = ["CapabilityBuilder"]
