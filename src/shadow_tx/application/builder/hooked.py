"""Application builder – HookedCommand, a command decorated with hooks."""
from __future__ import annotations

from collections.abc import Sequence

from shadow_tx.application.commands import Command, CommandContext, Hook, ProcessingStage


class HookedCommand(Command):
    """Run pre-hooks, the wrapped command, then post-hooks, strictly in order.

    Each hook is awaited to completion before the next one starts.  The
    first exception stops every later step and propagates unchanged; the
    context's ``stage`` is left on the phase that raised.  Hooks receive the
    wrapped (undecorated) command.
    """

    def __init__(
        self,
        command: Command,
        pre_hooks: Sequence[Hook] = (),
        post_hooks: Sequence[Hook] = (),
    ) -> None:
        self._command = command
        self._pre_hooks = tuple(pre_hooks)
        self._post_hooks = tuple(post_hooks)
        self.command_id = command.command_id

    @property
    def wrapped(self) -> Command:
        return self._command

    @property
    def pre_hooks(self) -> tuple[Hook, ...]:
        return self._pre_hooks

    @property
    def post_hooks(self) -> tuple[Hook, ...]:
        return self._post_hooks

    async def invoke(self, context: CommandContext) -> None:
        context.stage = ProcessingStage.PRE_HOOKS
        for hook in self._pre_hooks:
            await hook.run(self._command, context)

        context.stage = ProcessingStage.CORE
        await self._command.invoke(context)

        context.stage = ProcessingStage.POST_HOOKS
        for hook in self._post_hooks:
            await hook.run(self._command, context)

        context.stage = ProcessingStage.COMPLETED

    def __repr__(self) -> str:
        return (
            f"HookedCommand({self._command!r}, pre={len(self._pre_hooks)}, "
            f"post={len(self._post_hooks)})"
        )


__all__ = ["HookedCommand"]
