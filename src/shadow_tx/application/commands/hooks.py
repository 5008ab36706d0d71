"""Application commands – Hook port and FunctionHook adapter."""
from __future__ import annotations

import abc
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any, TypeAlias

from shadow_tx.application.commands.command import Command
from shadow_tx.application.commands.context import CommandContext

HookFn: TypeAlias = Callable[[Command, CommandContext], Awaitable[None]]


class HookPhase(str, Enum):
    PRE = "pre"
    POST = "post"


class Hook(abc.ABC):
    """A unit of cross-cutting behaviour run before or after a command.

    Raising aborts the rest of the pipeline for the current event.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    @abc.abstractmethod
    async def run(self, command: Command, context: CommandContext) -> None: ...


class FunctionHook(Hook):
    """Adapt a plain ``async (command, context) -> None`` callable."""

    def __init__(self, fn: HookFn, name: str | None = None) -> None:
        self._fn = fn
        self._name = name or getattr(fn, "__name__", repr(fn))

    @property
    def name(self) -> str:
        return self._name

    async def run(self, command: Command, context: CommandContext) -> None:
        await self._fn(command, context)

    def __repr__(self) -> str:
        return f"FunctionHook({self._name!r})"


def as_hook(hook: Hook | HookFn | Any) -> Hook:
    """Normalise a :class:`Hook` or an async callable into a :class:`Hook`."""
    if isinstance(hook, Hook):
        return hook
    if callable(hook):
        return FunctionHook(hook)
    raise TypeError(f"Expected a Hook or an async callable, got {type(hook).__name__}")


__all__ = ["FunctionHook", "Hook", "HookFn", "HookPhase", "as_hook"]
