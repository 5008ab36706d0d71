"""Application commands – Command port and BaseCommand."""
from __future__ import annotations

import abc
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias
from uuid import uuid4

from shadow_tx.kernel.events import Event

if TYPE_CHECKING:
    from shadow_tx.application.commands.context import CommandContext


class Command(abc.ABC):
    """A unit of business logic, opaque to the engine.

    ``command_id`` is fixed for the command's lifetime.  Implementations may
    read and write ``context.state`` and publish any number of side effects,
    and must behave correctly with no hooks attached.
    """

    command_id: str

    @abc.abstractmethod
    async def invoke(self, context: "CommandContext") -> None: ...


class BaseCommand(Command):
    """Command built from its triggering event.

    Subclasses set ``command_prefix`` and implement :meth:`invoke`::

        class PlaceOrder(BaseCommand):
            command_prefix = "place-order"

            async def invoke(self, context: CommandContext) -> None:
                context.emit("ORDER_PLACED", {"sku": self.event.payload["sku"]})
    """

    command_prefix: str = "command"

    def __init__(self, event: Event) -> None:
        self.event = event
        self.command_id = f"{self.command_prefix}-{uuid4().hex[:7]}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(command_id={self.command_id!r})"


CommandFactory: TypeAlias = Callable[[Event], Command]


__all__ = ["BaseCommand", "Command", "CommandFactory"]
