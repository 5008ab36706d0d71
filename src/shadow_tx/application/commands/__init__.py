"""Application commands – Command, CommandContext, Hook."""
from shadow_tx.application.commands.command import BaseCommand, Command, CommandFactory
from shadow_tx.application.commands.context import CommandContext
from shadow_tx.application.commands.hooks import FunctionHook, Hook, HookFn, HookPhase, as_hook
from shadow_tx.application.commands.stage import ProcessingStage

__all__ = [
    "BaseCommand",
    "Command",
    "CommandContext",
    "CommandFactory",
    "FunctionHook",
    "Hook",
    "HookFn",
    "HookPhase",
    "ProcessingStage",
    "as_hook",
]
