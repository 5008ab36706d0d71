"""Application – builder, collector, mediator and hooks."""

from shadow_tx.application.builder import CapabilityBuilder, HookedCommand
from shadow_tx.application.collector import EventCollector, FifoEventCollector
from shadow_tx.application.commands import (
    BaseCommand,
    Command,
    CommandContext,
    CommandFactory,
    FunctionHook,
    Hook,
    HookPhase,
    ProcessingStage,
)
from shadow_tx.application.mediator import ErrorRecord, RecordingErrorObserver, TransactionMediator

__all__ = [
    "BaseCommand",
    "CapabilityBuilder",
    "Command",
    "CommandContext",
    "CommandFactory",
    "ErrorRecord",
    "EventCollector",
    "FifoEventCollector",
    "FunctionHook",
    "Hook",
    "HookPhase",
    "HookedCommand",
    "ProcessingStage",
    "RecordingErrorObserver",
    "TransactionMediator",
]
