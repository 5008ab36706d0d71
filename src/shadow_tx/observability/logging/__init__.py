"""Observability – structured logging helpers."""
from shadow_tx.observability.logging.protocol import Logger
from shadow_tx.observability.logging.context import EventContext, EventLogContext, bind_event_context
from shadow_tx.observability.logging.factory import JsonLoggerFactory
from shadow_tx.observability.logging.processors import EventContextProcessor, get_logger

__all__ = [
    "EventContext",
    "EventContextProcessor",
    "EventLogContext",
    "JsonLoggerFactory",
    "Logger",
    "bind_event_context",
    "get_logger",
]
