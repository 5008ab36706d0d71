"""Kernel – framework-agnostic building blocks."""

from shadow_tx.kernel.errors import (
    ApplicationError,
    BaseError,
    ConfigurationError,
    DomainError,
    NoFactoryRegisteredError,
    UnauthorizedError,
    ValidationError,
)
from shadow_tx.kernel.events import Event, EventMetadata
from shadow_tx.kernel.time import Clock, FrozenClock, SystemClock

__all__ = [
    "ApplicationError",
    "BaseError",
    "Clock",
    "ConfigurationError",
    "DomainError",
    "Event",
    "EventMetadata",
    "FrozenClock",
    "NoFactoryRegisteredError",
    "SystemClock",
    "UnauthorizedError",
    "ValidationError",
]
