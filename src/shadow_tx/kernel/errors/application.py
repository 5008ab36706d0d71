"""Application-layer errors – engine configuration and cross-cutting checks."""

from __future__ import annotations

from typing import Any

from shadow_tx.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ConfigurationError(ApplicationError):
    """The engine was assembled incorrectly."""

    default_code = "configuration_error"


class NoFactoryRegisteredError(ConfigurationError):
    """No command factory is registered for an event type.

    Raised by the builder before any hook runs; never retried.
    """

    default_code = "no_factory_registered"

    def __init__(self, event_type: str, **kwargs: Any) -> None:
        super().__init__(
            f"No command factory registered for event type: {event_type}",
            detail={"event_type": event_type},
            **kwargs,
        )
        self.event_type = event_type


class UnauthorizedError(ApplicationError):
    """An event source is not allowed to raise the given event type."""

    default_code = "unauthorized"

    def __init__(
        self,
        message: str | None = None,
        *,
        source: str = "",
        event_type: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"Unauthorized source: {source}",
            detail={"source": source, "event_type": event_type},
            **kwargs,
        )
        self.source = source
        self.event_type = event_type


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "NoFactoryRegisteredError",
    "UnauthorizedError",
]
