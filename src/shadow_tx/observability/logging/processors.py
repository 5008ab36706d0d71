"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from shadow_tx.observability.logging.context import EventContext


class EventContextProcessor:
    """structlog processor that injects the ambient event identifiers.

    Injects ``correlation_id`` and ``causation_id`` (the latter only for
    side-effect events) when an :class:`EventLogContext` is active.  Values
    bound explicitly on the logger win.

    Usage::

        structlog.configure(processors=[EventContextProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        ctx = EventContext.get()
        if ctx is not None:
            event_dict.setdefault("correlation_id", ctx.correlation_id)
            if ctx.causation_id:
                event_dict.setdefault("causation_id", ctx.causation_id)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["EventContextProcessor", "get_logger"]
