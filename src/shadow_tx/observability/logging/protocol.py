"""Observability – Logger protocol."""
from __future__ import annotations

from typing import Any, Protocol


class Logger(Protocol):
    """What hooks need from a logger; structlog bound loggers qualify.

    Calls take an event name plus structured key-value fields.
    """

    def debug(self, event: str, **fields: Any) -> Any: ...

    def info(self, event: str, **fields: Any) -> Any: ...

    def warning(self, event: str, **fields: Any) -> Any: ...

    def error(self, event: str, **fields: Any) -> Any: ...


__all__ = ["Logger"]
