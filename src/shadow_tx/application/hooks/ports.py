"""Application hooks – service ports closed over by hook factories."""
from __future__ import annotations

from collections.abc import Awaitable, Mapping
from typing import Any, Protocol


class PayloadValidator(Protocol):
    """Port: decide whether a payload is acceptable for an event type."""

    def validate(self, event_type: str, payload: Mapping[str, Any]) -> bool | Awaitable[bool]: ...


class Authorizer(Protocol):
    """Port: decide whether a source may raise an event type."""

    def check_authorization(self, source: str, event_type: str) -> bool | Awaitable[bool]: ...


__all__ = ["Authorizer", "PayloadValidator"]
