"""Domain errors: a payload or business rule said no."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from shadow_tx.kernel.errors.base import BaseError


class DomainError(BaseError):
    default_code = "domain_error"


class ValidationError(DomainError):
    """Rejected event payload.

    ``errors`` optionally lists per-field problems as
    ``{"field": ..., "msg": ...}`` mappings.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: Iterable[Mapping[str, Any]] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = [dict(e) for e in errors]

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "errors": self.errors}


__all__ = ["DomainError", "ValidationError"]
