"""Application mediator – ErrorRecord and error observers."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any, Awaitable, Protocol

from shadow_tx.application.commands import ProcessingStage
from shadow_tx.kernel.errors import BaseError
from shadow_tx.kernel.events import Event
from shadow_tx.kernel.time import utc_now


@dataclasses.dataclass(frozen=True)
class ErrorRecord:
    """Structured description of one failed ``process_event`` call."""

    event_id: str
    event_type: str
    correlation_id: str
    stage: ProcessingStage
    error: Exception
    command_id: str | None = None
    occurred_at: datetime = dataclasses.field(default_factory=utc_now)

    @classmethod
    def of(
        cls,
        event: Event,
        error: Exception,
        stage: ProcessingStage,
        command_id: str | None = None,
    ) -> "ErrorRecord":
        return cls(
            event_id=event.id,
            event_type=event.type,
            correlation_id=event.metadata.correlation_id,
            stage=stage,
            error=error,
            command_id=command_id,
        )

    @property
    def error_code(self) -> str:
        if isinstance(self.error, BaseError):
            return self.error.code
        return type(self.error).__name__

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging)."""
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "correlation_id": self.correlation_id,
            "stage": self.stage.value,
            "error_code": self.error_code,
            "error": str(self.error),
            "command_id": self.command_id,
            "occurred_at": self.occurred_at.isoformat(),
        }


class ErrorObserver(Protocol):
    """Receives every failure the mediator absorbs.

    May be a plain callable or a coroutine function.
    """

    def __call__(self, record: ErrorRecord) -> None | Awaitable[None]: ...


class RecordingErrorObserver:
    """Keeps every :class:`ErrorRecord` in memory for later inspection."""

    def __init__(self) -> None:
        self.records: list[ErrorRecord] = []

    def __call__(self, record: ErrorRecord) -> None:
        self.records.append(record)

    def for_event(self, event_id: str) -> list[ErrorRecord]:
        return [r for r in self.records if r.event_id == event_id]

    def clear(self) -> None:
        self.records.clear()

    def __len__(self) -> int:
        return len(self.records)


__all__ = ["ErrorObserver", "ErrorRecord", "RecordingErrorObserver"]
