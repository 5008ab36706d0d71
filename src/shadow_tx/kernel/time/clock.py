"""Kernel time – clocks that stamp event metadata."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


def utc_now() -> datetime:
    return datetime.now(UTC)


class Clock(Protocol):
    """Source of event timestamps; always timezone-aware UTC."""

    def now(self) -> datetime: ...


class SystemClock:
    def now(self) -> datetime:
        return utc_now()


class FrozenClock:
    """Deterministic clock for tests.

    Returns *start* until moved.  With *step*, every :meth:`now` call moves
    the clock forward afterwards, so consecutive events get distinct,
    ordered timestamps::

        clock = FrozenClock(datetime(2024, 1, 1, tzinfo=UTC), step=timedelta(seconds=1))
    """

    def __init__(self, start: datetime, *, step: timedelta | None = None) -> None:
        if start.tzinfo is None:
            raise ValueError("FrozenClock needs a timezone-aware start")
        self._current = start
        self._step = step

    def now(self) -> datetime:
        current = self._current
        if self._step is not None:
            self._current += self._step
        return current

    def advance(self, **delta: float) -> datetime:
        """Move forward by ``timedelta(**delta)`` and return the new time."""
        self._current += timedelta(**delta)
        return self._current


__all__ = ["Clock", "FrozenClock", "SystemClock", "utc_now"]
