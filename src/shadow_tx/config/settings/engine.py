"""Config settings – EngineSettings and logging bootstrap."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from shadow_tx.application.mediator import DEFAULT_CHAIN_MAX_ROUNDS
from shadow_tx.config.settings.base import Settings
from shadow_tx.config.validation import InvalidSettingValueError
from shadow_tx.observability.logging import JsonLoggerFactory

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclasses.dataclass
class EngineSettings(Settings):
    """Process-wide engine settings, read from ``SHADOW_TX_*`` variables."""

    _prefix: ClassVar[str] = "SHADOW_TX"

    log_level: str = "INFO"
    log_json: bool = True
    chain_max_rounds: int = DEFAULT_CHAIN_MAX_ROUNDS

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVELS:
            raise InvalidSettingValueError("log_level", self.log_level, f"expected one of {', '.join(_LEVELS)}")
        if self.chain_max_rounds < 1:
            raise InvalidSettingValueError("chain_max_rounds", self.chain_max_rounds, "must be >= 1")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def configure_logging(settings: EngineSettings) -> None:
    """Apply *settings* to structlog and the stdlib root logger."""
    JsonLoggerFactory.configure(settings.log_level_number, json=settings.log_json)


__all__ = ["EngineSettings", "configure_logging"]
