"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from ``{_prefix}_{FIELD}`` variables.

    Subclasses declare fields with defaults (or without, to make them
    required) and may override :meth:`_validate` for cross-field checks.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Variable name for *field_name*, e.g. ``SHADOW_TX_LOG_LEVEL``."""
        if not cls._prefix:
            return field_name.upper()
        return f"{cls._prefix}_{field_name}".upper()

    def _validate(self) -> None:
        return None


__all__ = ["Settings"]
