"""Config settings – SettingsLoader, EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from shadow_tx.config.settings.base import Settings
from shadow_tx.config.validation import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})


def _to_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUE


def _to_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


# Field annotations arrive as strings when the settings module uses
# ``from __future__ import annotations``.
_COERCERS: dict[Any, Callable[[str], Any]] = {
    bool: _to_bool,
    "bool": _to_bool,
    int: int,
    "int": int,
    float: float,
    "float": float,
}


class SettingsLoader(abc.ABC):
    """Port: build a :class:`Settings` instance from some external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read settings from environment variables.

    *environ* defaults to ``os.environ``; pass a plain mapping in tests.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = self._environ if self._environ is not None else os.environ
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            key = settings_class.env_key(field.name)
            raw = environ.get(key)
            if raw is None:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(key)
                continue
            values[field.name] = self._coerce(key, raw, field.type)

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Could not build {settings_class.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def _coerce(key: str, raw: str, annotation: Any) -> Any:
        if getattr(annotation, "__origin__", None) is list or str(annotation).startswith("list["):
            return _to_list(raw)
        coerce = _COERCERS.get(annotation)
        if coerce is None:
            return raw
        try:
            return coerce(raw)
        except ValueError as exc:
            raise ConfigError(f"{key} must be {getattr(annotation, '__name__', annotation)}, got {raw!r}") from exc


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
