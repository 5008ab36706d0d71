"""Config – 12-factor settings and loaders."""

from shadow_tx.config.settings import EngineSettings, EnvSettingsLoader, Settings, SettingsLoader, configure_logging
from shadow_tx.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EngineSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "configure_logging",
]
