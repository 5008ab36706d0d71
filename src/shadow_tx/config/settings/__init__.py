"""Config settings – 12-factor env-based configuration."""
from shadow_tx.config.settings.base import Settings
from shadow_tx.config.settings.engine import EngineSettings, configure_logging
from shadow_tx.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EngineSettings", "EnvSettingsLoader", "Settings", "SettingsLoader", "configure_logging"]
