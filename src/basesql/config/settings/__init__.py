"""Config settings – 12-factor env-based configuration."""
from basesql.config.settings.base import Settings
from basesql.config.settings.engine import EngineSettings
from basesql.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EngineSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
