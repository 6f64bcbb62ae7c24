"""Config settings – 12-factor env-based configuration."""
from apns_payload.config.settings.base import Settings
from apns_payload.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
