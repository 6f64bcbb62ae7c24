"""Config – env-based notification defaults, loaders, and errors."""

from apns_payload.config.notification import NotificationSettings
from apns_payload.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from apns_payload.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "NotificationSettings",
    "Settings",
    "SettingsLoader",
]
