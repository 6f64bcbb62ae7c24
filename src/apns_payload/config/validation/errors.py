"""Config validation errors."""
from __future__ import annotations

from typing import Any

from apns_payload.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Notification settings could not be loaded."""

    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """An ``APNS_*`` value is present but unusable for notification options.

    ``setting_name`` is the settings field (or env key when coercion from
    text already failed); the rejected value and reason go into ``detail``.
    """

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid {setting_name}: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
            **kwargs,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
