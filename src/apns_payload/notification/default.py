"""Notification builders – DefaultNotificationBuilder."""
from __future__ import annotations

import json
from typing import Any

from apns_payload.kernel.errors import SerializationError, ValidationError
from apns_payload.kernel.types import Nothing, Some, option_of
from apns_payload.notification.builder import SingleUseBuilder
from apns_payload.payload import (
    APS,
    APSSound,
    CriticalSound,
    DefaultAlert,
    NotificationOptions,
    Payload,
    PlainAlert,
    SimpleSound,
    check_custom_key,
)


class DefaultNotificationBuilder(SingleUseBuilder):
    """Builder for regular iOS/macOS notifications.

    Example::

        builder = DefaultNotificationBuilder("Hi")
        builder.set_badge(3).set_sound("ping.caf").set_category("cat1")
        payload = builder.build("device-token")
        payload.to_json_string().unwrap()
        # '{"aps":{"alert":"Hi","badge":3,"sound":"ping.caf","category":"cat1"}}'
    """

    kind = "default"

    def __init__(self, alert: PlainAlert | DefaultAlert | str) -> None:
        super().__init__()
        if isinstance(alert, str):
            alert = PlainAlert(alert)
        if not isinstance(alert, (PlainAlert, DefaultAlert)):
            raise ValidationError(
                f"Expected a plain or structured alert, got {type(alert).__name__}",
                field="alert",
            )
        self._alert: PlainAlert | DefaultAlert = alert
        self._badge: int | None = None
        self._sound: APSSound | None = None
        self._category: str | None = None
        self._content_available = False
        self._mutable_content = False
        self._data: dict[str, Any] = {}

    def set_badge(self, badge: int) -> "DefaultNotificationBuilder":
        """Number shown on the app icon; ``0`` clears it."""
        self._ensure_open()
        if badge < 0:
            raise ValidationError("Badge must not be negative", field="badge")
        self._badge = int(badge)
        return self

    def set_sound(self, sound: str) -> "DefaultNotificationBuilder":
        """File name of the custom sound to play when receiving the notification."""
        self._ensure_open()
        self._sound = SimpleSound(str(sound))
        return self

    def set_critical_sound(
        self,
        sound: str,
        volume: float = 1.0,
        critical: bool = True,
    ) -> "DefaultNotificationBuilder":
        """Play *sound* as a critical alert at *volume* (0.0 – 1.0)."""
        self._ensure_open()
        self._sound = CriticalSound(name=str(sound), volume=float(volume), critical=critical)
        return self

    def set_category(self, category: str) -> "DefaultNotificationBuilder":
        """Registered notification category, selects the actions shown."""
        self._ensure_open()
        self._category = category
        return self

    def set_content_available(self) -> "DefaultNotificationBuilder":
        """Wake the app in the background to fetch new content."""
        self._ensure_open()
        self._content_available = True
        return self

    def set_mutable_content(self) -> "DefaultNotificationBuilder":
        """Let a notification service extension modify the content."""
        self._ensure_open()
        self._mutable_content = True
        return self

    def add_custom_data(self, root_key: str, data: Any) -> "DefaultNotificationBuilder":
        """Attach *data* under the top-level *root_key*, next to ``aps``.

        Raises ``ValidationError`` for the reserved ``aps`` key and
        ``SerializationError`` when *data* has no JSON representation.
        """
        self._ensure_open()
        check_custom_key(root_key)
        try:
            json.dumps(data, allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Custom data for {root_key!r} is not JSON serialisable: {exc}",
                payload_type="data",
                cause=exc,
            ) from exc
        self._data[root_key] = data
        return self

    def build(self, device_token: Any, options: NotificationOptions | None = None) -> Payload:
        self._ensure_open()
        aps = APS(
            alert=Some(self._alert),
            badge=option_of(self._badge),
            sound=option_of(self._sound),
            content_available=Some(1) if self._content_available else Nothing(),
            category=option_of(self._category),
            mutable_content=Some(1) if self._mutable_content else Nothing(),
            url_args=Nothing(),
        )
        payload = Payload(
            device_token=str(device_token),
            aps=aps,
            options=options if options is not None else NotificationOptions(),
            data=dict(self._data),
        )
        return self._finish(payload)


__all__ = ["DefaultNotificationBuilder"]
