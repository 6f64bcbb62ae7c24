"""Notification builders – WebNotificationBuilder for Safari web push."""
from __future__ import annotations

from typing import Any, Iterable

from apns_payload.kernel.types import Nothing, Some, option_of
from apns_payload.notification.builder import SingleUseBuilder
from apns_payload.payload import (
    APS,
    NotificationOptions,
    Payload,
    SimpleSound,
    WebPushAlert,
)


class WebNotificationBuilder(SingleUseBuilder):
    """Builder for website push notifications.

    ``url_args`` fill the placeholders of the URL registered for the site;
    the ``url-args`` key is always sent, even when empty. Web push carries
    no badge, category, flags or custom data.
    """

    kind = "web"

    def __init__(self, alert: WebPushAlert, url_args: Iterable[Any]) -> None:
        super().__init__()
        self._alert = alert
        self._url_args = tuple(str(arg) for arg in url_args)
        self._sound: SimpleSound | None = None

    def set_sound(self, sound: str) -> "WebNotificationBuilder":
        """File name of the custom sound to play when receiving the notification."""
        self._ensure_open()
        self._sound = SimpleSound(str(sound))
        return self

    def build(self, device_token: Any, options: NotificationOptions | None = None) -> Payload:
        self._ensure_open()
        aps = APS(
            alert=Some(self._alert),
            badge=Nothing(),
            sound=option_of(self._sound),
            content_available=Nothing(),
            category=Nothing(),
            mutable_content=Nothing(),
            url_args=Some(self._url_args),
        )
        payload = Payload(
            device_token=str(device_token),
            aps=aps,
            options=options if options is not None else NotificationOptions(),
        )
        return self._finish(payload)


__all__ = ["WebNotificationBuilder"]
