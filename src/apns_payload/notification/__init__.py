"""Notification builders – pick a variant, set fields, ``build`` once."""
from apns_payload.notification.builder import NotificationBuilder, SingleUseBuilder
from apns_payload.notification.default import DefaultNotificationBuilder
from apns_payload.notification.web import WebNotificationBuilder
from apns_payload.payload import (
    CollapseId,
    CriticalSound,
    DefaultAlert,
    NotificationOptions,
    PlainAlert,
    Priority,
    PushType,
    SimpleSound,
    WebPushAlert,
)

__all__ = [
    "CollapseId",
    "CriticalSound",
    "DefaultAlert",
    "DefaultNotificationBuilder",
    "NotificationBuilder",
    "NotificationOptions",
    "PlainAlert",
    "Priority",
    "PushType",
    "SimpleSound",
    "SingleUseBuilder",
    "WebNotificationBuilder",
    "WebPushAlert",
]
