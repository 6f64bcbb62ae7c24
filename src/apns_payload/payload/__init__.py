"""Payload – the APNs wire model: alert/sound variants, APS, options, envelope."""
from apns_payload.payload.alert import (
    APSAlert,
    DefaultAlert,
    PlainAlert,
    WebPushAlert,
    alert_from_wire,
    alert_to_wire,
)
from apns_payload.payload.aps import APS, APS_KEY
from apns_payload.payload.options import (
    MAX_COLLAPSE_ID_BYTES,
    CollapseId,
    NotificationOptions,
    Priority,
    PushType,
)
from apns_payload.payload.payload import Payload, PayloadLike, check_custom_key
from apns_payload.payload.sound import (
    APSSound,
    CriticalSound,
    SimpleSound,
    sound_from_wire,
    sound_to_wire,
)

__all__ = [
    "APS",
    "APSAlert",
    "APSSound",
    "APS_KEY",
    "CollapseId",
    "CriticalSound",
    "DefaultAlert",
    "MAX_COLLAPSE_ID_BYTES",
    "NotificationOptions",
    "Payload",
    "PayloadLike",
    "PlainAlert",
    "Priority",
    "PushType",
    "SimpleSound",
    "WebPushAlert",
    "alert_from_wire",
    "alert_to_wire",
    "check_custom_key",
    "sound_from_wire",
    "sound_to_wire",
]
