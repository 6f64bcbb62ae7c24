"""Notification options – delivery metadata carried beside the payload body.

The transport sends these as ``apns-*`` request headers; this module only
holds the values.
"""
from __future__ import annotations

import dataclasses
import enum
from typing import TYPE_CHECKING, Any, Final

from apns_payload.kernel.errors import ValidationError

if TYPE_CHECKING:
    from apns_payload.config.notification import NotificationSettings

MAX_COLLAPSE_ID_BYTES: Final = 64


class Priority(enum.IntEnum):
    """``apns-priority``: 10 delivers immediately, 5 lets the device save power."""

    NORMAL = 5
    HIGH = 10


class PushType(enum.StrEnum):
    """``apns-push-type`` values."""

    ALERT = "alert"
    BACKGROUND = "background"
    LOCATION = "location"
    VOIP = "voip"
    COMPLICATION = "complication"
    FILEPROVIDER = "fileprovider"
    MDM = "mdm"
    LIVEACTIVITY = "liveactivity"
    PUSHTOTALK = "pushtotalk"


@dataclasses.dataclass(frozen=True, slots=True)
class CollapseId:
    """``apns-collapse-id``: groups notifications so only the newest is shown."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value.encode("utf-8")) > MAX_COLLAPSE_ID_BYTES:
            raise ValidationError(
                f"Collapse id may not exceed {MAX_COLLAPSE_ID_BYTES} bytes",
                field="apns_collapse_id",
            )

    def __str__(self) -> str:
        return self.value


@dataclasses.dataclass(frozen=True, slots=True)
class NotificationOptions:
    """Per-request delivery metadata; every field ``None`` means protocol default."""

    apns_id: str | None = None
    apns_expiration: int | None = None
    apns_priority: Priority | None = None
    apns_topic: str | None = None
    apns_collapse_id: CollapseId | None = None
    apns_push_type: PushType | None = None

    @classmethod
    def from_settings(cls, settings: "NotificationSettings", **overrides: Any) -> "NotificationOptions":
        """Build options from env-loaded defaults; *overrides* win per field."""
        values: dict[str, Any] = {
            "apns_topic": settings.topic,
            "apns_expiration": settings.expiration,
            "apns_priority": Priority(settings.priority) if settings.priority is not None else None,
            "apns_push_type": PushType(settings.push_type) if settings.push_type is not None else None,
            "apns_collapse_id": CollapseId(settings.collapse_id) if settings.collapse_id is not None else None,
        }
        values.update(overrides)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the set options keyed by their header name (raw values)."""
        result: dict[str, Any] = {}
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if value is None:
                continue
            if isinstance(value, CollapseId):
                value = value.value
            result[field.name.replace("_", "-")] = value
        return result


__all__ = [
    "MAX_COLLAPSE_ID_BYTES",
    "CollapseId",
    "NotificationOptions",
    "Priority",
    "PushType",
]
