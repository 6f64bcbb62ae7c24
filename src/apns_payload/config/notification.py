"""Config – NotificationSettings, env defaults for delivery metadata."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from apns_payload.config.settings.base import Settings
from apns_payload.config.validation import InvalidSettingValueError
from apns_payload.payload.options import MAX_COLLAPSE_ID_BYTES, Priority, PushType


@dataclasses.dataclass
class NotificationSettings(Settings):
    """Default ``NotificationOptions`` values read from ``APNS_*`` variables.

    ``APNS_TOPIC``, ``APNS_PUSH_TYPE``, ``APNS_PRIORITY``, ``APNS_EXPIRATION``
    and ``APNS_COLLAPSE_ID`` are all optional.
    """

    _prefix: ClassVar[str] = "APNS"

    topic: str | None = None
    push_type: str | None = None
    priority: int | None = None
    expiration: int | None = None
    collapse_id: str | None = None

    def _validate(self) -> None:
        if self.push_type is not None and self.push_type not in {p.value for p in PushType}:
            raise InvalidSettingValueError("push_type", self.push_type, "unknown push type")
        if self.priority is not None and self.priority not in {p.value for p in Priority}:
            raise InvalidSettingValueError("priority", self.priority, "expected 5 or 10")
        if self.expiration is not None and self.expiration < 0:
            raise InvalidSettingValueError("expiration", self.expiration, "must not be negative")
        if self.collapse_id is not None and len(self.collapse_id.encode("utf-8")) > MAX_COLLAPSE_ID_BYTES:
            raise InvalidSettingValueError(
                "collapse_id", self.collapse_id, f"longer than {MAX_COLLAPSE_ID_BYTES} bytes"
            )


__all__ = ["NotificationSettings"]
