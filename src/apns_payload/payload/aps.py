"""Payload – APS, the reserved ``aps`` namespace of a notification body."""
from __future__ import annotations

import dataclasses
from typing import Any, Final

from apns_payload.kernel.errors import SerializationError
from apns_payload.kernel.types import Nothing, Option, Some
from apns_payload.payload.alert import APSAlert, alert_from_wire, alert_to_wire
from apns_payload.payload.sound import APSSound, sound_from_wire, sound_to_wire

APS_KEY: Final = "aps"

_WIRE_KEYS: Final = (
    ("alert", "alert"),
    ("badge", "badge"),
    ("sound", "sound"),
    ("content_available", "content-available"),
    ("category", "category"),
    ("mutable_content", "mutable-content"),
    ("url_args", "url-args"),
)


def _absent() -> Any:
    return dataclasses.field(default_factory=Nothing)


@dataclasses.dataclass(frozen=True)
class APS:
    """Content the push service interprets.

    Each member is an ``Option``; ``Nothing`` members never reach the wire.
    ``content_available`` and ``mutable_content`` are flags whose only
    present value is ``Some(1)``.
    """

    alert: Option[APSAlert] = _absent()
    badge: Option[int] = _absent()
    sound: Option[APSSound] = _absent()
    content_available: Option[int] = _absent()
    category: Option[str] = _absent()
    mutable_content: Option[int] = _absent()
    url_args: Option[tuple[str, ...]] = _absent()

    def present_keys(self) -> list[str]:
        """Wire keys of the members that are set, in wire order."""
        return [key for attr, key in _WIRE_KEYS if getattr(self, attr).is_some()]

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for attr, key in _WIRE_KEYS:
            option = getattr(self, attr)
            match option:
                case Some(value):
                    result[key] = self._render(attr, value)
                case Nothing():
                    pass
        return result

    @staticmethod
    def _render(attr: str, value: Any) -> Any:
        if attr == "alert":
            return alert_to_wire(value)
        if attr == "sound":
            return sound_to_wire(value)
        if attr == "url_args":
            return list(value)
        return value

    @classmethod
    def from_dict(cls, raw: Any) -> "APS":
        """Parse a wire ``aps`` object."""
        if not isinstance(raw, dict):
            raise SerializationError("aps must be an object", payload_type="aps")
        by_key = {key: attr for attr, key in _WIRE_KEYS}
        unknown = sorted(set(raw) - set(by_key))
        if unknown:
            raise SerializationError(f"Unknown aps keys: {', '.join(unknown)}", payload_type="aps")

        values: dict[str, Any] = {}
        for key, item in raw.items():
            attr = by_key[key]
            if attr == "alert":
                values[attr] = Some(alert_from_wire(item))
            elif attr == "sound":
                values[attr] = Some(sound_from_wire(item))
            elif attr == "url_args":
                if not isinstance(item, list):
                    raise SerializationError("url-args must be an array", payload_type="aps")
                values[attr] = Some(tuple(str(arg) for arg in item))
            else:
                values[attr] = Some(item)
        return cls(**values)


__all__ = ["APS", "APS_KEY"]
