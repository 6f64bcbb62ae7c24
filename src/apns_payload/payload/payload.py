"""Payload – the envelope handed to the transport.

Only ``aps`` and the custom ``data`` entries form the JSON body; the device
token and ``NotificationOptions`` travel out of band.
"""
from __future__ import annotations

import dataclasses
import json
import types
from typing import Any, Mapping, Protocol, runtime_checkable

from apns_payload.kernel.errors import SerializationError, ValidationError
from apns_payload.kernel.types import Err, Ok, Result
from apns_payload.observability.logging import get_logger
from apns_payload.payload.aps import APS, APS_KEY
from apns_payload.payload.options import NotificationOptions


def check_custom_key(root_key: str) -> None:
    """Reject custom-data keys that would shadow the reserved namespace."""
    if root_key == APS_KEY:
        raise ValidationError(
            f"Custom data key {root_key!r} is reserved",
            field="data",
        )


@runtime_checkable
class PayloadLike(Protocol):
    """Port: what a transport needs from a built notification."""

    def to_json_string(self) -> Result[str, SerializationError]: ...

    def get_device_token(self) -> str: ...

    def get_options(self) -> NotificationOptions: ...


@dataclasses.dataclass(frozen=True)
class Payload:
    """A built notification: body content plus delivery metadata."""

    device_token: str
    aps: APS
    options: NotificationOptions = dataclasses.field(default_factory=NotificationOptions)
    data: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    # data may hold lists and dicts; payloads support == only
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        for key in self.data:
            check_custom_key(key)
        frozen = types.MappingProxyType({key: self.data[key] for key in sorted(self.data)})
        object.__setattr__(self, "data", frozen)

    def get_device_token(self) -> str:
        return self.device_token

    def get_options(self) -> NotificationOptions:
        return self.options

    def to_dict(self) -> dict[str, Any]:
        """Wire object: ``aps`` first, then custom keys in sorted order."""
        result: dict[str, Any] = {APS_KEY: self.aps.to_dict()}
        result.update(self.data)
        return result

    def to_json_string(self) -> Result[str, SerializationError]:
        """Render the compact JSON body.

        A custom value the ``json`` module cannot encode comes back as
        ``Err(SerializationError)``.
        """
        try:
            return Ok(json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False, allow_nan=False))
        except (TypeError, ValueError) as exc:
            get_logger(__name__).warning("payload.serialization_failed", error=str(exc))
            return Err(SerializationError(f"Payload is not JSON serialisable: {exc}", payload_type="payload", cause=exc))

    @classmethod
    def from_json(
        cls,
        text: str | bytes,
        device_token: str,
        options: NotificationOptions | None = None,
    ) -> "Payload":
        """Parse a wire JSON body; every non-``aps`` key becomes custom data."""
        try:
            raw = json.loads(text)
        except ValueError as exc:
            raise SerializationError(f"Invalid JSON: {exc}", payload_type="payload", cause=exc) from exc
        if not isinstance(raw, dict) or APS_KEY not in raw:
            raise SerializationError("Payload must be an object with an 'aps' member", payload_type="payload")
        aps = APS.from_dict(raw.pop(APS_KEY))
        return cls(
            device_token=str(device_token),
            aps=aps,
            options=options if options is not None else NotificationOptions(),
            data=raw,
        )


__all__ = ["Payload", "PayloadLike", "check_custom_key"]
