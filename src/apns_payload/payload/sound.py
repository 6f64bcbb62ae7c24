"""Payload – the shapes the ``aps.sound`` field may take."""
from __future__ import annotations

import dataclasses
from typing import Any

from apns_payload.kernel.errors import SerializationError


@dataclasses.dataclass(frozen=True, slots=True)
class SimpleSound:
    """Name of a sound file in the app bundle, or ``"default"``."""

    name: str


@dataclasses.dataclass(frozen=True, slots=True)
class CriticalSound:
    """Critical-alert sound; needs the critical-alerts entitlement."""

    name: str
    volume: float = 1.0
    critical: bool = True


type APSSound = SimpleSound | CriticalSound


def sound_to_wire(sound: APSSound) -> str | dict[str, Any]:
    """Render *sound* to its JSON-ready value."""
    match sound:
        case SimpleSound(name):
            return name
        case CriticalSound(name, volume, critical):
            return {"critical": critical, "name": name, "volume": float(volume)}
    raise TypeError(f"Unsupported sound variant: {type(sound).__name__}")


def sound_from_wire(value: Any) -> APSSound:
    if isinstance(value, str):
        return SimpleSound(value)
    if isinstance(value, dict):
        critical = value.get("critical", True)
        if not isinstance(critical, bool):
            raise SerializationError(
                f"sound.critical must be a boolean, got {critical!r}",
                payload_type="sound",
            )
        try:
            return CriticalSound(
                name=value["name"],
                volume=float(value.get("volume", 1.0)),
                critical=critical,
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise SerializationError(f"Malformed sound object: {exc}", payload_type="sound", cause=exc) from exc
    raise SerializationError(
        f"sound must be a string or an object, got {type(value).__name__}",
        payload_type="sound",
    )


__all__ = [
    "APSSound",
    "CriticalSound",
    "SimpleSound",
    "sound_from_wire",
    "sound_to_wire",
]
