"""Payload – the shapes the ``aps.alert`` field may take.

``APSAlert`` is a closed union; ``alert_to_wire`` and ``alert_from_wire``
dispatch on the active variant.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Final

from apns_payload.kernel.errors import SerializationError, ValidationError

# attribute name -> wire key, in wire order
_DEFAULT_ALERT_KEYS: Final = (
    ("title", "title"),
    ("subtitle", "subtitle"),
    ("body", "body"),
    ("title_loc_key", "title-loc-key"),
    ("title_loc_args", "title-loc-args"),
    ("action_loc_key", "action-loc-key"),
    ("loc_key", "loc-key"),
    ("loc_args", "loc-args"),
    ("launch_image", "launch-image"),
)
_LIST_FIELDS: Final = frozenset({"title_loc_args", "loc_args"})
_WEB_PUSH_KEYS: Final = ("title", "body", "action")


@dataclasses.dataclass(frozen=True, slots=True)
class PlainAlert:
    """Alert sent as a bare string."""

    text: str


@dataclasses.dataclass(frozen=True, slots=True)
class DefaultAlert:
    """Structured alert; unset members are left out of the wire object."""

    title: str | None = None
    subtitle: str | None = None
    body: str | None = None
    title_loc_key: str | None = None
    title_loc_args: tuple[str, ...] | None = None
    action_loc_key: str | None = None
    loc_key: str | None = None
    loc_args: tuple[str, ...] | None = None
    launch_image: str | None = None

    def __post_init__(self) -> None:
        for name in _LIST_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, (str, bytes)):
                raise ValidationError(f"{name} must be a sequence of strings, not a string", field=name)
            object.__setattr__(self, name, tuple(str(v) for v in value))


@dataclasses.dataclass(frozen=True, slots=True)
class WebPushAlert:
    """Safari web push alert; all three members are required."""

    title: str
    body: str
    action: str


type APSAlert = PlainAlert | DefaultAlert | WebPushAlert


def alert_to_wire(alert: APSAlert) -> str | dict[str, Any]:
    """Render *alert* to its JSON-ready value."""
    match alert:
        case PlainAlert(text):
            return text
        case WebPushAlert(title, body, action):
            return {"title": title, "body": body, "action": action}
        case DefaultAlert():
            result: dict[str, Any] = {}
            for attr, key in _DEFAULT_ALERT_KEYS:
                value = getattr(alert, attr)
                if value is None:
                    continue
                result[key] = list(value) if attr in _LIST_FIELDS else value
            return result
    raise TypeError(f"Unsupported alert variant: {type(alert).__name__}")


def alert_from_wire(value: Any) -> APSAlert:
    """Recognise an alert variant from its wire shape.

    A string is a ``PlainAlert``; an object with exactly ``title``, ``body``
    and ``action`` is a ``WebPushAlert``; any other object is a
    ``DefaultAlert``.
    """
    if isinstance(value, str):
        return PlainAlert(value)
    if not isinstance(value, dict):
        raise SerializationError(
            f"alert must be a string or an object, got {type(value).__name__}",
            payload_type="alert",
        )
    if set(value) == set(_WEB_PUSH_KEYS):
        return WebPushAlert(title=value["title"], body=value["body"], action=value["action"])

    by_key = {key: attr for attr, key in _DEFAULT_ALERT_KEYS}
    unknown = sorted(set(value) - set(by_key))
    if unknown:
        raise SerializationError(
            f"Unknown alert keys: {', '.join(unknown)}",
            payload_type="alert",
        )
    try:
        return DefaultAlert(**{by_key[key]: item for key, item in value.items()})
    except (ValidationError, TypeError) as exc:
        raise SerializationError(f"Malformed alert object: {exc}", payload_type="alert", cause=exc) from exc


__all__ = [
    "APSAlert",
    "DefaultAlert",
    "PlainAlert",
    "WebPushAlert",
    "alert_from_wire",
    "alert_to_wire",
]
