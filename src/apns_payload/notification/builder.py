"""Notification builders – the shared ``build`` capability and reuse guard."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from apns_payload.kernel.errors import BuilderConsumedError
from apns_payload.observability.logging import get_logger
from apns_payload.payload import NotificationOptions, Payload


@runtime_checkable
class NotificationBuilder(Protocol):
    """Port: turn accumulated content into a ``Payload``.

    Required content is fixed by each builder's constructor, so ``build``
    cannot fail for missing fields. A builder is consumed by ``build``.
    """

    def build(self, device_token: Any, options: NotificationOptions | None = None) -> Payload: ...


class SingleUseBuilder:
    """Mixin holding the accumulating → built state of a builder."""

    kind: str = "notification"

    def __init__(self) -> None:
        self._built = False

    def _ensure_open(self) -> None:
        if self._built:
            raise BuilderConsumedError(type(self).__name__)

    def _finish(self, payload: Payload) -> Payload:
        self._built = True
        get_logger(__name__).debug(
            "notification.built",
            builder=self.kind,
            aps_keys=payload.aps.present_keys(),
            custom_keys=list(payload.data),
        )
        return payload

    @property
    def is_built(self) -> bool:
        return self._built


__all__ = ["NotificationBuilder", "SingleUseBuilder"]
