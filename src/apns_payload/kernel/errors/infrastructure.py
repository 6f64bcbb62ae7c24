"""Infrastructure errors — failures at the serialization boundary."""

from __future__ import annotations

from typing import Any

from apns_payload.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O or encoding failure that is not a payload rule violation."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = [
    "InfrastructureError",
    "SerializationError",
]
