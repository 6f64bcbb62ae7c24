"""Domain errors — payload rule violations."""

from __future__ import annotations

from typing import Any

from apns_payload.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a payload construction rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """A value handed to a builder or option does not meet its rules.

    ``field`` names the offending attribute when there is one.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.field is not None:
            base["field"] = self.field
        return base


class BuilderConsumedError(DomainError):
    """A notification builder was used after ``build`` already consumed it."""

    default_code = "builder_consumed"

    def __init__(self, builder: str, **kwargs: Any) -> None:
        super().__init__(f"{builder} was already built and cannot be reused", **kwargs)
        self.builder = builder


__all__ = [
    "BuilderConsumedError",
    "DomainError",
    "ValidationError",
]
