"""Kernel – errors and value types shared by every payload module."""

from apns_payload.kernel.errors import (
    ApplicationError,
    BaseError,
    BuilderConsumedError,
    DomainError,
    InfrastructureError,
    SerializationError,
    ValidationError,
)
from apns_payload.kernel.types import Err, Nothing, Ok, Option, Result, Some

__all__ = [
    "ApplicationError",
    "BaseError",
    "BuilderConsumedError",
    "DomainError",
    "Err",
    "InfrastructureError",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "SerializationError",
    "Some",
    "ValidationError",
]
