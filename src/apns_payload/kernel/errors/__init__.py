"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   └── BuilderConsumedError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError
"""

from apns_payload.kernel.errors.application import ApplicationError
from apns_payload.kernel.errors.base import BaseError
from apns_payload.kernel.errors.domain import (
    BuilderConsumedError,
    DomainError,
    ValidationError,
)
from apns_payload.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "BuilderConsumedError",
    "DomainError",
    "InfrastructureError",
    "SerializationError",
    "ValidationError",
]
