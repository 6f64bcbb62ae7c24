"""Observability – structlog configuration, redaction and get_logger."""
from apns_payload.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from apns_payload.observability.logging.factory import JsonLoggerFactory
from apns_payload.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
