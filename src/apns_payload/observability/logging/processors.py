"""Observability – get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from apns_payload.observability.logging.filters import SensitiveFieldsFilter


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger backed by the stdlib ``logging`` tree.

    Until the application calls ``structlog.configure`` (for example via
    :class:`JsonLoggerFactory`), events are redacted and handed to the stdlib
    logger *name* as plain records, so nothing is emitted unless a handler
    and level are set up for it.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    if structlog.is_configured():
        logger = structlog.get_logger(name)
    else:
        logger = structlog.wrap_logger(
            logging.getLogger(name),
            processors=[SensitiveFieldsFilter(), structlog.stdlib.render_to_log_kwargs],
            wrapper_class=structlog.stdlib.BoundLogger,
        )
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_logger"]
