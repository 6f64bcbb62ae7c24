"""
apns_payload – typed builders for APNs notification payloads.

Import path convention::

    from apns_payload.notification import DefaultNotificationBuilder, NotificationOptions
    from apns_payload.notification import WebNotificationBuilder, WebPushAlert
    from apns_payload.payload import Payload, PayloadLike
    from apns_payload.kernel.errors import SerializationError
"""

import logging

# library loggers stay silent until the application installs a handler
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = ["__version__"]
