"""
Shared utilities: structured logging and the exception hierarchy.
"""

from dialogflow_fulfillment.utils.logger import (
    configure_logging,
    get_logger,
    get_request_logger,
    LoggerAdapter,
)
from dialogflow_fulfillment.utils.exceptions import (
    AppException,
    ValidationException,
    WebhookRequestError,
    UnknownVersionError,
    MalformedRequestError,
    InvalidReplyError,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "get_request_logger",
    "LoggerAdapter",

    # Exceptions
    "AppException",
    "ValidationException",
    "WebhookRequestError",
    "UnknownVersionError",
    "MalformedRequestError",
    "InvalidReplyError",
]
