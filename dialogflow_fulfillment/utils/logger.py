import json
import logging
import sys
from typing import Dict, Any, Optional
import uuid

from dialogflow_fulfillment.config import get_settings

# Attributes every LogRecord carries; anything else arrived through ``extra``
_RESERVED_ATTRS = set(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}


class CustomJsonFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record as a JSON string.

        Args:
            record: The log record to format

        Returns:
            str: JSON formatted log string
        """
        settings = get_settings()
        log_object = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "service": settings.SERVICE_NAME,
            "environment": settings.ENVIRONMENT,
        }

        # Add extra attributes (correlation_id among them)
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_object[key] = value

        # Add exception info if available
        if record.exc_info:
            log_object["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_object, default=str)


def configure_logging() -> None:
    """Configure package-wide logging from settings."""
    settings = get_settings()
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if settings.LOG_FORMAT == "json":
        handler.setFormatter(CustomJsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )

    logger = logging.getLogger("dialogflow_fulfillment")
    logger.handlers = [handler]
    logger.setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Name for the logger

    Returns:
        logging.Logger: Configured logger instance
    """
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """
    Adapter for adding correlation ID and other context to logs.
    """

    def __init__(self, logger: logging.Logger, correlation_id: Optional[str] = None, extra: Optional[Dict[str, Any]] = None):
        """
        Initialize the logger adapter.

        Args:
            logger: Base logger to adapt
            correlation_id: Correlation ID, usually the webhook session id
            extra: Extra fields to include in all logs
        """
        self.correlation_id = correlation_id or str(uuid.uuid4())
        extra_dict = dict(extra or {})
        extra_dict["correlation_id"] = self.correlation_id
        super().__init__(logger, extra_dict)

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        """Process the log message to add context data."""
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_request_logger(name: str, correlation_id: Optional[str] = None, source: Optional[str] = None) -> LoggerAdapter:
    """
    Get a logger configured with webhook request context.

    Args:
        name: Logger name
        correlation_id: Correlation ID for tracing
        source: Request source (platform) of the webhook call

    Returns:
        LoggerAdapter: Configured logger adapter
    """
    logger = get_logger(name)
    extra = {}
    if source:
        extra["source"] = source

    return LoggerAdapter(logger, correlation_id, extra)
