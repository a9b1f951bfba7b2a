from typing import Any, Dict, Optional
from fastapi import status


class AppException(Exception):
    """Base exception class for the fulfillment package."""

    error_code = "INTERNAL_SERVER_ERROR"

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code a web layer should answer with
            details: Additional error details
        """
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Dictionary form used by error responses."""
        data = {"code": self.error_code, "message": self.message}
        if self.details:
            data["details"] = self.details
        return data


class ValidationException(AppException):
    """Exception for data validation errors."""

    error_code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Validation error",
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize validation exception.

        Args:
            message: Error message
            details: Validation error details
        """
        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details
        )


class WebhookRequestError(AppException):
    """Base class for errors raised while reading an inbound webhook request."""

    error_code = "WEBHOOK_REQUEST_ERROR"


class UnknownVersionError(WebhookRequestError):
    """
    Raised when the payload carries neither the v1 nor the v2 markers.

    Nothing can be done with such a request locally; the caller should answer
    with a server error.
    """

    error_code = "UNKNOWN_AGENT_VERSION"

    def __init__(
        self,
        message: str = "Unable to detect agent API version from request",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details
        )


class MalformedRequestError(WebhookRequestError):
    """Raised when a structure required by the detected version is missing or ill-typed."""

    error_code = "MALFORMED_REQUEST"

    def __init__(
        self,
        message: str = "Malformed webhook request",
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        error_details = dict(details or {})
        if field:
            error_details["field"] = field
        self.field = field

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=error_details
        )


class InvalidReplyError(ValidationException):
    """Raised when ``reply()`` receives something that is neither text nor a rich message."""

    error_code = "INVALID_REPLY"

    def __init__(self, value: Any):
        super().__init__(
            message=f"Reply must be a string or a RichMessage, got {type(value).__name__}",
            details={"type": type(value).__name__}
        )
