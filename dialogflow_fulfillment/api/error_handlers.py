from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from typing import Dict, Any, Optional

from dialogflow_fulfillment.utils.exceptions import AppException
from dialogflow_fulfillment.utils.logger import get_logger

logger = get_logger(__name__)


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Configure exception handlers for package errors on a FastAPI application.
    """
    @app.exception_handler(AppException)
    async def handle_app_exception(request: Request, exc: AppException) -> JSONResponse:
        """
        Handles AppException instances, webhook request errors included.
        """
        return create_error_response(
            request=request,
            status_code=exc.status_code,
            error_code=exc.error_code,
            message=exc.message,
            details=exc.details
        )


def create_error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None
) -> JSONResponse:
    """
    Creates a standardized error response.
    """
    correlation_id = getattr(request.state, "correlation_id", "unknown")

    logger.error(
        f"API error: {error_code} - {message}",
        extra={
            "correlation_id": correlation_id,
            "status_code": status_code,
            "error_code": error_code,
            "details": details
        }
    )

    response_data = {
        "error": {
            "code": error_code,
            "message": message,
            "correlation_id": correlation_id
        }
    }

    if details:
        response_data["error"]["details"] = details

    return JSONResponse(
        status_code=status_code,
        content=response_data
    )
