"""
FastAPI integration for callers that serve the webhook over HTTP.
"""

from dialogflow_fulfillment.api.error_handlers import setup_exception_handlers, create_error_response

__all__ = [
    "setup_exception_handlers",
    "create_error_response",
]
