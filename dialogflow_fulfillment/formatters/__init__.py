"""
Response Formatters Package.

This package contains the renderer that turns queued rich messages into the
response payload expected by the agent version and platform of the request.
"""

from dialogflow_fulfillment.formatters.response import ResponseRenderer

__all__ = [
    "ResponseRenderer",
]
