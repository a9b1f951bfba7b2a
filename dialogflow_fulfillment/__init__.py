"""
Dialogflow fulfillment webhook package.

Parses v1 and v2 webhook requests into one uniform model and renders replies
in the response shape the calling agent version and platform expect.
"""

from dialogflow_fulfillment.config import Settings, get_settings
from dialogflow_fulfillment.client import WebhookClient
from dialogflow_fulfillment.domain import AgentVersion, Context, ParsedRequest, Platform
from dialogflow_fulfillment.formatters import ResponseRenderer
from dialogflow_fulfillment.messages import Card, Image, Payload, RichMessage, Suggestion, Text
from dialogflow_fulfillment.parsers import detect_version, parse_request
from dialogflow_fulfillment.utils.exceptions import (
    AppException,
    InvalidReplyError,
    MalformedRequestError,
    UnknownVersionError,
    WebhookRequestError,
)
from dialogflow_fulfillment.utils.logger import configure_logging

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    "configure_logging",

    # Client
    "WebhookClient",

    # Domain
    "AgentVersion",
    "Context",
    "ParsedRequest",
    "Platform",

    # Parsing and rendering
    "detect_version",
    "parse_request",
    "ResponseRenderer",

    # Rich messages
    "RichMessage",
    "Text",
    "Image",
    "Card",
    "Suggestion",
    "Payload",

    # Errors
    "AppException",
    "WebhookRequestError",
    "UnknownVersionError",
    "MalformedRequestError",
    "InvalidReplyError",
]
