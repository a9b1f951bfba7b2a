"""
Domain layer of the fulfillment package.

This package contains the models and schemas shared by the request parsers,
the rich messages and the response renderer.
"""

from dialogflow_fulfillment.domain.models.context import Context
from dialogflow_fulfillment.domain.models.platform import AgentVersion, Platform, DEFAULT_SOURCE
from dialogflow_fulfillment.domain.schemas.request import ParsedRequest

__all__ = [
    # Domain Models
    "Context",
    "AgentVersion",
    "Platform",
    "DEFAULT_SOURCE",

    # Domain Schemas
    "ParsedRequest",
]
