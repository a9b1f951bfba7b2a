"""
Webhook Request Parsers Package.

This package contains the parsers that turn version-specific webhook payloads
into the uniform ParsedRequest model, plus the version detection that picks
between them.
"""

from typing import Any, Mapping

from dialogflow_fulfillment.domain.models.platform import AgentVersion
from dialogflow_fulfillment.domain.schemas.request import ParsedRequest
from dialogflow_fulfillment.parsers.base import BaseRequestParser
from dialogflow_fulfillment.parsers.v1 import V1RequestParser
from dialogflow_fulfillment.parsers.v2 import V2RequestParser
from dialogflow_fulfillment.utils.exceptions import MalformedRequestError, UnknownVersionError
from dialogflow_fulfillment.utils.logger import get_logger

logger = get_logger(__name__)

# Dictionary mapping agent versions to their parser classes
PARSER_MAP = {
    AgentVersion.V1: V1RequestParser,
    AgentVersion.V2: V2RequestParser,
}


def detect_version(raw: Mapping[str, Any]) -> AgentVersion:
    """
    Detect the agent API version from the shape of a payload.

    The v2 markers (``queryResult`` together with ``session``) are checked
    first, then the v1 marker (``result``). A payload matching neither is
    rejected rather than guessed at.

    Raises:
        MalformedRequestError: If the payload is not a mapping
        UnknownVersionError: If neither marker set is present
    """
    if not isinstance(raw, Mapping):
        raise MalformedRequestError(
            f"Expected webhook request to be an object, got {type(raw).__name__}"
        )

    if "queryResult" in raw and "session" in raw:
        return AgentVersion.V2
    if "result" in raw:
        return AgentVersion.V1

    keys = sorted(str(key) for key in raw.keys())
    logger.warning("Unable to detect agent version", extra={"keys": keys})
    raise UnknownVersionError(details={"keys": keys})


def get_parser_for_version(version: AgentVersion) -> BaseRequestParser:
    """Instantiate the parser registered for an agent version."""
    return PARSER_MAP[version]()


def parse_request(raw: Mapping[str, Any]) -> ParsedRequest:
    """
    Parse a decoded webhook payload of either version.

    Args:
        raw: Decoded JSON payload

    Returns:
        ParsedRequest: Uniform view of the request

    Raises:
        UnknownVersionError: If the version cannot be detected
        MalformedRequestError: If the payload does not match its version's structure
    """
    version = detect_version(raw)
    return get_parser_for_version(version).parse(raw)


__all__ = [
    "BaseRequestParser",
    "V1RequestParser",
    "V2RequestParser",
    "PARSER_MAP",
    "detect_version",
    "get_parser_for_version",
    "parse_request",
]
