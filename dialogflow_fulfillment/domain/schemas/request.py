"""
Parsed request schema.

``ParsedRequest`` is the uniform query model both request parsers produce,
whatever the wire version of the inbound webhook call.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from dialogflow_fulfillment.domain.models.context import Context
from dialogflow_fulfillment.domain.models.platform import AgentVersion, DEFAULT_SOURCE


class ParsedRequest(BaseModel):
    """Immutable, version-independent view of an inbound webhook request."""

    version: AgentVersion = Field(..., description="Detected agent API version")
    intent: Optional[str] = Field(None, description="Display name of the matched intent")
    action: Optional[str] = Field(None, description="Action attached to the matched intent")
    session: Optional[str] = Field(None, description="Short session identifier")
    session_path: Optional[str] = Field(
        None, description="Full session path (v2); equal to session for v1"
    )
    parameters: Dict[str, Any] = Field(default_factory=dict, description="Intent parameters")
    contexts: List[Context] = Field(default_factory=list, description="Inbound contexts")
    source: str = Field(DEFAULT_SOURCE, description="Platform the request came from")
    original_request: Optional[Dict[str, Any]] = Field(
        None, description="Platform-specific payload of the original request"
    )
    query: Optional[str] = Field(None, description="User query text")
    locale: Optional[str] = Field(None, description="Language code of the request")

    class Config:
        frozen = True
        arbitrary_types_allowed = True
