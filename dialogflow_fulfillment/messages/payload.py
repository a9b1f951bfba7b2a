"""Custom payload rich message."""

import copy
from typing import Any, Dict, Optional

from dialogflow_fulfillment.domain.models.platform import AgentVersion, Platform
from dialogflow_fulfillment.messages.base import RichMessage


class Payload(RichMessage):
    """
    Platform-specific payload passed through untouched.

    The mapping is deep-copied into every fragment so callers mutating a
    rendered response cannot change what later renders produce.
    """

    RENDERERS = {
        (AgentVersion.V1, None): "_render_v1",
        (AgentVersion.V2, None): "_render_v2",
    }

    def __init__(self, payload: Optional[Dict[str, Any]] = None):
        self._payload = copy.deepcopy(payload) if payload else {}

    def payload(self, value: Dict[str, Any]) -> "Payload":
        self._payload = copy.deepcopy(value)
        return self

    def get_payload(self) -> Dict[str, Any]:
        return copy.deepcopy(self._payload)

    def _render_v1(self, platform: Optional[Platform]) -> Dict[str, Any]:
        return self._tag_v1(4, platform, {"payload": copy.deepcopy(self._payload)})

    def _render_v2(self, platform: Optional[Platform]) -> Dict[str, Any]:
        return self._tag_v2({"payload": copy.deepcopy(self._payload)}, platform)
