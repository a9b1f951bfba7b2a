"""
Text rich message.

Carries a display text and, optionally, SSML for voice surfaces. Only v2
Actions on Google responses can transport SSML; everywhere else the plain
text is used.
"""

from typing import Any, Dict, Optional

from dialogflow_fulfillment.domain.models.platform import AgentVersion, Platform
from dialogflow_fulfillment.messages.base import RichMessage


class Text(RichMessage):
    """Text reply with optional SSML."""

    RENDERERS = {
        (AgentVersion.V1, Platform.GOOGLE): "_render_v1_google",
        (AgentVersion.V1, None): "_render_v1",
        (AgentVersion.V2, Platform.GOOGLE): "_render_v2_google",
        (AgentVersion.V2, None): "_render_v2",
    }

    def __init__(self, text: Optional[str] = None, ssml: Optional[str] = None):
        self._text = text
        self._ssml = ssml

    def text(self, value: Optional[str]) -> "Text":
        self._text = value
        return self

    def ssml(self, value: Optional[str]) -> "Text":
        self._ssml = value
        return self

    def get_text(self) -> Optional[str]:
        return self._text

    def get_ssml(self) -> Optional[str]:
        return self._ssml

    @property
    def speech(self) -> Optional[str]:
        return self._text

    def _render_v1_google(self, platform: Optional[Platform]) -> Dict[str, Any]:
        # v1 has no SSML transport
        return {
            "type": "simple_response",
            "platform": Platform.GOOGLE.v1_name,
            "textToSpeech": self._text,
            "displayText": self._text,
        }

    def _render_v1(self, platform: Optional[Platform]) -> Dict[str, Any]:
        return self._tag_v1(0, platform, {"speech": self._text})

    def _render_v2_google(self, platform: Optional[Platform]) -> Dict[str, Any]:
        if self._ssml is not None:
            simple_response = {"ssml": self._ssml, "displayText": self._text}
        else:
            simple_response = {"textToSpeech": self._text, "displayText": self._text}

        return {
            "platform": Platform.GOOGLE.v2_name,
            "simpleResponses": {
                "simpleResponses": [simple_response],
            },
        }

    def _render_v2(self, platform: Optional[Platform]) -> Dict[str, Any]:
        return self._tag_v2({"text": {"text": [self._text]}}, platform)
