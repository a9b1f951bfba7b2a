"""Image rich message."""

from typing import Any, Dict, Optional

from dialogflow_fulfillment.domain.models.platform import AgentVersion, Platform
from dialogflow_fulfillment.messages.base import RichMessage


class Image(RichMessage):
    """
    Standalone image reply.

    Actions on Google has no bare image message, so Google fragments wrap the
    image in a basic card.
    """

    RENDERERS = {
        (AgentVersion.V1, Platform.GOOGLE): "_render_v1_google",
        (AgentVersion.V1, None): "_render_v1",
        (AgentVersion.V2, Platform.GOOGLE): "_render_v2_google",
        (AgentVersion.V2, None): "_render_v2",
    }

    def __init__(self, url: Optional[str] = None, accessibility_text: str = ""):
        self._url = url
        self._accessibility_text = accessibility_text

    def url(self, value: str) -> "Image":
        self._url = value
        return self

    def accessibility_text(self, value: str) -> "Image":
        self._accessibility_text = value
        return self

    def get_url(self) -> Optional[str]:
        return self._url

    def get_accessibility_text(self) -> str:
        return self._accessibility_text

    def _render_v1_google(self, platform: Optional[Platform]) -> Dict[str, Any]:
        return {
            "type": "basic_card",
            "platform": Platform.GOOGLE.v1_name,
            "image": {
                "url": self._url,
                "accessibilityText": self._accessibility_text,
            },
        }

    def _render_v1(self, platform: Optional[Platform]) -> Dict[str, Any]:
        return self._tag_v1(3, platform, {"imageUrl": self._url})

    def _render_v2_google(self, platform: Optional[Platform]) -> Dict[str, Any]:
        return {
            "platform": Platform.GOOGLE.v2_name,
            "basicCard": {
                "image": {
                    "imageUri": self._url,
                    "accessibilityText": self._accessibility_text,
                },
            },
        }

    def _render_v2(self, platform: Optional[Platform]) -> Dict[str, Any]:
        return self._tag_v2({"image": {"imageUri": self._url}}, platform)
