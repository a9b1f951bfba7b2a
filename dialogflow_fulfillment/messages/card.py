"""
Card rich message.

A card has a title, a body text, an optional image and any number of link
buttons. Google surfaces render it as a basic card; other platforms use the
generic card shape where the body becomes the subtitle and each button posts
back its URL.
"""

from typing import Any, Dict, List, Optional, Tuple

from dialogflow_fulfillment.domain.models.platform import AgentVersion, Platform
from dialogflow_fulfillment.messages.base import RichMessage


class Card(RichMessage):
    """Card reply with optional image and link buttons."""

    RENDERERS = {
        (AgentVersion.V1, Platform.GOOGLE): "_render_v1_google",
        (AgentVersion.V1, None): "_render_v1",
        (AgentVersion.V2, Platform.GOOGLE): "_render_v2_google",
        (AgentVersion.V2, None): "_render_v2",
    }

    def __init__(
        self,
        title: Optional[str] = None,
        text: Optional[str] = None,
        image_url: Optional[str] = None,
        buttons: Optional[List[Tuple[str, str]]] = None,
    ):
        self._title = title
        self._text = text
        self._image_url = image_url
        self._image_accessibility_text = ""
        self._buttons: List[Tuple[str, str]] = list(buttons or [])

    def title(self, value: str) -> "Card":
        self._title = value
        return self

    def text(self, value: str) -> "Card":
        self._text = value
        return self

    def image(self, url: str, accessibility_text: str = "") -> "Card":
        self._image_url = url
        self._image_accessibility_text = accessibility_text
        return self

    def button(self, text: str, url: str) -> "Card":
        """Append a link button."""
        self._buttons.append((text, url))
        return self

    def get_title(self) -> Optional[str]:
        return self._title

    def get_text(self) -> Optional[str]:
        return self._text

    def get_buttons(self) -> List[Tuple[str, str]]:
        return list(self._buttons)

    def _render_v1_google(self, platform: Optional[Platform]) -> Dict[str, Any]:
        fragment = {
            "type": "basic_card",
            "platform": Platform.GOOGLE.v1_name,
            "title": self._title,
            "formattedText": self._text,
        }
        if self._image_url:
            fragment["image"] = {
                "url": self._image_url,
                "accessibilityText": self._image_accessibility_text,
            }
        if self._buttons:
            fragment["buttons"] = [
                {"title": text, "openUrlAction": {"url": url}}
                for text, url in self._buttons
            ]
        return fragment

    def _render_v1(self, platform: Optional[Platform]) -> Dict[str, Any]:
        body = self._generic_card("imageUrl")
        return self._tag_v1(1, platform, body)

    def _render_v2_google(self, platform: Optional[Platform]) -> Dict[str, Any]:
        basic_card = {
            "title": self._title,
            "formattedText": self._text,
        }
        if self._image_url:
            basic_card["image"] = {
                "imageUri": self._image_url,
                "accessibilityText": self._image_accessibility_text,
            }
        if self._buttons:
            basic_card["buttons"] = [
                {"title": text, "openUriAction": {"uri": url}}
                for text, url in self._buttons
            ]
        return {"platform": Platform.GOOGLE.v2_name, "basicCard": basic_card}

    def _render_v2(self, platform: Optional[Platform]) -> Dict[str, Any]:
        return self._tag_v2({"card": self._generic_card("imageUri")}, platform)

    def _generic_card(self, image_key: str) -> Dict[str, Any]:
        card = {"title": self._title, "subtitle": self._text}
        if self._image_url:
            card[image_key] = self._image_url
        if self._buttons:
            card["buttons"] = [
                {"text": text, "postback": url}
                for text, url in self._buttons
            ]
        return card
