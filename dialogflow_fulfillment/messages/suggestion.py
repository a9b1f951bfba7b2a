"""Suggestion (quick reply) rich message."""

from typing import Any, Dict, Iterable, List, Optional, Union

from dialogflow_fulfillment.domain.models.platform import AgentVersion, Platform
from dialogflow_fulfillment.messages.base import RichMessage


class Suggestion(RichMessage):
    """
    Suggested replies the user can tap.

    Rendered as suggestion chips on Google and as quick replies elsewhere.
    """

    RENDERERS = {
        (AgentVersion.V1, Platform.GOOGLE): "_render_v1_google",
        (AgentVersion.V1, None): "_render_v1",
        (AgentVersion.V2, Platform.GOOGLE): "_render_v2_google",
        (AgentVersion.V2, None): "_render_v2",
    }

    def __init__(self, replies: Optional[Iterable[str]] = None):
        self._replies: List[str] = list(replies or [])

    def reply(self, value: Union[str, Iterable[str]]) -> "Suggestion":
        """Append one reply, or several when given an iterable of strings."""
        if isinstance(value, str):
            self._replies.append(value)
        else:
            self._replies.extend(value)
        return self

    def get_replies(self) -> List[str]:
        return list(self._replies)

    def _render_v1_google(self, platform: Optional[Platform]) -> Dict[str, Any]:
        return {
            "type": "suggestion_chips",
            "platform": Platform.GOOGLE.v1_name,
            "suggestions": [{"title": reply} for reply in self._replies],
        }

    def _render_v1(self, platform: Optional[Platform]) -> Dict[str, Any]:
        return self._tag_v1(2, platform, {"replies": list(self._replies)})

    def _render_v2_google(self, platform: Optional[Platform]) -> Dict[str, Any]:
        return {
            "platform": Platform.GOOGLE.v2_name,
            "suggestions": {
                "suggestions": [{"title": reply} for reply in self._replies],
            },
        }

    def _render_v2(self, platform: Optional[Platform]) -> Dict[str, Any]:
        return self._tag_v2(
            {"quickReplies": {"quickReplies": list(self._replies)}},
            platform
        )
