from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Union

from dialogflow_fulfillment.domain.models.context import Context
from dialogflow_fulfillment.domain.models.platform import AgentVersion, Platform
from dialogflow_fulfillment.messages.base import RichMessage
from dialogflow_fulfillment.utils.logger import get_logger


class ResponseRenderer:
    """
    Serializes queued rich messages into a webhook response payload.

    The renderer holds no per-request state: the same inputs always produce
    an equal, freshly built mapping.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the renderer with optional configuration.

        Args:
            config: Optional configuration dictionary for the renderer
        """
        self.logger = get_logger(__name__)
        self.config = config or {}

    def render(
        self,
        version: Union[AgentVersion, int],
        source: Optional[str],
        messages: Sequence[RichMessage],
        output_contexts: Iterable[Context] = (),
        followup_event: Optional[Mapping[str, Any]] = None,
        session_path: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Render a response for the given version and request source.

        Args:
            version: Agent version of the request being answered
            source: Request source; unknown sources get the generic shape
            messages: Queued rich messages, in reply order
            output_contexts: Contexts to set on the agent
            followup_event: Follow-up event as ``{"name", "parameters"}``
            session_path: Full session path, used to qualify v2 context names
            locale: Language code sent with a v2 follow-up event

        Returns:
            A dictionary containing the response payload
        """
        version = AgentVersion(version)
        platform = Platform.from_source(source)
        output_contexts = list(output_contexts)

        self.logger.debug(
            f"Rendering {len(messages)} message(s) for v{int(version)} "
            f"source={source or 'generic'}"
        )

        if version == AgentVersion.V1:
            return self._render_v1(platform, messages, output_contexts, followup_event)
        return self._render_v2(
            platform, messages, output_contexts, followup_event, session_path, locale
        )

    def _render_v1(
        self,
        platform: Optional[Platform],
        messages: Sequence[RichMessage],
        output_contexts: Sequence[Context],
        followup_event: Optional[Mapping[str, Any]],
    ) -> Dict[str, Any]:
        response: Dict[str, Any] = {
            "messages": [message.render_for(AgentVersion.V1, platform) for message in messages],
        }

        # Pre-rich-message consumers of the generic channel only read `speech`
        if platform is None:
            speech = self._legacy_speech(messages)
            if speech is not None:
                response["speech"] = speech

        if output_contexts:
            response["contextOut"] = [
                context.to_dict(AgentVersion.V1) for context in output_contexts
            ]

        if followup_event:
            response["followupEvent"] = {
                "name": followup_event["name"],
                "data": dict(followup_event.get("parameters") or {}),
            }

        return response

    def _render_v2(
        self,
        platform: Optional[Platform],
        messages: Sequence[RichMessage],
        output_contexts: Sequence[Context],
        followup_event: Optional[Mapping[str, Any]],
        session_path: Optional[str],
        locale: Optional[str],
    ) -> Dict[str, Any]:
        response: Dict[str, Any] = {
            "fulfillmentMessages": [
                message.render_for(AgentVersion.V2, platform) for message in messages
            ],
        }

        if output_contexts:
            response["outputContexts"] = [
                context.to_dict(AgentVersion.V2, session_path) for context in output_contexts
            ]

        if followup_event:
            event = {
                "name": followup_event["name"],
                "parameters": dict(followup_event.get("parameters") or {}),
            }
            if locale:
                event["languageCode"] = locale
            response["followupEventInput"] = event

        return response

    @staticmethod
    def _legacy_speech(messages: Sequence[RichMessage]) -> Optional[str]:
        """Speech of the first queued message; later messages never override it."""
        if not messages:
            return None
        return messages[0].speech
