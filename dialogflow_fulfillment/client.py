"""
Webhook client facade.

``WebhookClient`` wraps one inbound webhook request: it parses the payload on
construction, exposes the parsed fields, collects replies, outgoing contexts
and a follow-up event, and renders the response for the request's agent
version and platform.

Typical use inside a request handler::

    agent = WebhookClient(request_json)
    if agent.get_intent() == "prayer.time":
        agent.reply("Isha is at 19:05")
    return agent.render()
"""

import copy
from typing import Any, Dict, List, Mapping, Optional, Union

from dialogflow_fulfillment.domain.models.context import Context
from dialogflow_fulfillment.domain.models.platform import AgentVersion
from dialogflow_fulfillment.domain.schemas.request import ParsedRequest
from dialogflow_fulfillment.formatters.response import ResponseRenderer
from dialogflow_fulfillment.messages.base import RichMessage
from dialogflow_fulfillment.messages.text import Text
from dialogflow_fulfillment.parsers import parse_request
from dialogflow_fulfillment.utils.exceptions import InvalidReplyError
from dialogflow_fulfillment.utils.logger import get_request_logger

# Lifespan given to outgoing contexts when the caller does not choose one
DEFAULT_CONTEXT_LIFESPAN = 5


class WebhookClient:
    """
    Facade over one parsed webhook request and its pending response.

    Instances are not meant to be shared between requests.
    """

    def __init__(self, data: Mapping[str, Any], renderer: Optional[ResponseRenderer] = None):
        """
        Parse the request payload.

        Args:
            data: Decoded JSON payload of the webhook call
            renderer: Renderer used by ``render()``; a default one is created when omitted

        Raises:
            UnknownVersionError: If the agent version cannot be detected
            MalformedRequestError: If the payload does not match its version's structure
        """
        self._request: ParsedRequest = parse_request(data)
        self._renderer = renderer or ResponseRenderer()
        self._messages: List[RichMessage] = []
        self._outgoing_contexts: List[Context] = []
        self._followup_event: Optional[Dict[str, Any]] = None

        self.logger = get_request_logger(
            __name__,
            correlation_id=self._request.session,
            source=self._request.source,
        )
        self.logger.info(
            f"Webhook request parsed: v{int(self._request.version)} "
            f"intent={self._request.intent} action={self._request.action}"
        )

    def get_agent_version(self) -> AgentVersion:
        return self._request.version

    def get_intent(self) -> Optional[str]:
        return self._request.intent

    def get_action(self) -> Optional[str]:
        return self._request.action

    def get_session(self) -> Optional[str]:
        return self._request.session

    def get_parameters(self) -> Dict[str, Any]:
        return copy.deepcopy(self._request.parameters)

    def get_parameter(self, name: str, default: Any = None) -> Any:
        """Return one intent parameter, or ``default`` when it was not sent."""
        return copy.deepcopy(self._request.parameters.get(name, default))

    def get_contexts(self) -> List[Context]:
        return list(self._request.contexts)

    def get_context(self, name: str) -> Optional[Context]:
        """Return the inbound context with the given name, if the request carries one."""
        for context in self._request.contexts:
            if context.name == name:
                return context
        return None

    def get_request_source(self) -> str:
        return self._request.source

    def get_original_request(self) -> Optional[Dict[str, Any]]:
        return copy.deepcopy(self._request.original_request)

    def get_query(self) -> Optional[str]:
        return self._request.query

    def get_locale(self) -> Optional[str]:
        return self._request.locale

    def reply(self, message: Union[str, RichMessage]) -> "WebhookClient":
        """
        Queue a reply.

        Args:
            message: Plain text, or any rich message

        Returns:
            The client, for chaining

        Raises:
            InvalidReplyError: If the message is neither a string nor a RichMessage
        """
        if isinstance(message, str):
            message = Text(text=message)
        elif not isinstance(message, RichMessage):
            raise InvalidReplyError(message)

        self._messages.append(message)
        return self

    def set_outgoing_context(
        self,
        context: Union[Context, str],
        lifespan: int = DEFAULT_CONTEXT_LIFESPAN,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> "WebhookClient":
        """
        Set a context on the agent for the coming turns.

        Args:
            context: A Context, or the name of a context to build
            lifespan: Lifespan of a context built from a name
            parameters: Parameters of a context built from a name

        Returns:
            The client, for chaining
        """
        if not isinstance(context, Context):
            context = Context(name=context, lifespan=lifespan, parameters=parameters)

        for index, existing in enumerate(self._outgoing_contexts):
            if existing.name == context.name:
                self._outgoing_contexts[index] = context
                break
        else:
            self._outgoing_contexts.append(context)
        return self

    def clear_outgoing_context(self, name: str) -> "WebhookClient":
        """Drop a context previously queued with ``set_outgoing_context``."""
        self._outgoing_contexts = [
            context for context in self._outgoing_contexts if context.name != name
        ]
        return self

    def clear_context(self, name: str) -> "WebhookClient":
        """Expire a context on the agent by sending it back with lifespan 0."""
        return self.set_outgoing_context(name, lifespan=0)

    def get_outgoing_contexts(self) -> List[Context]:
        return list(self._outgoing_contexts)

    def set_followup_event(self, name: str, parameters: Optional[Dict[str, Any]] = None) -> "WebhookClient":
        """
        Trigger an event-based intent after this response.

        Args:
            name: Event name
            parameters: Event parameters

        Returns:
            The client, for chaining
        """
        self._followup_event = {"name": name, "parameters": dict(parameters or {})}
        return self

    def render(self) -> Dict[str, Any]:
        """
        Render the response payload.

        The reply queue is left untouched, so rendering twice yields equal
        payloads.

        Returns:
            A dictionary in the response shape of the request's version
        """
        response = self._renderer.render(
            self._request.version,
            self._request.source,
            self._messages,
            output_contexts=self._outgoing_contexts,
            followup_event=self._followup_event,
            session_path=self._request.session_path,
            locale=self._request.locale,
        )
        self.logger.debug(f"Rendered response with {len(self._messages)} message(s)")
        return response
