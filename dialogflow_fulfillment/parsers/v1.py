"""
V1 Request Parser Module.

Parses webhook requests in the legacy v1 format, where everything the agent
resolved sits under the top-level ``result`` object.
"""

from typing import Any, Dict, List, Mapping, Optional

from dialogflow_fulfillment.domain.models.context import Context
from dialogflow_fulfillment.domain.models.platform import AgentVersion
from dialogflow_fulfillment.parsers.base import BaseRequestParser
from dialogflow_fulfillment.utils.exceptions import MalformedRequestError


class V1RequestParser(BaseRequestParser):
    """Parser for v1 webhook requests."""

    version = AgentVersion.V1

    def validate(self, raw: Mapping[str, Any]) -> bool:
        result = self._get_mapping(raw, "result", "result", required=True)
        self._get_mapping(result, "metadata", "result.metadata")
        self._get_mapping(result, "parameters", "result.parameters")
        self._get_mapping(raw, "originalRequest", "originalRequest")

        session_id = raw.get("sessionId")
        if session_id is not None and not isinstance(session_id, str):
            raise MalformedRequestError("Expected 'sessionId' to be a string", field="sessionId")
        return True

    def _result(self, raw: Mapping[str, Any]) -> Mapping[str, Any]:
        return raw["result"]

    def _extract_intent(self, raw: Mapping[str, Any]) -> Optional[str]:
        metadata = self._result(raw).get("metadata") or {}
        return metadata.get("intentName")

    def _extract_action(self, raw: Mapping[str, Any]) -> Optional[str]:
        return self._result(raw).get("action")

    def _extract_session_path(self, raw: Mapping[str, Any]) -> Optional[str]:
        return raw.get("sessionId")

    def _extract_parameters(self, raw: Mapping[str, Any]) -> Dict[str, Any]:
        return self._result(raw).get("parameters") or {}

    def _extract_contexts(self, raw: Mapping[str, Any]) -> List[Context]:
        contexts = []
        for index, entry in enumerate(self._get_list(self._result(raw), "contexts", "result.contexts")):
            path = f"result.contexts[{index}]"
            name = self._context_name(entry, path)
            contexts.append(self._build_context(entry, path, name, "lifespan"))
        return contexts

    def _extract_source(self, raw: Mapping[str, Any]) -> Optional[str]:
        original = raw.get("originalRequest") or {}
        return original.get("source")

    def _extract_original_request(self, raw: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        original = raw.get("originalRequest") or {}
        data = original.get("data")
        return dict(data) if isinstance(data, Mapping) else data

    def _extract_query(self, raw: Mapping[str, Any]) -> Optional[str]:
        return self._result(raw).get("resolvedQuery")

    def _extract_locale(self, raw: Mapping[str, Any]) -> Optional[str]:
        return raw.get("lang")
