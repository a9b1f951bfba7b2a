"""
V2 Request Parser Module.

Parses webhook requests in the v2 format. Contexts and the session arrive as
full resource paths (``projects/<p>/agent/sessions/<s>/contexts/<name>``);
only their last path segment is kept as the name.
"""

from typing import Any, Dict, List, Mapping, Optional

from dialogflow_fulfillment.domain.models.context import Context
from dialogflow_fulfillment.domain.models.platform import AgentVersion
from dialogflow_fulfillment.parsers.base import BaseRequestParser
from dialogflow_fulfillment.utils.exceptions import MalformedRequestError


class V2RequestParser(BaseRequestParser):
    """Parser for v2 webhook requests."""

    version = AgentVersion.V2

    def validate(self, raw: Mapping[str, Any]) -> bool:
        query_result = self._get_mapping(raw, "queryResult", "queryResult", required=True)
        self._get_mapping(query_result, "intent", "queryResult.intent")
        self._get_mapping(query_result, "parameters", "queryResult.parameters")
        self._get_mapping(query_result, "webhookPayload", "queryResult.webhookPayload")

        original = self._get_mapping(raw, "originalDetectIntentRequest", "originalDetectIntentRequest")
        if original is not None:
            self._get_mapping(original, "payload", "originalDetectIntentRequest.payload")

        if not isinstance(raw.get("session"), str):
            raise MalformedRequestError("Expected 'session' to be a string", field="session")
        return True

    def _query_result(self, raw: Mapping[str, Any]) -> Mapping[str, Any]:
        return raw["queryResult"]

    def _extract_intent(self, raw: Mapping[str, Any]) -> Optional[str]:
        intent = self._query_result(raw).get("intent") or {}
        return intent.get("displayName")

    def _extract_action(self, raw: Mapping[str, Any]) -> Optional[str]:
        return self._query_result(raw).get("action")

    def _extract_session_path(self, raw: Mapping[str, Any]) -> Optional[str]:
        return raw["session"]

    def _extract_parameters(self, raw: Mapping[str, Any]) -> Dict[str, Any]:
        return self._query_result(raw).get("parameters") or {}

    def _extract_contexts(self, raw: Mapping[str, Any]) -> List[Context]:
        contexts = []
        entries = self._get_list(self._query_result(raw), "outputContexts", "queryResult.outputContexts")
        for index, entry in enumerate(entries):
            path = f"queryResult.outputContexts[{index}]"
            name = self._last_segment(self._context_name(entry, path))
            contexts.append(self._build_context(entry, path, name, "lifespanCount"))
        return contexts

    def _extract_source(self, raw: Mapping[str, Any]) -> Optional[str]:
        original = raw.get("originalDetectIntentRequest") or {}
        if original.get("source"):
            return original["source"]

        payload = original.get("payload") or {}
        if payload.get("source"):
            return payload["source"]

        webhook_payload = self._query_result(raw).get("webhookPayload") or {}
        return webhook_payload.get("source")

    def _extract_original_request(self, raw: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        original = raw.get("originalDetectIntentRequest") or {}
        payload = original.get("payload")
        return dict(payload) if payload is not None else None

    def _extract_query(self, raw: Mapping[str, Any]) -> Optional[str]:
        return self._query_result(raw).get("queryText")

    def _extract_locale(self, raw: Mapping[str, Any]) -> Optional[str]:
        return self._query_result(raw).get("languageCode")
