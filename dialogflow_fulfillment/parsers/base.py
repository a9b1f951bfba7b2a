"""
Base Request Parser Module.

This module defines the abstract base class for the webhook request parsers.
Parsers convert a decoded, version-specific webhook payload into the uniform
``ParsedRequest`` model used throughout the package.
"""

import abc
from typing import Any, Dict, List, Mapping, Optional

from dialogflow_fulfillment.domain.models.context import Context
from dialogflow_fulfillment.domain.models.platform import AgentVersion, DEFAULT_SOURCE
from dialogflow_fulfillment.domain.schemas.request import ParsedRequest
from dialogflow_fulfillment.utils.logger import get_logger
from dialogflow_fulfillment.utils.exceptions import MalformedRequestError

logger = get_logger(__name__)


class BaseRequestParser(abc.ABC):
    """
    Abstract base class for webhook request parsers.

    Each agent API version has its own parser. ``parse`` walks the payload
    through the ``_extract_*`` hooks the concrete parser implements; any
    structural surprise along the way becomes a ``MalformedRequestError``.
    """

    version: AgentVersion

    def parse(self, raw: Mapping[str, Any]) -> ParsedRequest:
        """
        Convert a raw webhook payload into a ParsedRequest.

        Args:
            raw: Decoded JSON payload of the webhook call

        Returns:
            ParsedRequest: Uniform view of the request

        Raises:
            MalformedRequestError: If a structure the version requires is missing or ill-typed
        """
        self._log_parse_attempt()
        self.validate(raw)

        try:
            session_path = self._extract_session_path(raw)
            return ParsedRequest(
                version=self.version,
                intent=self._extract_intent(raw),
                action=self._extract_action(raw),
                session=self._last_segment(session_path),
                session_path=session_path,
                parameters=self._normalize_parameters(self._extract_parameters(raw)),
                contexts=self._extract_contexts(raw),
                source=self._extract_source(raw) or DEFAULT_SOURCE,
                original_request=self._extract_original_request(raw),
                query=self._extract_query(raw),
                locale=self._extract_locale(raw),
            )
        except MalformedRequestError:
            raise
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            error_msg = f"Failed to parse v{int(self.version)} webhook request: {str(e)}"
            logger.warning(error_msg)
            raise MalformedRequestError(error_msg) from e

    @abc.abstractmethod
    def validate(self, raw: Mapping[str, Any]) -> bool:
        """
        Check the sub-structures the version cannot do without.

        Raises:
            MalformedRequestError: If a required structure is missing or ill-typed
        """

    @abc.abstractmethod
    def _extract_intent(self, raw: Mapping[str, Any]) -> Optional[str]:
        pass

    @abc.abstractmethod
    def _extract_action(self, raw: Mapping[str, Any]) -> Optional[str]:
        pass

    @abc.abstractmethod
    def _extract_session_path(self, raw: Mapping[str, Any]) -> Optional[str]:
        pass

    @abc.abstractmethod
    def _extract_parameters(self, raw: Mapping[str, Any]) -> Dict[str, Any]:
        pass

    @abc.abstractmethod
    def _extract_contexts(self, raw: Mapping[str, Any]) -> List[Context]:
        pass

    @abc.abstractmethod
    def _extract_source(self, raw: Mapping[str, Any]) -> Optional[str]:
        pass

    @abc.abstractmethod
    def _extract_original_request(self, raw: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        pass

    @abc.abstractmethod
    def _extract_query(self, raw: Mapping[str, Any]) -> Optional[str]:
        pass

    @abc.abstractmethod
    def _extract_locale(self, raw: Mapping[str, Any]) -> Optional[str]:
        pass

    @staticmethod
    def _get_mapping(
        container: Mapping[str, Any],
        key: str,
        path: str,
        required: bool = False
    ) -> Optional[Mapping[str, Any]]:
        """
        Fetch a nested object from the payload.

        Args:
            container: The mapping to read from
            key: Key of the nested object
            path: Dotted path of the object, for error reporting
            required: Whether a missing object is an error

        Returns:
            The nested mapping, or None when it is absent (or null) and optional

        Raises:
            MalformedRequestError: If the object is required and missing, or is not a mapping
        """
        value = container.get(key)
        if value is None:
            if required:
                raise MalformedRequestError(f"Missing required object '{path}'", field=path)
            return None
        if not isinstance(value, Mapping):
            raise MalformedRequestError(
                f"Expected '{path}' to be an object, got {type(value).__name__}", field=path
            )
        return value

    @staticmethod
    def _get_list(container: Mapping[str, Any], key: str, path: str) -> List[Any]:
        """Fetch an optional list from the payload; absent or null means empty."""
        value = container.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise MalformedRequestError(
                f"Expected '{path}' to be a list, got {type(value).__name__}", field=path
            )
        return value

    @staticmethod
    def _normalize_parameters(parameters: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Copy a parameter mapping, mapping empty strings to None.

        Every key is kept; an unset parameter surfaces as None instead of
        being dropped.
        """
        if not parameters:
            return {}
        return {
            key: (None if value == "" else value)
            for key, value in parameters.items()
        }

    @staticmethod
    def _last_segment(path: Optional[str]) -> Optional[str]:
        """Return the last ``/``-separated segment of a resource path."""
        if path is None:
            return None
        return path.rstrip("/").rsplit("/", 1)[-1]

    @staticmethod
    def _context_name(entry: Any, path: str) -> str:
        """Return the raw name of a context entry, which must be a non-empty string."""
        if not isinstance(entry, Mapping):
            raise MalformedRequestError(
                f"Expected '{path}' to be an object, got {type(entry).__name__}", field=path
            )
        name = entry.get("name")
        if not isinstance(name, str) or not name:
            raise MalformedRequestError(
                f"Context entry '{path}' has no name", field=path
            )
        return name

    def _build_context(self, entry: Any, path: str, name: str, lifespan_key: str) -> Context:
        """
        Build a Context from one raw context entry.

        Args:
            entry: Raw context object
            path: Path of the entry, for error reporting
            name: Already resolved short context name
            lifespan_key: Key carrying the lifespan in this version

        Returns:
            Context: The parsed context
        """
        lifespan = entry.get(lifespan_key)
        if lifespan is None:
            lifespan = 0
        if not isinstance(lifespan, int) or isinstance(lifespan, bool) or lifespan < 0:
            field = f"{path}.{lifespan_key}"
            raise MalformedRequestError(
                f"Expected '{field}' to be a non-negative integer, got {lifespan!r}",
                field=field,
            )

        parameters = self._get_mapping(entry, "parameters", f"{path}.parameters")
        return Context(
            name=name,
            lifespan=lifespan,
            parameters=self._normalize_parameters(parameters),
        )

    def _log_parse_attempt(self) -> None:
        logger.debug(f"Parsing webhook request using {self.__class__.__name__}")
