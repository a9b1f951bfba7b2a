"""
Context model representing a conversational memory slot.

A context is created once while parsing the inbound request and is read-only
afterwards. Outgoing contexts queued on the webhook client use the same model.
"""

import copy
from typing import Any, Dict, Optional

from dialogflow_fulfillment.domain.models.platform import AgentVersion


class Context:
    """
    A named context with a lifespan and a parameter mapping.

    Parameters may hold both the resolved value (``key``) and the raw text the
    agent captured (``key.original``). The two keys are independent entries.
    """

    def __init__(
        self,
        name: str,
        lifespan: int = 0,
        parameters: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize a new Context instance.

        Args:
            name: Short context name (no session path)
            lifespan: Number of conversational turns before the context expires
            parameters: Context parameters
        """
        if lifespan is None:
            lifespan = 0
        if not isinstance(lifespan, int) or isinstance(lifespan, bool):
            raise ValueError(f"Context lifespan must be an integer, got {lifespan!r}")
        if lifespan < 0:
            raise ValueError(f"Context lifespan must be >= 0, got {lifespan}")

        self._name = name
        self._lifespan = lifespan
        self._parameters = copy.deepcopy(dict(parameters or {}))

    @property
    def name(self) -> str:
        return self._name

    @property
    def lifespan(self) -> int:
        return self._lifespan

    @property
    def parameters(self) -> Dict[str, Any]:
        return copy.deepcopy(self._parameters)

    def get_name(self) -> str:
        return self._name

    def get_lifespan(self) -> int:
        return self._lifespan

    def get_parameters(self) -> Dict[str, Any]:
        return self.parameters

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """Return a single parameter value, or ``default`` when the key is absent."""
        return copy.deepcopy(self._parameters.get(key, default))

    def to_dict(self, version: int = AgentVersion.V1, session_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Serialize the context for an outgoing webhook response.

        Args:
            version: Agent version of the response
            session_path: Full session path, used to qualify v2 context names

        Returns:
            Dictionary in the wire shape of the given version
        """
        if version == AgentVersion.V2:
            name = f"{session_path}/contexts/{self._name}" if session_path else self._name
            return {
                "name": name,
                "lifespanCount": self._lifespan,
                "parameters": dict(self._parameters),
            }

        return {
            "name": self._name,
            "lifespan": self._lifespan,
            "parameters": dict(self._parameters),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Context):
            return NotImplemented
        return (
            self._name == other._name
            and self._lifespan == other._lifespan
            and self._parameters == other._parameters
        )

    def __repr__(self) -> str:
        """String representation of the context for debugging."""
        return (f"Context(name={self._name}, "
                f"lifespan={self._lifespan}, "
                f"parameters={self._parameters})")
