"""
Base Rich Message Module.

A rich message is a channel-agnostic description of one reply unit. Each
concrete message declares a ``RENDERERS`` table mapping ``(version, platform)``
to the method that builds its fragment; ``(version, None)`` is the generic
shape every unsupported platform falls back to.
"""

import abc
from typing import Any, Dict, Optional, Tuple, Union

from dialogflow_fulfillment.domain.models.platform import AgentVersion, Platform
from dialogflow_fulfillment.utils.logger import get_logger

logger = get_logger(__name__)

RendererKey = Tuple[AgentVersion, Optional[Platform]]


class RichMessage(abc.ABC):
    """
    Abstract base class for all rich messages.

    Subclasses provide setters that return the message itself, so messages
    can be built in one chained expression::

        Text.create().text("Welcome").ssml("<speak>Welcome</speak>")
    """

    RENDERERS: Dict[RendererKey, str] = {}

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        for version in AgentVersion:
            method_name = cls.RENDERERS.get((version, None))
            if method_name is None:
                raise TypeError(
                    f"{cls.__name__} must declare a generic v{int(version)} renderer"
                )
            if not callable(getattr(cls, method_name, None)):
                raise TypeError(
                    f"{cls.__name__} declares renderer '{method_name}' but does not define it"
                )

    def __new__(cls, *args: Any, **kwargs: Any):
        if cls is RichMessage:
            raise TypeError("RichMessage cannot be instantiated directly; use a message type")
        return super().__new__(cls)

    @classmethod
    def create(cls, *args: Any, **kwargs: Any) -> "RichMessage":
        """Build a new message; equivalent to calling the class."""
        return cls(*args, **kwargs)

    @property
    def speech(self) -> Optional[str]:
        """Text echoed in the legacy top-level v1 ``speech`` field, if any."""
        return None

    def render_for(
        self,
        version: Union[AgentVersion, int],
        platform: Union[Platform, str, None] = None
    ) -> Dict[str, Any]:
        """
        Render the message for a version and platform.

        Args:
            version: Agent version of the response
            platform: Target platform; a source string is resolved through
                ``Platform.from_source``. None selects the generic shape.

        Returns:
            Dict[str, Any]: The response fragment
        """
        version = AgentVersion(version)
        if not isinstance(platform, Platform):
            platform = Platform.from_source(platform)

        method_name = self.RENDERERS.get((version, platform))
        if method_name is None:
            if platform is not None:
                logger.debug(
                    f"{self.__class__.__name__} has no {platform.value} renderer for "
                    f"v{int(version)}, using the generic shape"
                )
            method_name = self.RENDERERS.get((version, None))
        if method_name is None:
            raise NotImplementedError(
                f"{self.__class__.__name__} cannot be rendered for v{int(version)}"
            )

        return getattr(self, method_name)(platform)

    @staticmethod
    def _tag_v1(type_: Any, platform: Optional[Platform], body: Dict[str, Any]) -> Dict[str, Any]:
        """Build a v1 fragment: ``type``, then ``platform`` when known, then the body."""
        fragment: Dict[str, Any] = {"type": type_}
        if platform is not None:
            fragment["platform"] = platform.v1_name
        fragment.update(body)
        return fragment

    @staticmethod
    def _tag_v2(body: Dict[str, Any], platform: Optional[Platform]) -> Dict[str, Any]:
        """Build a v2 fragment: the body, then ``platform`` when known."""
        fragment = dict(body)
        if platform is not None:
            fragment["platform"] = platform.v2_name
        return fragment

    def __repr__(self) -> str:
        fields = ", ".join(f"{key.lstrip('_')}={value!r}" for key, value in vars(self).items())
        return f"{self.__class__.__name__}({fields})"
