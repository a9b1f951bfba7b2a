"""
Platform and agent version enumerations.

Platform names appear in two spellings on the wire: v1 payloads use the short
lower-case form (``google``), v2 payloads the upper-case integration name
(``ACTIONS_ON_GOOGLE``). Both the request parsers (source detection) and the
rich messages (platform tagging) resolve names through this module.
"""

from enum import Enum, IntEnum
from typing import Optional


# Source reported when the request did not come through an integration
DEFAULT_SOURCE = "agent"


class AgentVersion(IntEnum):
    """Webhook API versions."""
    V1 = 1
    V2 = 2


class Platform(str, Enum):
    """Front-end platforms a webhook request can originate from."""
    GOOGLE = "google"
    FACEBOOK = "facebook"
    SLACK = "slack"
    TELEGRAM = "telegram"
    KIK = "kik"
    SKYPE = "skype"
    LINE = "line"
    VIBER = "viber"

    @property
    def v1_name(self) -> str:
        """Platform name used in v1 response fragments."""
        return self.value

    @property
    def v2_name(self) -> str:
        """Platform name used in v2 response fragments."""
        return _V2_NAMES[self]

    def name_for(self, version: int) -> str:
        """Platform name for the given agent version."""
        return self.v2_name if version == AgentVersion.V2 else self.v1_name

    @classmethod
    def from_source(cls, source: Optional[str]) -> Optional["Platform"]:
        """
        Resolve a request source to a platform.

        Accepts either spelling, case-insensitively. Returns None for the
        generic channel and for any source that is not a known platform.
        """
        if not source:
            return None
        key = source.strip().lower()
        if key in _V1_LOOKUP:
            return _V1_LOOKUP[key]
        return _V2_LOOKUP.get(key)


_V2_NAMES = {
    Platform.GOOGLE: "ACTIONS_ON_GOOGLE",
    Platform.FACEBOOK: "FACEBOOK",
    Platform.SLACK: "SLACK",
    Platform.TELEGRAM: "TELEGRAM",
    Platform.KIK: "KIK",
    Platform.SKYPE: "SKYPE",
    Platform.LINE: "LINE",
    Platform.VIBER: "VIBER",
}

_V1_LOOKUP = {platform.value: platform for platform in Platform}
_V2_LOOKUP = {name.lower(): platform for platform, name in _V2_NAMES.items()}
