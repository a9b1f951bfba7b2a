from dialogflow_fulfillment.domain.models.context import Context
from dialogflow_fulfillment.domain.models.platform import AgentVersion, Platform, DEFAULT_SOURCE

__all__ = ["Context", "AgentVersion", "Platform", "DEFAULT_SOURCE"]
