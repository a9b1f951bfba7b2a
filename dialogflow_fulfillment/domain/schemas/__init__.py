from dialogflow_fulfillment.domain.schemas.request import ParsedRequest

__all__ = ["ParsedRequest"]
