"""
Rich Messages Package.

This package contains the channel-agnostic reply units queued on the webhook
client. Each message renders itself for every (agent version, platform) pair,
falling back to a generic shape for platforms it has no dedicated form for.
"""

from dialogflow_fulfillment.messages.base import RichMessage
from dialogflow_fulfillment.messages.text import Text
from dialogflow_fulfillment.messages.image import Image
from dialogflow_fulfillment.messages.card import Card
from dialogflow_fulfillment.messages.suggestion import Suggestion
from dialogflow_fulfillment.messages.payload import Payload

__all__ = [
    "RichMessage",
    "Text",
    "Image",
    "Card",
    "Suggestion",
    "Payload",
]
