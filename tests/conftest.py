import json
from pathlib import Path
from typing import Any, Callable

import pytest

from dialogflow_fulfillment.client import WebhookClient

STUBS_DIR = Path(__file__).parent / "stubs"


def load_stub(name: str) -> dict[str, Any]:
    return json.loads((STUBS_DIR / f"request-{name}.json").read_text(encoding="utf-8"))


@pytest.fixture
def stub() -> Callable[[str], dict[str, Any]]:
    return load_stub


@pytest.fixture
def agent_v1_google() -> WebhookClient:
    return WebhookClient(load_stub("v1-google"))


@pytest.fixture
def agent_v1_facebook() -> WebhookClient:
    return WebhookClient(load_stub("v1-facebook"))


@pytest.fixture
def agent_v1_web() -> WebhookClient:
    return WebhookClient(load_stub("v1-web"))


@pytest.fixture
def agent_v2_google() -> WebhookClient:
    return WebhookClient(load_stub("v2-google"))


@pytest.fixture
def agent_v2_facebook() -> WebhookClient:
    return WebhookClient(load_stub("v2-facebook"))
