from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from dialogflow_fulfillment.api import setup_exception_handlers
from dialogflow_fulfillment.client import WebhookClient

from tests.conftest import load_stub


def _build_app() -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)

    @app.post("/webhook")
    async def webhook(request: Request) -> dict:
        agent = WebhookClient(await request.json())
        agent.reply("Welcome")
        return agent.render()

    return app


client = TestClient(_build_app())


def test_webhook_roundtrip() -> None:
    response = client.post("/webhook", json=load_stub("v2-facebook"))

    assert response.status_code == 200
    assert response.json() == {
        "fulfillmentMessages": [{"text": {"text": ["Welcome"]}, "platform": "FACEBOOK"}]
    }


def test_unknown_version_maps_to_server_error() -> None:
    response = client.post("/webhook", json={})

    assert response.status_code == 500
    body = response.json()
    assert body["error"]["code"] == "UNKNOWN_AGENT_VERSION"
    assert body["error"]["correlation_id"] == "unknown"


def test_malformed_request_maps_to_bad_request() -> None:
    response = client.post("/webhook", json={"queryResult": {}, "session": 42})

    assert response.status_code == 400
    assert response.json()["error"] == {
        "code": "MALFORMED_REQUEST",
        "message": "Expected 'session' to be a string",
        "correlation_id": "unknown",
        "details": {"field": "session"},
    }
