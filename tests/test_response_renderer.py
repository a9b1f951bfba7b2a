from dialogflow_fulfillment.domain.models.context import Context
from dialogflow_fulfillment.formatters import ResponseRenderer
from dialogflow_fulfillment.messages import Suggestion, Text


def test_v1_messages_keep_queue_order() -> None:
    renderer = ResponseRenderer()

    response = renderer.render(1, "facebook", [Text("One"), Suggestion(["Yes", "No"]), Text("Two")])

    assert response == {
        "messages": [
            {"type": 0, "platform": "facebook", "speech": "One"},
            {"type": 2, "platform": "facebook", "replies": ["Yes", "No"]},
            {"type": 0, "platform": "facebook", "speech": "Two"},
        ]
    }


def test_v1_speech_echo_only_for_generic_channel() -> None:
    renderer = ResponseRenderer()

    assert "speech" not in renderer.render(1, "google", [Text("Hi")])
    assert "speech" not in renderer.render(1, "slack", [Text("Hi")])
    assert renderer.render(1, "agent", [Text("Hi")])["speech"] == "Hi"
    assert renderer.render(1, None, [Text("Hi")])["speech"] == "Hi"


def test_v2_never_echoes_speech() -> None:
    assert ResponseRenderer().render(2, "agent", [Text("Hi")]) == {
        "fulfillmentMessages": [{"text": {"text": ["Hi"]}}]
    }


def test_renders_are_equal_and_independent() -> None:
    renderer = ResponseRenderer()
    messages = [Text("Hi")]

    first = renderer.render(2, "facebook", messages)
    second = renderer.render(2, "facebook", messages)

    assert first == second
    assert first is not second
    assert first["fulfillmentMessages"][0] is not second["fulfillmentMessages"][0]


def test_v2_contexts_without_session_path_keep_short_name() -> None:
    response = ResponseRenderer().render(2, None, [], output_contexts=[Context("booking", 1)])

    assert response["outputContexts"] == [
        {"name": "booking", "lifespanCount": 1, "parameters": {}}
    ]


def test_v2_followup_event_without_locale() -> None:
    response = ResponseRenderer().render(
        2, None, [], followup_event={"name": "welcome", "parameters": {"a": 1}}
    )

    assert response["followupEventInput"] == {"name": "welcome", "parameters": {"a": 1}}
