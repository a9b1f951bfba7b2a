import pytest

from dialogflow_fulfillment.client import WebhookClient
from dialogflow_fulfillment.domain.models.context import Context
from dialogflow_fulfillment.messages import Image, Payload, Text
from dialogflow_fulfillment.utils.exceptions import InvalidReplyError, UnknownVersionError


def test_empty_request_raises_unknown_version() -> None:
    with pytest.raises(UnknownVersionError):
        WebhookClient({})


def test_agent_version(agent_v1_google, agent_v1_facebook, agent_v1_web, agent_v2_google, agent_v2_facebook) -> None:
    assert agent_v1_google.get_agent_version() == 1
    assert agent_v1_facebook.get_agent_version() == 1
    assert agent_v1_web.get_agent_version() == 1
    assert agent_v2_google.get_agent_version() == 2
    assert agent_v2_facebook.get_agent_version() == 2


def test_request_fields_v1(agent_v1_google) -> None:
    assert agent_v1_google.get_intent() == "prayer.time"
    assert agent_v1_google.get_action() == "prayer.time"
    assert agent_v1_google.get_session() == "1525478176609"
    assert agent_v1_google.get_query() == "kapan waktu shalat isya di jakarta utara"
    assert agent_v1_google.get_locale() == "id"


def test_request_fields_v2(agent_v2_google) -> None:
    assert agent_v2_google.get_intent() == "prayer.time"
    assert agent_v2_google.get_action() == "prayer.time"
    assert agent_v2_google.get_session() == "1525510000000"
    assert agent_v2_google.get_query() == "kapan waktu shalat isya di jakarta utara"
    assert agent_v2_google.get_locale() == "id"


def test_parameters_keep_unset_keys(agent_v1_google) -> None:
    assert agent_v1_google.get_parameters() == {
        "date": None,
        "kota": "1470",
        "propinsi": None,
        "shalat": "isha",
    }
    assert agent_v1_google.get_parameter("kota") == "1470"
    assert agent_v1_google.get_parameter("missing", "fallback") == "fallback"


def test_contexts(agent_v1_google) -> None:
    contexts = agent_v1_google.get_contexts()

    assert isinstance(contexts, list)
    context = contexts[0]
    assert isinstance(context, Context)
    assert context.get_name() == "google_assistant_welcome"
    assert context.get_lifespan() == 0
    assert context.get_parameters() == {
        "date": None,
        "propinsi": None,
        "kota.original": "jakarta utara",
        "kota": "1470",
        "shalat.original": "isya",
        "date.original": None,
        "shalat": "isha",
        "propinsi.original": None,
    }


def test_get_context_by_name(agent_v2_facebook) -> None:
    assert agent_v2_facebook.get_context("generic").lifespan == 4
    assert agent_v2_facebook.get_context("unknown") is None


def test_request_source(agent_v1_google, agent_v1_facebook, agent_v1_web, agent_v2_google, agent_v2_facebook) -> None:
    assert agent_v1_google.get_request_source() == "google"
    assert agent_v1_facebook.get_request_source() == "facebook"
    assert agent_v1_web.get_request_source() == "agent"
    assert agent_v2_google.get_request_source() == "google"
    assert agent_v2_facebook.get_request_source() == "facebook"


def test_original_request(agent_v1_google, agent_v1_web) -> None:
    original = agent_v1_google.get_original_request()

    assert isinstance(original, dict)
    assert original["conversation"]["conversationId"] == "1525478176609"
    assert agent_v1_web.get_original_request() is None


def test_request_data_is_read_only(agent_v1_google) -> None:
    original = agent_v1_google.get_original_request()
    original["conversation"]["conversationId"] = "changed"
    original["extra"] = True

    parameters = agent_v1_google.get_parameters()
    parameters["kota"] = "changed"
    parameters["added"] = 1

    assert agent_v1_google.get_original_request()["conversation"]["conversationId"] == "1525478176609"
    assert "extra" not in agent_v1_google.get_original_request()
    assert agent_v1_google.get_parameters() == {
        "date": None,
        "kota": "1470",
        "propinsi": None,
        "shalat": "isha",
    }
    assert not hasattr(agent_v1_google, "request")


def test_nested_parameter_values_are_copied() -> None:
    agent = WebhookClient({"result": {"parameters": {"cities": ["bandung"]}}})

    agent.get_parameter("cities").append("bogor")
    agent.get_parameters()["cities"].append("bekasi")

    assert agent.get_parameter("cities") == ["bandung"]


def test_reply_v1_google_simple(agent_v1_google) -> None:
    agent_v1_google.reply("Welcome")

    assert agent_v1_google.render() == {
        "messages": [
            {
                "type": "simple_response",
                "platform": "google",
                "textToSpeech": "Welcome",
                "displayText": "Welcome",
            }
        ]
    }


def test_reply_v2_google_simple(agent_v2_google) -> None:
    agent_v2_google.reply("Welcome")

    assert agent_v2_google.render() == {
        "fulfillmentMessages": [
            {
                "platform": "ACTIONS_ON_GOOGLE",
                "simpleResponses": {
                    "simpleResponses": [
                        {"textToSpeech": "Welcome", "displayText": "Welcome"}
                    ]
                },
            }
        ]
    }


def test_reply_v1_facebook_simple(agent_v1_facebook) -> None:
    agent_v1_facebook.reply("Welcome")

    assert agent_v1_facebook.render() == {
        "messages": [{"type": 0, "platform": "facebook", "speech": "Welcome"}]
    }


def test_reply_v2_facebook_simple(agent_v2_facebook) -> None:
    agent_v2_facebook.reply("Welcome")

    assert agent_v2_facebook.render() == {
        "fulfillmentMessages": [
            {"text": {"text": ["Welcome"]}, "platform": "FACEBOOK"}
        ]
    }


def test_reply_v1_web_simple_echoes_speech(agent_v1_web) -> None:
    agent_v1_web.reply("Welcome")

    assert agent_v1_web.render() == {
        "messages": [{"type": 0, "speech": "Welcome"}],
        "speech": "Welcome",
    }


def test_reply_v1_google_text_ignores_ssml(agent_v1_google) -> None:
    agent_v1_google.reply(Text.create().text("Welcome").ssml("Hi, welcome"))

    assert agent_v1_google.render() == {
        "messages": [
            {
                "type": "simple_response",
                "platform": "google",
                "textToSpeech": "Welcome",
                "displayText": "Welcome",
            }
        ]
    }


def test_reply_v2_google_text_uses_ssml(agent_v2_google) -> None:
    agent_v2_google.reply(Text.create().text("Welcome").ssml("Hi, welcome"))

    response = agent_v2_google.render()

    assert response == {
        "fulfillmentMessages": [
            {
                "platform": "ACTIONS_ON_GOOGLE",
                "simpleResponses": {
                    "simpleResponses": [
                        {"ssml": "Hi, welcome", "displayText": "Welcome"}
                    ]
                },
            }
        ]
    }
    inner = response["fulfillmentMessages"][0]["simpleResponses"]["simpleResponses"][0]
    assert "textToSpeech" not in inner


def test_render_without_reply_is_empty(agent_v1_web, agent_v2_facebook) -> None:
    assert agent_v1_web.render() == {"messages": []}
    assert agent_v2_facebook.render() == {"fulfillmentMessages": []}


def test_render_is_idempotent(agent_v1_web) -> None:
    agent_v1_web.reply("Welcome").reply(Payload({"slack": {"text": "hi"}}))

    first = agent_v1_web.render()
    first["messages"][1]["payload"]["slack"]["text"] = "changed"
    second = agent_v1_web.render()

    assert second == agent_v1_web.render()
    assert second["messages"][1]["payload"] == {"slack": {"text": "hi"}}


def test_v1_web_speech_first_wins(agent_v1_web) -> None:
    agent_v1_web.reply("First").reply("Second")

    response = agent_v1_web.render()

    assert response["speech"] == "First"
    assert [m["speech"] for m in response["messages"]] == ["First", "Second"]


def test_v1_web_speech_absent_when_first_reply_is_not_text(agent_v1_web) -> None:
    agent_v1_web.reply(Image("https://example.com/fajr.png")).reply("Subuh pukul 04:35")

    assert "speech" not in agent_v1_web.render()


def test_reply_rejects_other_types(agent_v1_google) -> None:
    with pytest.raises(InvalidReplyError):
        agent_v1_google.reply(42)


def test_outgoing_contexts_v1(agent_v1_google) -> None:
    agent_v1_google.set_outgoing_context("prayer", lifespan=2, parameters={"kota": "1470"})
    agent_v1_google.set_outgoing_context("prayer", lifespan=3)
    agent_v1_google.clear_context("google_assistant_welcome")

    assert agent_v1_google.render()["contextOut"] == [
        {"name": "prayer", "lifespan": 3, "parameters": {}},
        {"name": "google_assistant_welcome", "lifespan": 0, "parameters": {}},
    ]


def test_outgoing_contexts_v2_are_session_qualified(agent_v2_facebook) -> None:
    agent_v2_facebook.set_outgoing_context(Context("prayer", 2, {"kota": "1219"}))

    assert agent_v2_facebook.render()["outputContexts"] == [
        {
            "name": "projects/prayer-time-agent/agent/sessions/"
                    "c9a7e0a6-1f0e-4d3b-9e1a-7f3e2d1c0b9a/contexts/prayer",
            "lifespanCount": 2,
            "parameters": {"kota": "1219"},
        }
    ]


def test_clear_outgoing_context(agent_v2_google) -> None:
    agent_v2_google.set_outgoing_context("prayer").clear_outgoing_context("prayer")

    assert "outputContexts" not in agent_v2_google.render()


def test_followup_event(agent_v1_web, agent_v2_google) -> None:
    agent_v1_web.set_followup_event("ask_city", {"shalat": "fajr"})
    agent_v2_google.set_followup_event("ask_city")

    assert agent_v1_web.render()["followupEvent"] == {
        "name": "ask_city",
        "data": {"shalat": "fajr"},
    }
    assert agent_v2_google.render()["followupEventInput"] == {
        "name": "ask_city",
        "parameters": {},
        "languageCode": "id",
    }
