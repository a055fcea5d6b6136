"""Tests for the portfolio chat API routes."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
import respx
from fastapi.testclient import TestClient
from httpx import Response

from portfolio_twin import __version__
from portfolio_twin.chat.dispatcher import ResponseDispatcher
from portfolio_twin.chat.store import InMemorySessionStore
from portfolio_twin.config import defaults
from portfolio_twin.config.schema import AppConfig
from portfolio_twin.contact.mailer import ContactMailer
from portfolio_twin.server.app import create_app


def _make_dispatcher(reply="It's always sunny in General Santos!", side_effect=None):
    dispatcher = MagicMock(spec=ResponseDispatcher)
    dispatcher.dispatch = AsyncMock(return_value=reply, side_effect=side_effect)
    dispatcher.aclose = AsyncMock()
    return dispatcher


def _make_mailer(forwarded=True):
    mailer = MagicMock(spec=ContactMailer)
    mailer.forward = AsyncMock(return_value=forwarded)
    mailer.send_auto_reply = AsyncMock(return_value=True)
    return mailer


def _make_client(config=None, dispatcher=None, store=None, mailer=None):
    app = create_app(
        config or AppConfig(),
        store=store,
        dispatcher=dispatcher or _make_dispatcher(),
        mailer=mailer or _make_mailer(),
    )
    return TestClient(app)


def test_health_endpoint():
    """GET /health returns healthy status with model name."""
    client = _make_client()

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "model": "llama-3.1-8b-instant",
        "version": __version__,
    }


def test_chat_quick_question():
    dispatcher = _make_dispatcher()
    client = _make_client(dispatcher=dispatcher)

    response = client.post(
        "/chat",
        json={"message": "What are your skills?", "sessionId": "s1", "isQuickQuestion": True},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == defaults.QUICK_ANSWERS["What are your skills?"]
    assert data["kind"] == "text"
    assert data["messageId"]
    assert "imageUrl" not in data
    dispatcher.dispatch.assert_not_called()


def test_chat_personal_query_returns_profile_card():
    dispatcher = _make_dispatcher()
    client = _make_client(dispatcher=dispatcher)

    response = client.post("/chat", json={"message": "Who is Lance?", "sessionId": "s1"})

    assert response.status_code == 200
    data = response.json()
    assert data["kind"] == "profile"
    assert data["message"] == defaults.OWNER_BIO
    assert data["imageUrl"] == defaults.PROFILE_IMAGE_URL
    assert data["specialFormatting"] == "profile"
    dispatcher.dispatch.assert_not_called()


def test_chat_general_question_uses_model():
    dispatcher = _make_dispatcher()
    client = _make_client(dispatcher=dispatcher)

    response = client.post("/chat", json={"message": "What's the weather like?", "sessionId": "s1"})

    assert response.status_code == 200
    assert response.json()["message"] == "It's always sunny in General Santos!"
    dispatcher.dispatch.assert_awaited_once()


def test_chat_missing_credentials_returns_apology(monkeypatch):
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    config = AppConfig()
    client = TestClient(create_app(config))

    response = client.post("/chat", json={"message": "Explain recursion", "sessionId": "s1"})

    assert response.status_code == 200
    assert response.json()["message"] == defaults.APOLOGY_MESSAGE


def test_chat_message_over_limit_is_rejected():
    store = InMemorySessionStore()
    client = _make_client(store=store)

    response = client.post("/chat", json={"message": "a" * 1001, "sessionId": "s1"})

    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert data["error"] == "Invalid request format"
    assert data["details"][0]["type"] == "too_long"
    assert store.history("s1") == []


def test_chat_message_at_limit_is_accepted():
    client = _make_client()

    response = client.post("/chat", json={"message": "a" * 1000, "sessionId": "s1"})

    assert response.status_code == 200


@pytest.mark.parametrize(
    "body",
    [
        {"sessionId": "s1"},
        {"message": "Hello"},
        {"message": "", "sessionId": "s1"},
        {"message": "Hello", "sessionId": ""},
        {"message": 12, "sessionId": "s1"},
    ],
)
def test_chat_invalid_body_returns_400(body):
    store = InMemorySessionStore()
    client = _make_client(store=store)

    response = client.post("/chat", json=body)

    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert data["error"] == "Invalid request format"
    assert isinstance(data["details"], list)
    assert data["details"]
    assert store.recent_conversations() == []


def test_chat_unexpected_error_returns_500():
    client = _make_client(dispatcher=_make_dispatcher(side_effect=RuntimeError("store exploded")))

    response = client.post("/chat", json={"message": "Explain recursion", "sessionId": "s1"})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "store exploded"}


def test_chat_history_round_trip():
    client = _make_client()
    client.post("/chat", json={"message": "Who are you?", "sessionId": "s1"})
    client.post(
        "/chat",
        json={"message": "How can I reach you?", "sessionId": "s1", "isQuickQuestion": True},
    )

    response = client.get("/chat/history/s1")

    assert response.status_code == 200
    messages = response.json()["messages"]
    assert [m["role"] for m in messages] == ["user", "assistant", "user", "assistant"]
    assert messages[0]["sessionId"] == "s1"
    assert messages[0]["metadata"] == {"isQuickQuestion": False}
    assert messages[1]["metadata"]["isPersonalQuery"] is True
    assert messages[3]["message"] == defaults.QUICK_ANSWERS["How can I reach you?"]
    assert {"id", "timestamp"} <= set(messages[0])


def test_chat_history_unknown_session_is_empty():
    client = _make_client()

    response = client.get("/chat/history/nobody")

    assert response.status_code == 200
    assert response.json() == {"success": True, "messages": []}


def test_chat_history_store_failure_returns_500():
    store = MagicMock(spec=InMemorySessionStore)
    store.history.side_effect = RuntimeError("disk on fire")
    client = _make_client(store=store)

    response = client.get("/chat/history/s1")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to retrieve chat history"}


def test_conversations_listed_most_recent_first(monkeypatch):
    ticks = iter(datetime(2026, 1, 1, 12, 0, i, tzinfo=timezone.utc) for i in range(10))
    monkeypatch.setattr("portfolio_twin.chat.store._utc_now", lambda: next(ticks))
    client = _make_client()
    client.post("/chat", json={"message": "Hello from one", "sessionId": "one"})
    client.post("/chat", json={"message": "Hello from two", "sessionId": "two"})

    response = client.get("/conversations", params={"limit": 1})

    assert response.status_code == 200
    conversations = response.json()["conversations"]
    assert len(conversations) == 1
    assert conversations[0]["sessionId"] == "two"
    assert conversations[0]["title"] == "Hello from two"
    assert conversations[0]["messageCount"] == 2


def test_conversations_limit_validated():
    client = _make_client()

    response = client.get("/conversations", params={"limit": 0})

    assert response.status_code == 400


def test_quick_questions():
    client = _make_client()

    response = client.get("/quick-questions")

    assert response.status_code == 200
    assert response.json()["questions"] == list(defaults.QUICK_ANSWERS)


def test_portfolio_profile():
    client = _make_client()

    response = client.get("/portfolio/profile")

    assert response.status_code == 200
    profile = response.json()["profile"]
    assert profile["name"] == defaults.OWNER_NAME
    assert profile["imageUrl"] == defaults.PROFILE_IMAGE_URL
    assert profile["sections"]["contact"]["email"] == defaults.CONTACT["email"]


def test_cors_allows_configured_origin():
    config = AppConfig()
    config.server.cors_origins = ["http://portfolio.test"]
    client = _make_client(config=config)

    response = client.options(
        "/chat",
        headers={
            "Origin": "http://portfolio.test",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://portfolio.test"


@pytest.mark.parametrize(
    "reply",
    [
        {"text": "<html>gateway</html>", "headers": {"content-type": "text/html"}},
        {"json": {"choices": []}},
        {"json": {"choices": [{"index": 0, "finish_reason": "stop"}]}},
    ],
    ids=["html-body", "no-choices", "choice-without-message"],
)
@respx.mock
def test_chat_malformed_model_reply_returns_apology(reply):
    respx.post("http://llm.test/v1/chat/completions").mock(return_value=Response(200, **reply))
    config = AppConfig()
    config.provider.base_url = "http://llm.test/v1"
    config.provider.api_key = "test-key"
    client = TestClient(create_app(config, mailer=_make_mailer()))

    response = client.post("/chat", json={"message": "Explain recursion", "sessionId": "s1"})

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert response.json()["message"] == defaults.APOLOGY_MESSAGE


def test_shutdown_closes_model_client():
    dispatcher = _make_dispatcher()

    with _make_client(dispatcher=dispatcher) as client:
        assert client.get("/health").status_code == 200
        dispatcher.aclose.assert_not_called()

    dispatcher.aclose.assert_awaited_once()


CONTACT = {"name": "Ada", "email": "ada@lovelace.dev", "message": "Let's work together."}


def test_contact_forwards_and_confirms():
    mailer = _make_mailer()
    client = _make_client(mailer=mailer)

    response = client.post("/contact", json=CONTACT)

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Thank you Ada! Your message has been sent to Lance. "
        "You should receive a confirmation email shortly.",
    }
    submission = mailer.forward.call_args.args[0]
    assert (submission.name, submission.email, submission.message) == (
        "Ada",
        "ada@lovelace.dev",
        "Let's work together.",
    )
    mailer.send_auto_reply.assert_awaited_once_with(submission)


def test_contact_delivery_failure_returns_500():
    mailer = _make_mailer(forwarded=False)
    client = _make_client(mailer=mailer)

    response = client.post("/contact", json=CONTACT)

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Sorry, there was an error sending your message. Please try again.",
    }
    mailer.send_auto_reply.assert_not_called()


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": ""},
        {"name": "x" * 101},
        {"email": "not-an-email"},
        {"message": ""},
        {"message": "x" * 2001},
    ],
)
def test_contact_invalid_body_returns_400(overrides):
    mailer = _make_mailer()
    client = _make_client(mailer=mailer)

    response = client.post("/contact", json={**CONTACT, **overrides})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request format"
    mailer.forward.assert_not_called()


def test_contact_without_smtp_settings_returns_500(monkeypatch):
    for name in ("EMAIL_ADDRESS", "EMAIL_PASSWORD", "RECEIVER_EMAIL"):
        monkeypatch.delenv(name, raising=False)
    client = TestClient(create_app(AppConfig(), dispatcher=_make_dispatcher()))

    response = client.post("/contact", json=CONTACT)

    assert response.status_code == 500
    assert response.json()["success"] is False
