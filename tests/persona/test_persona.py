"""Tests for the quick-question resolver, personal-query detector and profile."""

import pytest

from portfolio_twin.chat.schema import ProfileReply
from portfolio_twin.config import defaults
from portfolio_twin.config.schema import PersonaConfig
from portfolio_twin.persona import (
    PersonalQueryDetector,
    QuickQuestionResolver,
    build_portfolio_profile,
)


@pytest.fixture
def resolver() -> QuickQuestionResolver:
    return QuickQuestionResolver.from_persona(PersonaConfig())


@pytest.fixture
def detector() -> PersonalQueryDetector:
    return PersonalQueryDetector.from_persona(PersonaConfig())


@pytest.mark.parametrize("question", list(defaults.QUICK_ANSWERS))
def test_resolve_exact_match(resolver, question):
    assert resolver.resolve(question) == defaults.QUICK_ANSWERS[question]


@pytest.mark.parametrize(
    "question",
    ["what are your skills?", "What are your skills", " What are your skills?", "Hobbies?"],
)
def test_resolve_requires_exact_text(resolver, question):
    assert resolver.resolve(question) == defaults.QUICK_FALLBACK


def test_resolve_is_idempotent(resolver):
    assert resolver.resolve("What are your skills?") == resolver.resolve("What are your skills?")


def test_questions_listed_in_table_order(resolver):
    assert resolver.questions == [
        "What projects are you most proud of?",
        "What are your skills?",
        "Am I available for opportunities?",
        "How can I reach you?",
    ]


def test_custom_table():
    resolver = QuickQuestionResolver({"Q?": "A."}, fallback="Nope.")

    assert resolver.resolve("Q?") == "A."
    assert resolver.resolve("R?") == "Nope."


@pytest.mark.parametrize(
    "message",
    [
        "Who is Lance?",
        "WHO IS LANCE CABANIT",
        "   tell me about yourself please  ",
        "So... who made this site?",
        "What's your background in ML?",
        "I'd like to know your skills",
    ],
)
def test_detects_personal_queries(detector, message):
    assert detector.is_personal_query(message) is True


@pytest.mark.parametrize(
    "message",
    ["What's the weather like?", "Explain recursion", "", "   ", None, 42],
)
def test_ignores_other_messages(detector, message):
    assert detector.is_personal_query(message) is False


def test_every_default_trigger_matches(detector):
    for trigger in defaults.PERSONAL_TRIGGERS:
        assert detector.is_personal_query(f"Hey, {trigger.upper()}?")


def test_custom_triggers_are_normalised():
    detector = PersonalQueryDetector(["  Who Built You  ", ""], bio="Bio", image_url="img")

    assert detector.triggers == ["who built you"]
    assert detector.is_personal_query("who built you anyway")
    assert not detector.is_personal_query("anything else")


def test_build_personal_response(detector):
    reply = detector.build_personal_response()

    assert isinstance(reply, ProfileReply)
    assert reply.kind == "profile"
    assert reply.text == defaults.OWNER_BIO
    assert reply.image_url == defaults.PROFILE_IMAGE_URL
    assert reply.special_formatting == "profile"
    assert detector.build_personal_response() == reply


def test_portfolio_profile():
    persona = PersonaConfig()

    profile = build_portfolio_profile(persona)

    assert profile["name"] == "Lance Cabanit"
    assert profile["sections"]["me"]["bio"] == persona.bio
    assert profile["sections"]["contact"]["email"] == persona.contact["email"]
    assert [g["category"] for g in profile["sections"]["skills"]][0] == "Frontend"
    assert len(profile["sections"]["projects"]) == 3
