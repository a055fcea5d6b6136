"""Canned answers for the quick-question buttons."""

from collections.abc import Mapping

from portfolio_twin.config.schema import PersonaConfig


class QuickQuestionResolver:
    """Looks up the exact text of an offered quick question."""

    def __init__(self, answers: Mapping[str, str], fallback: str):
        self._answers = dict(answers)
        self._fallback = fallback

    @classmethod
    def from_persona(cls, persona: PersonaConfig) -> "QuickQuestionResolver":
        return cls(persona.quick_answers, persona.quick_fallback)

    @property
    def questions(self) -> list[str]:
        """Question strings offered to visitors, in table order."""
        return list(self._answers)

    def resolve(self, question: str) -> str:
        """Return the canned answer for ``question``, or the fallback text."""
        return self._answers.get(question, self._fallback)
