"""Detect questions about the portfolio owner.

A message is personal when its trimmed, lower-cased text contains any of the
configured trigger phrases. Personal messages are answered with the fixed
profile card and never reach the chat model.
"""

from collections.abc import Iterable

from portfolio_twin.chat.schema import ProfileReply
from portfolio_twin.config.schema import PersonaConfig


class PersonalQueryDetector:
    """Substring classifier over a fixed trigger list."""

    def __init__(self, triggers: Iterable[str], bio: str, image_url: str):
        """Initialize the detector.

        Args:
            triggers: Phrases that mark a message as personal (case-insensitive)
            bio: Profile text returned for personal messages
            image_url: Image reference shown on the profile card
        """
        self._triggers = [t.strip().lower() for t in triggers if t and t.strip()]
        self._bio = bio
        self._image_url = image_url

    @classmethod
    def from_persona(cls, persona: PersonaConfig) -> "PersonalQueryDetector":
        return cls(persona.personal_triggers, persona.bio, persona.image_url)

    @property
    def triggers(self) -> list[str]:
        return list(self._triggers)

    def is_personal_query(self, message: object) -> bool:
        """Return True when ``message`` contains any trigger phrase."""
        if not isinstance(message, str):
            return False

        text = message.strip().lower()
        if not text:
            return False

        return any(trigger in text for trigger in self._triggers)

    def build_personal_response(self) -> ProfileReply:
        """Return the fixed profile card."""
        return ProfileReply(text=self._bio, image_url=self._image_url)
