"""Chat turn orchestration.

One turn is a strict linear pipeline:

1. validate the session id and message
2. persist the user message
3. route: quick question -> canned answer; personal query -> profile card;
   anything else -> chat model with the session history
4. persist the assistant reply
5. return the reply and its stored id

Provider failures are replaced with the configured apology text, so a turn
that reaches step 3 always completes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from portfolio_twin.chat.dispatcher import ResponseDispatcher
from portfolio_twin.chat.schema import (
    AssistantReply,
    ChatMessage,
    NewChatMessage,
    Role,
    TextReply,
    reply_metadata,
)
from portfolio_twin.chat.store import InMemorySessionStore, SessionStore
from portfolio_twin.config.schema import AppConfig, ChatConfig
from portfolio_twin.errors import ChatValidationError, ExternalServiceError
from portfolio_twin.llm.client import Message
from portfolio_twin.persona.detector import PersonalQueryDetector
from portfolio_twin.persona.quick_questions import QuickQuestionResolver

logger = logging.getLogger(__name__)


class Route(str, Enum):
    """Which component produced the reply."""

    QUICK = "quick"
    PERSONAL = "personal"
    LLM = "llm"


@dataclass
class TurnResult:
    """Outcome of one chat turn."""

    reply: AssistantReply
    message_id: str
    route: Route
    degraded: bool = False


class ChatOrchestrator:
    """Entry point for chat turns; owns no state besides its collaborators."""

    def __init__(
        self,
        store: SessionStore,
        dispatcher: ResponseDispatcher,
        resolver: QuickQuestionResolver,
        detector: PersonalQueryDetector,
        config: ChatConfig | None = None,
    ):
        """Initialize the orchestrator.

        Args:
            store: Session store receiving both messages of every turn
            dispatcher: Chat model dispatcher for general questions
            resolver: Quick-question answer table
            detector: Personal-query classifier
            config: Chat limits and apology text
        """
        self.store = store
        self.dispatcher = dispatcher
        self.resolver = resolver
        self.detector = detector
        self.config = config or ChatConfig()

    def validate(self, session_id: str, message: str) -> None:
        """Check turn input, raising ChatValidationError on the first violation set."""
        details: list[dict[str, Any]] = []
        limit = self.config.max_message_length

        if not isinstance(session_id, str) or not session_id:
            details.append(
                {"loc": ["body", "sessionId"], "msg": "Session ID is required", "type": "missing"}
            )
        if not isinstance(message, str) or not message:
            details.append(
                {"loc": ["body", "message"], "msg": "Message must not be empty", "type": "too_short"}
            )
        elif len(message) > limit:
            details.append(
                {
                    "loc": ["body", "message"],
                    "msg": f"Message must be at most {limit} characters",
                    "type": "too_long",
                }
            )

        if details:
            raise ChatValidationError("Invalid request format", details=details)

    async def handle_turn(
        self,
        session_id: str,
        message: str,
        is_quick_question: bool = False,
    ) -> TurnResult:
        """Run one chat turn.

        Args:
            session_id: Client-chosen session identifier
            message: Visitor message
            is_quick_question: Whether the message came from a quick-question button

        Returns:
            TurnResult with the reply and the stored assistant message id

        Raises:
            ChatValidationError: If the input is invalid; nothing is stored
        """
        self.validate(session_id, message)

        user_record = self.store.append(
            NewChatMessage(
                session_id=session_id,
                message=message,
                role=Role.USER,
                metadata={"isQuickQuestion": is_quick_question},
            )
        )

        degraded = False
        if is_quick_question:
            route = Route.QUICK
            reply: AssistantReply = TextReply(text=self.resolver.resolve(message))
        elif self.detector.is_personal_query(message):
            route = Route.PERSONAL
            reply = self.detector.build_personal_response()
        else:
            route = Route.LLM
            history = self._history_for_prompt(session_id, exclude_id=user_record.id)
            try:
                text = await self.dispatcher.dispatch(message, history)
            except ExternalServiceError as e:
                logger.warning("Chat model unavailable for session %s: %s", session_id, e)
                text = self.config.apology_message
                degraded = True
            reply = TextReply(text=text)

        assistant_record = self.store.append(
            NewChatMessage(
                session_id=session_id,
                message=reply.text,
                role=Role.ASSISTANT,
                metadata=reply_metadata(reply),
            )
        )

        logger.info(
            "Completed turn | session=%s | route=%s | message_length=%d | reply_length=%d",
            session_id,
            route.value,
            len(message),
            len(reply.text),
        )
        return TurnResult(
            reply=reply,
            message_id=assistant_record.id,
            route=route,
            degraded=degraded,
        )

    def history(self, session_id: str) -> list[ChatMessage]:
        """Return the stored messages of a session, oldest first."""
        return self.store.history(session_id)

    def _history_for_prompt(self, session_id: str, exclude_id: str) -> list[Message]:
        return [
            Message(role=record.role.value, content=record.message)
            for record in self.store.history(session_id)
            if record.id != exclude_id
        ]


def create_orchestrator(
    config: AppConfig,
    store: SessionStore | None = None,
    dispatcher: ResponseDispatcher | None = None,
) -> ChatOrchestrator:
    """Wire an orchestrator from application configuration.

    Args:
        config: Application configuration
        store: Session store; a new in-memory store when omitted
        dispatcher: Chat model dispatcher; built from config when omitted

    Returns:
        Ready-to-use orchestrator
    """
    return ChatOrchestrator(
        store=store if store is not None else InMemorySessionStore(),
        dispatcher=dispatcher if dispatcher is not None else ResponseDispatcher(config),
        resolver=QuickQuestionResolver.from_persona(config.persona),
        detector=PersonalQueryDetector.from_persona(config.persona),
        config=config.chat,
    )
