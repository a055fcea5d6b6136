"""In-memory session store for chat messages and conversation summaries."""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Protocol

from portfolio_twin.chat.schema import ChatMessage, Conversation, NewChatMessage, Role

logger = logging.getLogger(__name__)

_MAX_TITLE_LENGTH = 40


class SessionStore(Protocol):
    """Storage boundary used by the chat orchestrator."""

    def append(self, message: NewChatMessage) -> ChatMessage:
        """Persist a message, assigning its id and timestamp."""
        ...

    def history(self, session_id: str) -> list[ChatMessage]:
        """Return a session's messages in ascending timestamp order."""
        ...

    def get_conversation(self, session_id: str) -> Conversation | None:
        """Return the summary row for a session, if any message was stored."""
        ...

    def recent_conversations(self, limit: int = 10) -> list[Conversation]:
        """Return conversation summaries, most recently active first."""
        ...


class InMemorySessionStore:
    """Process-local session store guarded by a single lock.

    Messages of a session are kept in insertion order. Timestamps within a
    session never decrease: a message appended after a clock step backwards
    reuses the previous timestamp, so sorting by timestamp keeps every user
    message ahead of the reply that follows it.
    Records handed out by `append` and `history` are deep copies.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._messages: dict[str, list[ChatMessage]] = {}
        self._conversations: dict[str, Conversation] = {}

    def append(self, message: NewChatMessage) -> ChatMessage:
        with self._lock:
            session_messages = self._messages.setdefault(message.session_id, [])
            now = _utc_now()
            if session_messages and session_messages[-1].timestamp > now:
                now = session_messages[-1].timestamp

            record = ChatMessage(
                id=str(uuid.uuid4()),
                session_id=message.session_id,
                message=message.message,
                role=message.role,
                timestamp=now,
                metadata=dict(message.metadata) if message.metadata else None,
            )
            session_messages.append(record)
            self._touch_conversation(record)

        logger.debug(
            "Stored %s message %s for session %s", record.role.value, record.id, record.session_id
        )
        return record.model_copy(deep=True)

    def history(self, session_id: str) -> list[ChatMessage]:
        with self._lock:
            messages = [m.model_copy(deep=True) for m in self._messages.get(session_id, ())]
        # sorted() is stable, so equal timestamps keep insertion order.
        return sorted(messages, key=lambda m: m.timestamp)

    def get_conversation(self, session_id: str) -> Conversation | None:
        with self._lock:
            return self._conversations.get(session_id)

    def recent_conversations(self, limit: int = 10) -> list[Conversation]:
        with self._lock:
            conversations = list(self._conversations.values())
        conversations.sort(key=lambda c: c.last_activity, reverse=True)
        return conversations[:limit]

    def _touch_conversation(self, record: ChatMessage) -> None:
        existing = self._conversations.get(record.session_id)
        if existing is None:
            self._conversations[record.session_id] = Conversation(
                id=str(uuid.uuid4()),
                session_id=record.session_id,
                title=_derive_title(record) if record.role is Role.USER else None,
                created_at=record.timestamp,
                updated_at=record.timestamp,
                last_activity=record.timestamp,
                message_count=1,
            )
            return

        updates: dict[str, object] = {
            "updated_at": record.timestamp,
            "last_activity": record.timestamp,
            "message_count": existing.message_count + 1,
        }
        if existing.title is None and record.role is Role.USER:
            updates["title"] = _derive_title(record)
        self._conversations[record.session_id] = existing.model_copy(update=updates)


def _derive_title(record: ChatMessage) -> str | None:
    cleaned = " ".join(record.message.split())
    if not cleaned:
        return None
    if len(cleaned) <= _MAX_TITLE_LENGTH:
        return cleaned
    trimmed = cleaned[: _MAX_TITLE_LENGTH - 1].rstrip()
    return f"{trimmed}…"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)
