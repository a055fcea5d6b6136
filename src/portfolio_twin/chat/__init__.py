"""Chat turn pipeline: session storage, response dispatch and orchestration.

Components:

- :class:`InMemorySessionStore` - Ordered per-session message log with conversation summaries
- :class:`ResponseDispatcher` - Forwards a prompt and history window to the chat model
- :class:`portfolio_twin.chat.orchestrator.ChatOrchestrator` - Validates, routes and persists one turn
"""

from portfolio_twin.chat.dispatcher import ResponseDispatcher
from portfolio_twin.chat.schema import (
    AssistantReply,
    ChatMessage,
    Conversation,
    NewChatMessage,
    ProfileReply,
    Role,
    TextReply,
)
from portfolio_twin.chat.store import InMemorySessionStore, SessionStore

__all__ = [
    "AssistantReply",
    "ChatMessage",
    "Conversation",
    "InMemorySessionStore",
    "NewChatMessage",
    "ProfileReply",
    "ResponseDispatcher",
    "Role",
    "SessionStore",
    "TextReply",
]
