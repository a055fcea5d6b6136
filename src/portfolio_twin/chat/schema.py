"""Pydantic models for chat messages, conversations and assistant replies."""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Role(str, Enum):
    """Author of a stored chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class _WireModel(BaseModel):
    """Base model serialised with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NewChatMessage(_WireModel):
    """A message to be appended to a session; id and timestamp are assigned on append."""

    session_id: str
    message: str
    role: Role
    metadata: dict[str, Any] | None = None


class ChatMessage(_WireModel):
    """A stored chat message. Never mutated after it is appended."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    session_id: str
    message: str
    role: Role
    timestamp: datetime
    metadata: dict[str, Any] | None = None


class Conversation(_WireModel):
    """Summary row for a session, refreshed on every appended message."""

    id: str
    session_id: str
    title: str | None = None
    created_at: datetime
    updated_at: datetime
    last_activity: datetime
    message_count: int = 0


class TextReply(BaseModel):
    """Plain assistant reply."""

    kind: Literal["text"] = "text"
    text: str


class ProfileReply(BaseModel):
    """Fixed profile card returned for questions about the owner."""

    kind: Literal["profile"] = "profile"
    text: str
    image_url: str
    special_formatting: Literal["profile"] = "profile"


AssistantReply = Annotated[Union[TextReply, ProfileReply], Field(discriminator="kind")]


def reply_metadata(reply: AssistantReply) -> dict[str, Any]:
    """Metadata stored alongside an assistant message so the reply kind survives storage."""
    if isinstance(reply, ProfileReply):
        return {
            "kind": reply.kind,
            "isPersonalQuery": True,
            "imageUrl": reply.image_url,
            "specialFormatting": reply.special_formatting,
        }
    return {"kind": reply.kind}
