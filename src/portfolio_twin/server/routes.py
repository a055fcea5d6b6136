"""API routes for the portfolio chat backend."""

import logging
from typing import Any, Literal

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from portfolio_twin import __version__
from portfolio_twin.chat.orchestrator import ChatOrchestrator
from portfolio_twin.chat.schema import ChatMessage, Conversation
from portfolio_twin.contact.mailer import ContactMailer, ContactSubmission
from portfolio_twin.config.schema import AppConfig
from portfolio_twin.errors import ChatValidationError
from portfolio_twin.persona.profile import build_portfolio_profile

logger = logging.getLogger(__name__)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChatRequest(_CamelModel):
    """Request body for chat endpoint."""

    message: str = Field(min_length=1)
    session_id: str = Field(min_length=1)
    is_quick_question: bool | None = None


class ChatResponse(_CamelModel):
    """Response body for chat endpoint."""

    success: bool = True
    message: str
    message_id: str
    kind: Literal["text", "profile"]
    image_url: str | None = None
    special_formatting: str | None = None


class ErrorResponse(_CamelModel):
    """Error envelope shared by all endpoints."""

    success: bool = False
    error: str
    details: list[dict[str, Any]] | None = None


class HistoryResponse(_CamelModel):
    """Response body for chat history endpoint."""

    success: bool = True
    messages: list[ChatMessage]


class ConversationListResponse(_CamelModel):
    """Recent conversation summaries."""

    success: bool = True
    conversations: list[Conversation]


class QuickQuestionsResponse(_CamelModel):
    """Quick questions offered to visitors."""

    success: bool = True
    questions: list[str]


class ProfileResponse(_CamelModel):
    """Portfolio profile document."""

    success: bool = True
    profile: dict[str, Any]


class ContactRequest(_CamelModel):
    """Contact form submission."""

    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    message: str = Field(min_length=1, max_length=2000)


class ContactResponse(_CamelModel):
    """Contact form acknowledgement."""

    success: bool = True
    message: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    model: str
    version: str


def error_response(status_code: int, error: str, details: list[dict[str, Any]] | None = None):
    """Build the JSON error envelope."""
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


def create_router(
    config: AppConfig,
    orchestrator: ChatOrchestrator,
    mailer: ContactMailer,
) -> APIRouter:
    """Create API router bound to a chat orchestrator.

    Args:
        config: Application configuration
        orchestrator: Chat turn orchestrator (owns the session store)
        mailer: Contact form mailer

    Returns:
        Configured API router
    """
    router = APIRouter()
    profile = build_portfolio_profile(config.persona)

    @router.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", model=config.model.name, version=__version__)

    @router.post(
        "/chat",
        response_model=ChatResponse,
        response_model_exclude_none=True,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def chat(request: ChatRequest) -> Any:
        """Run one chat turn and return the assistant reply.

        Args:
            request: Chat request with message, session id and quick-question flag

        Returns:
            Chat response, or the error envelope
        """
        try:
            result = await orchestrator.handle_turn(
                session_id=request.session_id,
                message=request.message,
                is_quick_question=bool(request.is_quick_question),
            )
        except ChatValidationError as e:
            return error_response(400, str(e), e.details)
        except Exception as e:
            logger.exception("Chat turn failed for session %s", request.session_id)
            return error_response(500, str(e) or "Failed to process chat message")

        reply = result.reply
        return ChatResponse(
            message=reply.text,
            message_id=result.message_id,
            kind=reply.kind,
            image_url=getattr(reply, "image_url", None),
            special_formatting=getattr(reply, "special_formatting", None),
        )

    @router.get(
        "/chat/history/{session_id}",
        response_model=HistoryResponse,
        responses={500: {"model": ErrorResponse}},
    )
    async def chat_history(session_id: str) -> Any:
        """Return every stored message of a session, oldest first."""
        try:
            messages = orchestrator.history(session_id)
        except Exception:
            logger.exception("Failed to load history for session %s", session_id)
            return error_response(500, "Failed to retrieve chat history")
        return HistoryResponse(messages=messages)

    @router.get("/conversations", response_model=ConversationListResponse)
    async def conversations(
        limit: int = Query(default=10, ge=1, le=100, description="Maximum summaries to return"),
    ) -> ConversationListResponse:
        """Most recently active conversations."""
        return ConversationListResponse(
            conversations=orchestrator.store.recent_conversations(limit=limit)
        )

    @router.get("/quick-questions", response_model=QuickQuestionsResponse)
    async def quick_questions() -> QuickQuestionsResponse:
        return QuickQuestionsResponse(questions=orchestrator.resolver.questions)

    @router.get("/portfolio/profile", response_model=ProfileResponse)
    async def portfolio_profile() -> ProfileResponse:
        return ProfileResponse(profile=profile)

    @router.post(
        "/contact",
        response_model=ContactResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def contact(request: ContactRequest) -> Any:
        """Forward a contact form message to the owner and confirm to the visitor."""
        submission = ContactSubmission(
            name=request.name, email=str(request.email), message=request.message
        )
        logger.info("Contact form submission | message_length=%d", len(submission.message))

        if not await mailer.forward(submission):
            return error_response(500, config.contact.failure_message)
        await mailer.send_auto_reply(submission)

        thanks = config.contact.thanks_message.replace("{name}", request.name)
        return ContactResponse(message=thanks)

    return router
