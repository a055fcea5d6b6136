"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from portfolio_twin import __version__
from portfolio_twin.chat.dispatcher import ResponseDispatcher
from portfolio_twin.chat.orchestrator import create_orchestrator
from portfolio_twin.chat.store import InMemorySessionStore, SessionStore
from portfolio_twin.config.schema import AppConfig
from portfolio_twin.contact.mailer import ContactMailer
from portfolio_twin.server.routes import create_router, error_response

logger = logging.getLogger(__name__)


def create_app(
    config: AppConfig,
    store: SessionStore | None = None,
    dispatcher: ResponseDispatcher | None = None,
    mailer: ContactMailer | None = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config: Application configuration
        store: Session store; a fresh in-memory store when omitted
        dispatcher: Chat model dispatcher; built from config when omitted
        mailer: Contact form mailer; built from config when omitted

    Returns:
        Configured FastAPI app
    """
    orchestrator = create_orchestrator(
        config,
        store=store if store is not None else InMemorySessionStore(),
        dispatcher=dispatcher,
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        yield
        await orchestrator.dispatcher.aclose()
        logger.info("Chat model client closed")

    app = FastAPI(
        title="portfolio-twin",
        description="Chat backend answering questions as the portfolio owner",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(_: Request, exc: RequestValidationError):
        return error_response(400, "Invalid request format", jsonable_encoder(exc.errors()))

    if mailer is None:
        mailer = ContactMailer(config.contact, config.persona)

    app.state.orchestrator = orchestrator
    app.include_router(create_router(config, orchestrator, mailer))

    logger.info("Allowed origins: %s", config.server.cors_origins)
    return app
