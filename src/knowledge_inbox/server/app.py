"""FastAPI application factory for the Knowledge Inbox HTTP API."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from knowledge_inbox.inbox import Inbox
from knowledge_inbox.server.errors import register_exception_handlers
from knowledge_inbox.server.middleware import RequestLoggingMiddleware
from knowledge_inbox.server.routes import api_router, health_router

logger = logging.getLogger(__name__)


def create_app(inbox: Inbox, cors_origins: list[str] | None = None) -> FastAPI:
    """Create the HTTP application serving one Inbox.

    Args:
        inbox: The Inbox every route operates on. Closed on shutdown.
        cors_origins: Allowed CORS origins (default: any).

    Returns:
        Configured FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Knowledge Inbox API starting (mode=%s)", inbox.mode)
        yield
        logger.info("Knowledge Inbox API shutting down")
        inbox.close()

    app = FastAPI(
        title="Knowledge Inbox API",
        description="Save notes and web pages, then ask questions about them",
        lifespan=lifespan,
    )
    app.state.inbox = inbox

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins or ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(api_router)

    return app
