"""FastAPI application factory.

Learn: App factory pattern — create_app() returns a configured FastAPI
instance. The store is passed in (or seeded fresh) and hung off
app.state, so every app instance owns its data and tests can build
as many isolated apps as they like.
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from restboard import __version__
from restboard.api import api_router
from restboard.config import settings
from restboard.store.memory import InMemoryStore, seed_store

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle.

    Learn: FastAPI lifespan replaces on_event("startup") / on_event("shutdown").
    Anything before `yield` runs at startup, after `yield` runs at shutdown.
    """
    logger.info(
        "restboard.starting",
        version=__version__,
        environment=settings.environment,
        port=settings.port,
        users=app.state.store.count("users"),
        messages=app.state.store.count("messages"),
    )

    yield

    logger.info("restboard.shutdown")


def create_app(store: Optional[InMemoryStore] = None) -> FastAPI:
    """Build and return the FastAPI application."""
    app = FastAPI(
        title="Restboard",
        description="Users and messages over REST, with bearer-token writes",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    if store is None:
        store = seed_store() if settings.seed_data else InMemoryStore()
    app.state.store = store

    # ── Middleware stack ──────────────────────────────────────
    # Note: Starlette middleware executes in reverse order of registration.
    # Request flow: RequestId → CORS → handler

    from restboard.middleware.request_id import RequestIdMiddleware

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIdMiddleware)

    app.include_router(api_router)

    return app


# Default app instance (used by uvicorn: restboard.main:app)
app = create_app()
