"""FastAPI application factory.

Learn: App factory pattern — create_app() returns a configured FastAPI
instance. Lifespan logs startup/shutdown and disposes the engine.
Middleware, CORS, error handlers and routers are all registered here.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from unievents import __version__
from unievents.api import api_router
from unievents.config import settings
from unievents.errors import register_error_handlers
from unievents.middleware.errors import UnhandledErrorMiddleware
from unievents.middleware.request_id import RequestIdMiddleware
from unievents.middleware.security import SecurityHeadersMiddleware

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle."""
    logger.info(
        "unievents.starting",
        version=__version__,
        environment=settings.environment,
        port=settings.port,
        env_admin_configured=settings.admin_account() is not None,
        strict_event_authority=settings.strict_event_authority,
    )

    yield

    logger.info("unievents.shutdown")

    from unievents.db.engine import engine
    await engine.dispose()


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    app = FastAPI(
        title="UniEvents",
        description="University event management — authentication, events, venues",
        version=__version__,
        lifespan=lifespan,
    )

    # Starlette middleware executes in reverse order of registration.
    # Request flow: RequestId → Security → CORS → UnhandledError → handler
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIdMiddleware)

    register_error_handlers(app)
    app.include_router(api_router)

    return app


# Default app instance (used by uvicorn: unievents.main:app)
app = create_app()
